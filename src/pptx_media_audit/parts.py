"""Presentation part classes and part references."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from pptx_media_audit.relationships import get_rels_path


class PartClass(Enum):
    """Document part classes that may reference embedded media."""

    MASTER = "Master"
    LAYOUT = "Layout"
    NOTES = "Notes"
    CHART = "Chart"
    SLIDE = "Slide"

    @property
    def directory(self) -> str:
        """Package directory holding parts of this class."""
        return _PART_LOCATIONS[self][0]

    @property
    def stem(self) -> str:
        """File name stem of parts of this class (e.g., "slideLayout")."""
        return _PART_LOCATIONS[self][1]

    @property
    def rels_directory(self) -> str:
        return f"{self.directory}/_rels"

    def part_uri(self, number: int) -> str:
        return f"{self.directory}/{self.stem}{number}.xml"

    def rels_uri(self, number: int) -> str:
        return get_rels_path(self.part_uri(number))


_PART_LOCATIONS = {
    PartClass.MASTER: ("ppt/slideMasters", "slideMaster"),
    PartClass.LAYOUT: ("ppt/slideLayouts", "slideLayout"),
    PartClass.NOTES: ("ppt/notesSlides", "notesSlide"),
    PartClass.CHART: ("ppt/charts", "chart"),
    PartClass.SLIDE: ("ppt/slides", "slide"),
}


def parse_part_number(part_class: PartClass, file_name: str) -> int | None:
    """Parse N out of a relationship file name like "slideLayout12.xml.rels".

    Returns None when the name does not follow the part class convention
    or the number is not positive.
    """
    match = re.fullmatch(rf"{re.escape(part_class.stem)}(\d+)\.xml\.rels", file_name)
    if match is None:
        return None
    number = int(match.group(1))
    return number if number > 0 else None


@dataclass(frozen=True)
class PartReference:
    """A numbered document part, e.g. slide layout 1."""

    part_class: PartClass
    part_number: int

    def __str__(self) -> str:
        return f"{self.part_class.value}:{self.part_number}"
