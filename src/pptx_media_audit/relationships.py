"""Relationship handling for presentation parts."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from lxml import etree

from pptx_media_audit.namespaces import RELATIONSHIPS

if TYPE_CHECKING:
    from collections.abc import Iterator

MEDIA_SEGMENT = "media"
PARENT_SEGMENT = ".."


def media_file_name(target: str) -> str | None:
    """Extract the media file name from a relationship target.

    At most one leading ``..`` segment is dropped; what remains must start
    with ``media/``. Everything after that first segment is the file name.

    >>> media_file_name("../media/image1.png")
    'image1.png'
    >>> media_file_name("../../media/image1.png") is None
    True
    """
    segments = target.split("/")
    if segments and segments[0] == PARENT_SEGMENT:
        segments = segments[1:]

    if len(segments) < 2 or segments[0] != MEDIA_SEGMENT:
        return None

    name = "/".join(segments[1:])
    if not name or not segments[-1]:
        return None
    return name


@dataclass(frozen=True)
class Relationship:
    """An OPC relationship from a part to another resource."""

    id: str  # Relationship ID (e.g., "rId1")
    type: str  # Relationship type URI
    target: str  # Target path as written in the .rels file
    target_mode: str = "Internal"  # "Internal" or "External"

    @property
    def is_external(self) -> bool:
        """Check if this is an external (linked) relationship."""
        return self.target_mode == "External"

    @property
    def media_file_name(self) -> str | None:
        """The embedded media file this relationship points at, if any."""
        if self.is_external:
            return None
        return media_file_name(self.target)


class RelationshipCollection:
    """Collection of relationships for a single part."""

    def __init__(self):
        self._relationships: dict[str, Relationship] = {}

    def add(self, rel: Relationship) -> None:
        """Add a relationship to the collection."""
        self._relationships[rel.id] = rel

    def ids_for_media(self, file_name: str) -> set[str]:
        """Get every relationship ID that embeds the given media file."""
        return {rel.id for rel in self if rel.media_file_name == file_name}

    def __iter__(self) -> Iterator[Relationship]:
        return iter(self._relationships.values())

    def __len__(self) -> int:
        return len(self._relationships)

    @classmethod
    def from_xml(cls, xml_content: bytes) -> RelationshipCollection:
        """Parse relationships from XML content.

        Args:
            xml_content: The raw XML bytes of the .rels file.

        Returns:
            A RelationshipCollection containing all parsed relationships.

        Raises:
            etree.XMLSyntaxError: If the content is not well-formed XML.
        """
        collection = cls()
        root = etree.fromstring(xml_content)

        ns = {"r": RELATIONSHIPS}

        for rel_elem in root.findall("r:Relationship", ns):
            rel_id = rel_elem.get("Id", "")
            target = rel_elem.get("Target", "")

            if rel_id and target:
                collection.add(
                    Relationship(
                        id=rel_id,
                        type=rel_elem.get("Type", ""),
                        target=target,
                        target_mode=rel_elem.get("TargetMode", "Internal"),
                    )
                )

        return collection


def get_rels_path(part_uri: str) -> str:
    """Get the path to the .rels file for a given part.

    For "ppt/slides/slide1.xml" returns "ppt/slides/_rels/slide1.xml.rels".
    """
    path = PurePosixPath(part_uri)
    return str(path.parent / "_rels" / (path.name + ".rels"))
