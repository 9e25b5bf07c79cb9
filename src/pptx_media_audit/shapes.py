"""Picture shape name resolution for slides."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, TypeVar

from lxml import etree

from pptx_media_audit.errors import Diagnostic, DiagnosticType, record
from pptx_media_audit.namespaces import NSMAP, OFFICE_DOC_RELATIONSHIPS, qualify_name
from pptx_media_audit.parts import PartClass
from pptx_media_audit.relationships import RelationshipCollection

if TYPE_CHECKING:
    from pptx_media_audit.package import PresentationPackage

logger = logging.getLogger(__name__)

T = TypeVar("T")

_EMBED = qualify_name("embed", OFFICE_DOC_RELATIONSHIPS)


class ShapeNameResolver:
    """Finds the names of picture shapes that place a media file on a slide.

    Parsed relationship files and slide trees are cached per slide number,
    so resolving many files against the same slide parses it once. A slide
    that cannot be read resolves to no names; the problem is recorded in
    :attr:`diagnostics` once per file.
    """

    def __init__(self, package: PresentationPackage) -> None:
        self._package = package
        self._ns = NSMAP
        self._rels_cache: dict[int, RelationshipCollection | None] = {}
        self._tree_cache: dict[int, etree._Element | None] = {}
        self.diagnostics: list[Diagnostic] = []

    def resolve(self, slide_number: int, file_name: str) -> list[str]:
        """Get the sorted, unique names of pictures on a slide embedding a file."""
        rels = self._slide_relationships(slide_number)
        if rels is None:
            return []

        rel_ids = rels.ids_for_media(file_name)
        if not rel_ids:
            return []

        tree = self._slide_tree(slide_number)
        if tree is None:
            return []

        names: set[str] = set()
        for pic in tree.iterfind(".//p:pic", self._ns):
            blip = pic.find("p:blipFill/a:blip", self._ns)
            if blip is None or blip.get(_EMBED) not in rel_ids:
                continue

            name = self._shape_name(pic)
            if name:
                names.add(name)

        return sorted(names)

    def _shape_name(self, pic: etree._Element) -> str | None:
        """Prefer the shape's name, fall back to its description."""
        c_nv_pr = pic.find("p:nvPicPr/p:cNvPr", self._ns)
        if c_nv_pr is None:
            return None
        return c_nv_pr.get("name") or c_nv_pr.get("descr") or None

    def _slide_relationships(self, slide_number: int) -> RelationshipCollection | None:
        if slide_number not in self._rels_cache:
            rels_uri = PartClass.SLIDE.rels_uri(slide_number)
            self._rels_cache[slide_number] = self._load(
                rels_uri,
                DiagnosticType.RELATIONSHIP,
                lambda: self._package.get_relationships(rels_uri),
            )
        return self._rels_cache[slide_number]

    def _slide_tree(self, slide_number: int) -> etree._Element | None:
        if slide_number not in self._tree_cache:
            part_uri = PartClass.SLIDE.part_uri(slide_number)
            self._tree_cache[slide_number] = self._load(
                part_uri,
                DiagnosticType.CONTENT,
                lambda: self._package.get_part_xml(part_uri),
            )
        return self._tree_cache[slide_number]

    def _load(
        self, part_uri: str, diagnostic_type: DiagnosticType, loader: Callable[[], T | None]
    ) -> T | None:
        try:
            loaded = loader()
        except (OSError, etree.XMLSyntaxError) as exc:
            record(
                self.diagnostics,
                Diagnostic(
                    diagnostic_type=diagnostic_type,
                    description=f"Cannot resolve shape names: {exc}",
                    part_uri=part_uri,
                ),
                logger,
            )
            return None

        if loaded is None:
            record(
                self.diagnostics,
                Diagnostic(
                    diagnostic_type=diagnostic_type,
                    description="Part not found; cannot resolve shape names",
                    part_uri=part_uri,
                ),
                logger,
            )
        return loaded
