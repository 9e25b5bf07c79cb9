"""Relationship indexing: which parts reference which media files."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from lxml import etree

from pptx_media_audit.errors import Diagnostic, DiagnosticType, StageResult, record
from pptx_media_audit.parts import PartClass, PartReference, parse_part_number

if TYPE_CHECKING:
    from pptx_media_audit.package import PresentationPackage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelationshipEdge:
    """A relationship from a document part to an embedded media file."""

    source: PartReference
    relationship_id: str
    target_file_name: str


@dataclass(frozen=True)
class UsageIndex:
    """Read-only lookups from media file name to the parts using it."""

    slide_usage: Mapping[str, tuple[int, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    other_usage: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    edges: tuple[RelationshipEdge, ...] = ()

    def slides_for(self, file_name: str) -> tuple[int, ...]:
        return self.slide_usage.get(file_name, ())

    def other_references_for(self, file_name: str) -> tuple[str, ...]:
        return self.other_usage.get(file_name, ())

    @classmethod
    def from_edges(cls, edges: list[RelationshipEdge]) -> UsageIndex:
        slides: dict[str, set[int]] = defaultdict(set)
        others: dict[str, set[PartReference]] = defaultdict(set)

        for edge in edges:
            if edge.source.part_class is PartClass.SLIDE:
                slides[edge.target_file_name].add(edge.source.part_number)
            else:
                others[edge.target_file_name].add(edge.source)

        return cls(
            slide_usage=MappingProxyType(
                {name: tuple(sorted(numbers)) for name, numbers in slides.items()}
            ),
            other_usage=MappingProxyType(
                {
                    name: tuple(sorted({str(ref) for ref in refs}))
                    for name, refs in others.items()
                }
            ),
            edges=tuple(edges),
        )


class RelationshipIndexer:
    """Walks the relationship files of every part class in a package.

    Example:
        indexer = RelationshipIndexer(PresentationPackage(root))
        result = indexer.build()
        result.value.slides_for("image1.png")  # -> (1, 4)
    """

    def __init__(self, package: PresentationPackage, part_classes: tuple[PartClass, ...] = tuple(PartClass)):
        self._package = package
        self._part_classes = part_classes

    def collect_edges(self, part_class: PartClass) -> StageResult[list[RelationshipEdge]]:
        """Collect media edges from every relationship file of one part class.

        Files whose names don't follow ``<stem><N>.xml.rels`` are ignored.
        Unreadable or malformed files are reported and skipped, as is a
        ``_rels`` directory that cannot be listed.
        """
        result: StageResult[list[RelationshipEdge]] = StageResult(value=[])

        try:
            file_names = self._package.list_rels_files(part_class)
        except OSError as exc:
            record(
                result.diagnostics,
                Diagnostic(
                    diagnostic_type=DiagnosticType.RELATIONSHIP,
                    description=f"Cannot list relationship files: {exc}",
                    part_uri=part_class.rels_directory,
                ),
                logger,
            )
            return result

        for file_name in file_names:
            number = parse_part_number(part_class, file_name)
            if number is None:
                logger.debug("Skipping %s/%s: not a numbered part", part_class.rels_directory, file_name)
                continue

            rels_uri = f"{part_class.rels_directory}/{file_name}"
            try:
                rels = self._package.get_relationships(rels_uri)
            except (OSError, etree.XMLSyntaxError) as exc:
                record(
                    result.diagnostics,
                    Diagnostic(
                        diagnostic_type=DiagnosticType.RELATIONSHIP,
                        description=f"Skipping relationship file: {exc}",
                        part_uri=rels_uri,
                    ),
                    logger,
                )
                continue

            if rels is None:
                continue

            source = PartReference(part_class, number)
            for rel in rels:
                target = rel.media_file_name
                if target is not None:
                    result.value.append(RelationshipEdge(source, rel.id, target))

        return result

    def build(self) -> StageResult[UsageIndex]:
        """Build the slide and other-part usage indexes."""
        edges: list[RelationshipEdge] = []
        diagnostics: list[Diagnostic] = []

        for part_class in self._part_classes:
            part_result = self.collect_edges(part_class)
            edges.extend(part_result.value)
            diagnostics.extend(part_result.diagnostics)
            logger.debug("%s parts: %d media relationships", part_class.value, len(part_result.value))

        return StageResult(value=UsageIndex.from_edges(edges), diagnostics=diagnostics)
