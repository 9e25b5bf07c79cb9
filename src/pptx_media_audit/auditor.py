"""Media auditor - entry point for auditing a presentation package."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pptx_media_audit.archive import ExtractedPackage, is_presentation_archive
from pptx_media_audit.duplicates import DuplicateInfo, detect_duplicates
from pptx_media_audit.errors import Diagnostic, Severity
from pptx_media_audit.indexer import RelationshipIndexer
from pptx_media_audit.package import PresentationPackage
from pptx_media_audit.scanner import scan_media
from pptx_media_audit.selection import KindFilter, SelectionMode, TopN, select_media
from pptx_media_audit.shapes import ShapeNameResolver
from pptx_media_audit.usage import HINT_SEPARATOR, UsageRecord, aggregate_usage

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 20


@dataclass(frozen=True)
class MediaReport:
    """One selected media asset, as handed to report renderers."""

    file_name: str
    kind: str
    extension: str
    size_kb: float
    size_bytes: int
    slides: str
    other_refs: str
    shape_hints: str
    orphaned: bool
    content_hash: str | None = None
    duplicate_group_id: str | None = None
    duplicate_count: int = 1
    include_duplicates: bool = field(default=False, repr=False, compare=False)

    @classmethod
    def from_usage(
        cls,
        usage: UsageRecord,
        duplicate: DuplicateInfo | None = None,
        include_duplicates: bool = False,
    ) -> MediaReport:
        asset = usage.asset
        return cls(
            file_name=asset.file_name,
            kind=asset.kind.value,
            extension=asset.extension,
            size_kb=asset.size_kb,
            size_bytes=asset.size_bytes,
            slides=",".join(str(n) for n in usage.slide_numbers),
            other_refs=HINT_SEPARATOR.join(usage.other_references),
            shape_hints=usage.shape_hints,
            orphaned=usage.orphaned,
            content_hash=duplicate.content_hash if duplicate else None,
            duplicate_group_id=duplicate.group_id if duplicate else None,
            duplicate_count=duplicate.count if duplicate else 1,
            include_duplicates=include_duplicates,
        )

    def to_dict(self) -> dict[str, Any]:
        """Render the record with its external field names."""
        data: dict[str, Any] = {
            "fileName": self.file_name,
            "kind": self.kind,
            "extension": self.extension,
            "sizeKB": self.size_kb,
            "sizeBytes": self.size_bytes,
            "slides": self.slides,
            "otherRefs": self.other_refs,
            "shapeHints": self.shape_hints,
            "orphaned": self.orphaned,
        }
        if self.include_duplicates:
            data["contentHash"] = self.content_hash
            data["duplicateGroupId"] = self.duplicate_group_id
            data["duplicateCount"] = self.duplicate_count
        return data


@dataclass
class AuditResult:
    """Result of auditing one package."""

    records: list[MediaReport] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    root: str = ""
    total_media: int = 0

    @property
    def warning_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity == Severity.WARNING)

    @property
    def orphaned_count(self) -> int:
        return sum(1 for r in self.records if r.orphaned)

    def to_dicts(self) -> list[dict[str, Any]]:
        return [r.to_dict() for r in self.records]


class MediaAuditor:
    """Auditor for the embedded media of a decompressed presentation.

    Example:
        auditor = MediaAuditor(mode=MinimumSizeKB(500), find_duplicates=True)
        result = auditor.audit("extracted_deck/")
        for record in result.records:
            print(record.file_name, record.slides or "(unused)")
    """

    def __init__(
        self,
        kind_filter: KindFilter = KindFilter.ALL,
        mode: SelectionMode | None = None,
        find_duplicates: bool = False,
    ):
        """Initialize the auditor.

        Args:
            kind_filter: Media kinds to keep.
            mode: TopN or MinimumSizeKB selection; defaults to the top 20.
            find_duplicates: Hash media content and group identical files.
        """
        self.kind_filter = kind_filter
        self.mode = mode if mode is not None else TopN(DEFAULT_TOP_N)
        self.find_duplicates = find_duplicates

    def audit(self, root: str | Path) -> AuditResult:
        """Audit a package extracted to ``root``.

        Raises:
            PackageRootError: If the root is missing or unreadable.
        """
        package = PresentationPackage(root)
        result = AuditResult(root=str(package.root))

        scan = scan_media(package.media_dir)
        result.diagnostics.extend(scan.diagnostics)
        result.total_media = len(scan.value)
        if not scan.value:
            return result

        index = RelationshipIndexer(package).build()
        result.diagnostics.extend(index.diagnostics)

        resolver = ShapeNameResolver(package)
        usage = aggregate_usage(scan.value, index.value, resolver)
        result.diagnostics.extend(resolver.diagnostics)

        duplicates: dict[str, DuplicateInfo] = {}
        if self.find_duplicates:
            hashed = detect_duplicates(scan.value)
            duplicates = hashed.value
            result.diagnostics.extend(hashed.diagnostics)

        selected = select_media(usage, self.kind_filter, self.mode)
        result.records = [
            MediaReport.from_usage(
                record,
                duplicates.get(record.asset.file_name),
                include_duplicates=self.find_duplicates,
            )
            for record in selected
        ]

        logger.debug(
            "Selected %d of %d media files (%d warnings)",
            len(result.records),
            result.total_media,
            result.warning_count,
        )
        return result


def audit_package(
    path: str | Path,
    kind_filter: KindFilter = KindFilter.ALL,
    mode: SelectionMode | None = None,
    find_duplicates: bool = False,
) -> AuditResult:
    """Audit a decompressed package directory or a presentation archive.

    Example:
        from pptx_media_audit import audit_package

        result = audit_package("deck.pptx", find_duplicates=True)
        orphans = [r.file_name for r in result.records if r.orphaned]
    """
    path = Path(path)
    auditor = MediaAuditor(kind_filter=kind_filter, mode=mode, find_duplicates=find_duplicates)

    if is_presentation_archive(path):
        with ExtractedPackage(path) as root:
            result = auditor.audit(root)
        result.root = str(path)
        return result

    return auditor.audit(path)
