"""pptx-media-audit - find where embedded media is used in a presentation.

Maps every file under ``ppt/media`` to the slides, masters, layouts, notes
and charts that reference it, names the picture shapes that place it, and
optionally groups byte-identical files.

Example:
    from pptx_media_audit import audit_package, MinimumSizeKB

    # Quick look at the 20 largest files
    result = audit_package("presentation.pptx")
    for record in result.records:
        print(record.file_name, record.size_kb, record.slides or "orphaned")

    # Detailed audit of an extracted package
    from pptx_media_audit import KindFilter, MediaAuditor

    auditor = MediaAuditor(
        kind_filter=KindFilter.IMAGES,
        mode=MinimumSizeKB(250),
        find_duplicates=True,
    )
    result = auditor.audit("extracted/")
    for diagnostic in result.diagnostics:
        print(diagnostic)
"""

from pptx_media_audit.archive import ExtractedPackage
from pptx_media_audit.auditor import AuditResult, MediaAuditor, MediaReport, audit_package
from pptx_media_audit.duplicates import DuplicateInfo, detect_duplicates
from pptx_media_audit.errors import (
    Diagnostic,
    DiagnosticType,
    PackageRootError,
    Severity,
    StageResult,
)
from pptx_media_audit.indexer import RelationshipEdge, RelationshipIndexer, UsageIndex
from pptx_media_audit.media import MediaAsset, MediaKind
from pptx_media_audit.package import PresentationPackage
from pptx_media_audit.parts import PartClass, PartReference
from pptx_media_audit.scanner import scan_media
from pptx_media_audit.selection import KindFilter, MinimumSizeKB, TopN, select_media
from pptx_media_audit.shapes import ShapeNameResolver
from pptx_media_audit.usage import UsageRecord, aggregate_usage

__version__ = "0.1.0"

__all__ = [
    # Main API
    "MediaAuditor",
    "audit_package",
    "AuditResult",
    "MediaReport",
    # Configuration
    "KindFilter",
    "TopN",
    "MinimumSizeKB",
    # Diagnostics
    "Diagnostic",
    "DiagnosticType",
    "Severity",
    "StageResult",
    "PackageRootError",
    # Pipeline stages (for advanced usage)
    "PresentationPackage",
    "ExtractedPackage",
    "scan_media",
    "RelationshipIndexer",
    "ShapeNameResolver",
    "aggregate_usage",
    "detect_duplicates",
    "select_media",
    # Data model
    "MediaAsset",
    "MediaKind",
    "PartClass",
    "PartReference",
    "RelationshipEdge",
    "UsageIndex",
    "UsageRecord",
    "DuplicateInfo",
]
