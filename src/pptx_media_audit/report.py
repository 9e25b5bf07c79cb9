"""CSV and JSON rendering of audit results."""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import IO, TYPE_CHECKING

if TYPE_CHECKING:
    from pptx_media_audit.auditor import AuditResult

logger = logging.getLogger(__name__)

# Column order of the CSV export
REPORT_FIELDS = (
    "fileName",
    "kind",
    "extension",
    "sizeKB",
    "sizeBytes",
    "slides",
    "otherRefs",
    "shapeHints",
    "orphaned",
)
DUPLICATE_FIELDS = ("contentHash", "duplicateGroupId", "duplicateCount")


def report_fields(include_duplicates: bool) -> tuple[str, ...]:
    if include_duplicates:
        return REPORT_FIELDS + DUPLICATE_FIELDS
    return REPORT_FIELDS


def write_csv(result: AuditResult, stream: IO[str], include_duplicates: bool = False) -> None:
    """Write the selected records as CSV to an open text stream."""
    writer = csv.DictWriter(
        stream,
        fieldnames=report_fields(include_duplicates),
        extrasaction="ignore",
        lineterminator="\n",
    )
    writer.writeheader()
    for row in result.to_dicts():
        writer.writerow({k: "" if v is None else v for k, v in row.items()})


def export_csv(result: AuditResult, output_path: str | Path, include_duplicates: bool = False) -> None:
    """Write the selected records as CSV to a file.

    Raises:
        OSError: If the file cannot be written.
    """
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        write_csv(result, f, include_duplicates)
    logger.info("CSV written to %s", output_path)


def to_json(result: AuditResult) -> str:
    """Render the selected records as a JSON array."""
    return json.dumps(result.to_dicts(), indent=2, ensure_ascii=False)
