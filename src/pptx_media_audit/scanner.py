"""Enumerate the embedded media of a package."""

from __future__ import annotations

import logging
from pathlib import Path

from pptx_media_audit.errors import Diagnostic, DiagnosticType, Severity, StageResult, record
from pptx_media_audit.media import MediaAsset

logger = logging.getLogger(__name__)


def scan_media(media_dir: str | Path) -> StageResult[list[MediaAsset]]:
    """List every regular file directly inside the media directory.

    Assets come back sorted by file name so repeated runs agree. A missing
    directory is not an error: the package simply has no embedded media.
    """
    media_dir = Path(media_dir)
    result: StageResult[list[MediaAsset]] = StageResult(value=[])

    if not media_dir.is_dir():
        record(
            result.diagnostics,
            Diagnostic(
                diagnostic_type=DiagnosticType.MEDIA_DIRECTORY,
                description="No media directory; package has no embedded media",
                part_uri=str(media_dir),
                severity=Severity.INFO,
            ),
            logger,
        )
        return result

    try:
        entries = sorted(media_dir.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        record(
            result.diagnostics,
            Diagnostic(
                diagnostic_type=DiagnosticType.MEDIA_DIRECTORY,
                description=f"Cannot list media directory: {exc}",
                part_uri=str(media_dir),
            ),
            logger,
        )
        return result

    for path in entries:
        try:
            if not path.is_file():
                continue
            size_bytes = path.stat().st_size
        except OSError as exc:
            record(
                result.diagnostics,
                Diagnostic(
                    diagnostic_type=DiagnosticType.MEDIA_FILE,
                    description=f"Cannot read media file: {exc}",
                    part_uri=str(path),
                ),
                logger,
            )
            continue

        result.value.append(MediaAsset.from_path(path, size_bytes))

    logger.debug("Found %d media files in %s", len(result.value), media_dir)
    return result
