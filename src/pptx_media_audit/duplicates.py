"""Exact duplicate detection by content hash."""

from __future__ import annotations

import hashlib
import logging
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from pptx_media_audit.errors import Diagnostic, DiagnosticType, StageResult, record

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pptx_media_audit.media import MediaAsset

logger = logging.getLogger(__name__)

GROUP_ID_LENGTH = 8
_CHUNK_SIZE = 1024 * 1024


@dataclass(frozen=True)
class DuplicateInfo:
    """Duplicate annotation for one asset.

    ``group_id`` is only set when at least one other asset shares the hash.
    """

    content_hash: str
    group_id: str | None = None
    count: int = 1


def hash_file(path: Path) -> str:
    """SHA-256 of a file's bytes as lowercase hex."""
    digest = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def detect_duplicates(assets: Iterable[MediaAsset]) -> StageResult[dict[str, DuplicateInfo]]:
    """Hash every asset and group those with identical content.

    Returns a mapping keyed by file name. Assets that could not be hashed
    are left out of the mapping and reported as diagnostics.
    """
    result: StageResult[dict[str, DuplicateInfo]] = StageResult(value={})
    hashes: dict[str, str] = {}

    for asset in assets:
        try:
            hashes[asset.file_name] = hash_file(asset.path)
        except OSError as exc:
            record(
                result.diagnostics,
                Diagnostic(
                    diagnostic_type=DiagnosticType.HASH,
                    description=f"Cannot hash media file: {exc}",
                    part_uri=str(asset.path),
                ),
                logger,
            )

    groups: dict[str, list[str]] = defaultdict(list)
    for file_name, content_hash in hashes.items():
        groups[content_hash].append(file_name)

    for content_hash, members in groups.items():
        if len(members) > 1:
            logger.debug("Duplicate group %s: %s", content_hash[:GROUP_ID_LENGTH], ", ".join(members))
            group_id: str | None = content_hash[:GROUP_ID_LENGTH]
        else:
            group_id = None
        for file_name in members:
            result.value[file_name] = DuplicateInfo(
                content_hash=content_hash,
                group_id=group_id,
                count=len(members),
            )

    return result
