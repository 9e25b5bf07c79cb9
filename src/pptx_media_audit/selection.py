"""Kind filtering and size-based selection of usage records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

from pptx_media_audit.media import MediaKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pptx_media_audit.usage import UsageRecord


class KindFilter(Enum):
    """Which media kinds to keep. OTHER media only passes ALL."""

    ALL = "all"
    IMAGES = "images"
    VIDEO = "video"
    AUDIO = "audio"

    def accepts(self, kind: MediaKind) -> bool:
        if self is KindFilter.ALL:
            return True
        return _FILTER_KINDS[self] is kind


_FILTER_KINDS = {
    KindFilter.IMAGES: MediaKind.IMAGE,
    KindFilter.VIDEO: MediaKind.VIDEO,
    KindFilter.AUDIO: MediaKind.AUDIO,
}


def _require_positive(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")


@dataclass(frozen=True)
class TopN:
    """Keep the N largest assets."""

    n: int

    def __post_init__(self) -> None:
        _require_positive("n", self.n)


@dataclass(frozen=True)
class MinimumSizeKB:
    """Keep every asset whose size in KB is at least the threshold."""

    threshold: int

    def __post_init__(self) -> None:
        _require_positive("threshold", self.threshold)


SelectionMode = Union[TopN, MinimumSizeKB]


def select_media(
    records: Iterable[UsageRecord],
    kind_filter: KindFilter = KindFilter.ALL,
    mode: SelectionMode = TopN(20),
) -> list[UsageRecord]:
    """Filter by kind, sort by size descending, then apply the selection mode.

    The sort is stable: assets of equal size keep their scan order.
    """
    candidates = [r for r in records if kind_filter.accepts(r.asset.kind)]
    candidates.sort(key=lambda r: r.asset.size_bytes, reverse=True)

    if isinstance(mode, TopN):
        return candidates[: mode.n]
    if isinstance(mode, MinimumSizeKB):
        return [r for r in candidates if r.asset.size_kb >= mode.threshold]
    raise TypeError(f"Unknown selection mode: {mode!r}")
