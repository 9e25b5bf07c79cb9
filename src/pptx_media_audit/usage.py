"""Per-media usage records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pptx_media_audit.indexer import UsageIndex
    from pptx_media_audit.media import MediaAsset
    from pptx_media_audit.shapes import ShapeNameResolver

HINT_SEPARATOR = " | "


@dataclass(frozen=True)
class UsageRecord:
    """Where one media asset is used in the package."""

    asset: MediaAsset
    slide_numbers: tuple[int, ...] = ()  # Strictly ascending
    other_references: tuple[str, ...] = ()  # e.g., ("Layout:3", "Master:1")
    shape_hints: str = ""

    @property
    def orphaned(self) -> bool:
        """True when no part in the package references the asset."""
        return not self.slide_numbers and not self.other_references


def format_shape_hint(slide_number: int, names: list[str]) -> str:
    """Render one slide's hint: "9: Picture 21, Logo" or just "9"."""
    if not names:
        return str(slide_number)
    return f"{slide_number}: {', '.join(names)}"


def build_usage_record(
    asset: MediaAsset, index: UsageIndex, resolver: ShapeNameResolver
) -> UsageRecord:
    slides = index.slides_for(asset.file_name)
    hints = [
        format_shape_hint(slide, resolver.resolve(slide, asset.file_name))
        for slide in slides
    ]
    return UsageRecord(
        asset=asset,
        slide_numbers=slides,
        other_references=index.other_references_for(asset.file_name),
        shape_hints=HINT_SEPARATOR.join(hints),
    )


def aggregate_usage(
    assets: Iterable[MediaAsset], index: UsageIndex, resolver: ShapeNameResolver
) -> list[UsageRecord]:
    """Build one usage record per asset, in the order given."""
    return [build_usage_record(asset, index, resolver) for asset in assets]
