"""Embedded media assets and their kinds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

IMAGE_EXTENSIONS = {
    ".png",
    ".jpg",
    ".jpeg",
    ".jpe",
    ".gif",
    ".bmp",
    ".tif",
    ".tiff",
    ".emf",
    ".wmf",
    ".svg",
    ".webp",
    ".ico",
    ".jfif",
    ".heic",
}
VIDEO_EXTENSIONS = {
    ".mp4",
    ".m4v",
    ".mov",
    ".avi",
    ".wmv",
    ".asf",
    ".mkv",
    ".mpg",
    ".mpeg",
    ".webm",
    ".3gp",
    ".swf",
}
AUDIO_EXTENSIONS = {
    ".mp3",
    ".wav",
    ".m4a",
    ".wma",
    ".aac",
    ".ogg",
    ".flac",
    ".mid",
    ".midi",
    ".aif",
    ".aiff",
    ".au",
}


class MediaKind(Enum):
    """Broad media classification derived from the file extension."""

    IMAGE = "Image"
    VIDEO = "Video"
    AUDIO = "Audio"
    OTHER = "Other"

    @classmethod
    def from_extension(cls, extension: str) -> MediaKind:
        ext = extension.lower()
        if ext in IMAGE_EXTENSIONS:
            return cls.IMAGE
        if ext in VIDEO_EXTENSIONS:
            return cls.VIDEO
        if ext in AUDIO_EXTENSIONS:
            return cls.AUDIO
        return cls.OTHER


@dataclass(frozen=True)
class MediaAsset:
    """A file found in the package's media directory."""

    file_name: str  # Unique within ppt/media
    extension: str  # Lowercase with leading dot, "" if none
    kind: MediaKind
    size_bytes: int
    path: Path

    @property
    def size_kb(self) -> float:
        return round(self.size_bytes / 1024, 2)

    @classmethod
    def from_path(cls, path: Path, size_bytes: int) -> MediaAsset:
        extension = path.suffix.lower()
        return cls(
            file_name=path.name,
            extension=extension,
            kind=MediaKind.from_extension(extension),
            size_bytes=size_bytes,
            path=path,
        )
