"""Extraction of zipped presentation files into a temporary directory."""

from __future__ import annotations

import logging
import tempfile
import zipfile
from pathlib import Path

from pptx_media_audit.errors import Diagnostic, DiagnosticType, PackageRootError

logger = logging.getLogger(__name__)

PRESENTATION_EXTENSIONS = {
    ".pptx",
    ".pptm",
    ".potx",
    ".potm",
    ".ppsx",
    ".ppsm",
}


def is_presentation_archive(path: Path) -> bool:
    return path.is_file() and path.suffix.lower() in PRESENTATION_EXTENSIONS


class ExtractedPackage:
    """A presentation archive unpacked into a temporary directory.

    The directory is removed when the context exits.

    Example:
        with ExtractedPackage("deck.pptx") as root:
            result = MediaAuditor().audit(root)
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._tempdir: tempfile.TemporaryDirectory[str] | None = None

    def __enter__(self) -> Path:
        return self.open()

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        self.close()

    @property
    def path(self) -> Path:
        """Get the path to the archive file."""
        return self._path

    @property
    def root(self) -> Path | None:
        """Get the extraction directory, or None when not open."""
        if self._tempdir is None:
            return None
        return Path(self._tempdir.name)

    def open(self) -> Path:
        """Extract the archive and return the extraction root."""
        if self._tempdir is not None:
            return Path(self._tempdir.name)

        tempdir = tempfile.TemporaryDirectory(prefix="pptx-media-audit-")
        try:
            with zipfile.ZipFile(self._path, "r") as zf:
                zf.extractall(tempdir.name)
        except zipfile.BadZipFile as exc:
            tempdir.cleanup()
            raise PackageRootError(
                f"Invalid ZIP file: {exc}",
                [
                    Diagnostic(
                        diagnostic_type=DiagnosticType.ARCHIVE,
                        description=f"File is not a valid ZIP archive: {exc}",
                        part_uri=str(self._path),
                    )
                ],
            ) from exc
        except FileNotFoundError as exc:
            tempdir.cleanup()
            raise PackageRootError(
                f"File not found: {self._path}",
                [
                    Diagnostic(
                        diagnostic_type=DiagnosticType.ARCHIVE,
                        description=f"File not found: {self._path}",
                        part_uri=str(self._path),
                    )
                ],
            ) from exc

        logger.debug("Extracted %s to %s", self._path, tempdir.name)
        self._tempdir = tempdir
        return Path(tempdir.name)

    def close(self) -> None:
        """Remove the extraction directory."""
        if self._tempdir is not None:
            self._tempdir.cleanup()
            self._tempdir = None
