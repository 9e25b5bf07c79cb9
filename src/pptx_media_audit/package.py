"""Decompressed presentation package access.

A PPTX file is an OPC package - a ZIP archive containing XML parts and
relationships. This module reads one that has already been extracted to a
directory; see :mod:`pptx_media_audit.archive` for the extraction step.
"""

from __future__ import annotations

import os
from pathlib import Path, PurePosixPath

from lxml import etree

from pptx_media_audit.errors import Diagnostic, DiagnosticType, PackageRootError
from pptx_media_audit.parts import PartClass
from pptx_media_audit.relationships import RelationshipCollection

MEDIA_DIRECTORY = "ppt/media"


class PresentationPackage:
    """A presentation package extracted to a directory on disk.

    Provides read access to parts and their relationships. Raw part bytes are
    cached for the lifetime of the instance.
    """

    def __init__(self, root: str | Path):
        self._root = Path(root)
        self._part_cache: dict[str, bytes] = {}
        self._check_root()

    def _check_root(self) -> None:
        if not self._root.is_dir():
            description = (
                f"Package root is not a directory: {self._root}"
                if self._root.exists()
                else f"Package root not found: {self._root}"
            )
            raise PackageRootError(
                description,
                [Diagnostic(DiagnosticType.PACKAGE, description, part_uri=str(self._root))],
            )

        try:
            os.listdir(self._root)
        except OSError as exc:
            description = f"Package root is not readable: {exc}"
            raise PackageRootError(
                description,
                [Diagnostic(DiagnosticType.PACKAGE, description, part_uri=str(self._root))],
            ) from exc

    @property
    def root(self) -> Path:
        """Get the package root directory."""
        return self._root

    @property
    def media_dir(self) -> Path:
        """Get the directory holding embedded media."""
        return self.path_for(MEDIA_DIRECTORY)

    def path_for(self, part_uri: str) -> Path:
        """Map a package-relative part URI to a file system path."""
        return self._root.joinpath(*PurePosixPath(part_uri.lstrip("/")).parts)

    def get_part_content(self, part_uri: str) -> bytes | None:
        """Get the raw content of a part, or None if it does not exist.

        Raises:
            OSError: If the part exists but cannot be read.
        """
        key = part_uri.lstrip("/")
        if key in self._part_cache:
            return self._part_cache[key]

        path = self.path_for(key)
        if not path.is_file():
            return None

        content = path.read_bytes()
        self._part_cache[key] = content
        return content

    def get_part_xml(self, part_uri: str) -> etree._Element | None:
        """Get the parsed XML content of a part, or None if it does not exist.

        Raises:
            OSError: If the part cannot be read.
            etree.XMLSyntaxError: If the part is not well-formed XML.
        """
        content = self.get_part_content(part_uri)
        if content is None:
            return None
        return etree.fromstring(content)

    def get_relationships(self, rels_uri: str) -> RelationshipCollection | None:
        """Load a relationship file, or None if it does not exist.

        Raises:
            OSError: If the file cannot be read.
            etree.XMLSyntaxError: If the file is not well-formed XML.
        """
        content = self.get_part_content(rels_uri)
        if content is None:
            return None
        return RelationshipCollection.from_xml(content)

    def list_rels_files(self, part_class: PartClass) -> list[str]:
        """List the relationship file names in a part class's _rels directory.

        Returns file names only, sorted, and an empty list when the directory
        does not exist.

        Raises:
            OSError: If the directory exists but cannot be listed.
        """
        rels_dir = self.path_for(part_class.rels_directory)
        if not rels_dir.is_dir():
            return []
        return sorted(entry.name for entry in rels_dir.iterdir() if entry.is_file())
