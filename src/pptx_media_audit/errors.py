"""Diagnostic types and the fatal package error."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class DiagnosticType(Enum):
    """Where in the pipeline a diagnostic was raised."""

    PACKAGE = "package"  # Package root unusable
    MEDIA_DIRECTORY = "media_directory"  # ppt/media missing
    MEDIA_FILE = "media_file"  # Unreadable media file
    RELATIONSHIP = "relationship"  # Malformed or unreadable .rels
    CONTENT = "content"  # Malformed or unreadable slide XML
    HASH = "hash"  # Content hash failed
    ARCHIVE = "archive"  # Archive extraction problem


class Severity(Enum):
    """Severity levels for diagnostics."""

    WARNING = "warning"  # Some data was skipped
    INFO = "info"  # Informational


@dataclass
class Diagnostic:
    """A recoverable problem found while auditing a package."""

    diagnostic_type: DiagnosticType
    description: str
    part_uri: str = ""  # e.g., "/ppt/slides/_rels/slide1.xml.rels"
    severity: Severity = Severity.WARNING

    def __str__(self) -> str:
        location = self.part_uri or "-"
        return f"[{self.diagnostic_type.value}] {location}: {self.description}"


@dataclass
class StageResult(Generic[T]):
    """Output of one pipeline stage together with its diagnostics."""

    value: T
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == Severity.WARNING]


class PackageRootError(Exception):
    """Exception raised when the package root cannot be read at all."""

    def __init__(self, message: str, diagnostics: list[Diagnostic] | None = None):
        super().__init__(message)
        self.diagnostics = diagnostics or []


def record(diagnostics: list[Diagnostic], diagnostic: Diagnostic, logger: logging.Logger) -> None:
    """Append a diagnostic and log it at the matching level."""
    level = logging.INFO if diagnostic.severity == Severity.INFO else logging.WARNING
    logger.log(level, "%s", diagnostic)
    diagnostics.append(diagnostic)
