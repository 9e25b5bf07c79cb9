"""pytest configuration and fixtures for pptx_media_audit tests."""

from __future__ import annotations

import io
import shutil
import zipfile
from pathlib import Path
from typing import Callable

import pytest
from lxml import etree

from pptx_media_audit import PresentationPackage
from tests.fixture_loader import PACKAGES_DIR, SCENARIO_MEDIA


def _is_xml_file(path: Path) -> bool:
    if path.name == "[Content_Types].xml":
        return True
    return path.suffix in {".xml", ".rels"}


def _copy_package(name: str, dest: Path) -> Path:
    source = PACKAGES_DIR / name
    for file_path in source.rglob("*"):
        if file_path.is_file() and _is_xml_file(file_path):
            # Validate XML fixtures up front.
            etree.fromstring(file_path.read_bytes())
    shutil.copytree(source, dest)
    return dest


def _write_media(root: Path, media: dict[str, tuple[int, bytes]]) -> None:
    media_dir = root / "ppt" / "media"
    media_dir.mkdir(parents=True, exist_ok=True)
    for name, (size, fill) in media.items():
        (media_dir / name).write_bytes(fill * size)


def _build_archive(source_dir: Path, output_path: Path) -> Path:
    buffer = io.BytesIO()

    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
        for file_path in sorted(source_dir.rglob("*")):
            if file_path.is_dir():
                continue
            zf.writestr(file_path.relative_to(source_dir).as_posix(), file_path.read_bytes())

    output_path.write_bytes(buffer.getvalue())
    return output_path


@pytest.fixture
def scenario_root(tmp_path: Path) -> Path:
    """An extracted package exercising every part class."""
    root = _copy_package("scenarios", tmp_path / "scenarios")
    _write_media(root, SCENARIO_MEDIA)
    return root


@pytest.fixture
def scenario_package(scenario_root: Path) -> PresentationPackage:
    return PresentationPackage(scenario_root)


@pytest.fixture
def scenario_pptx(scenario_root: Path, tmp_path: Path) -> Path:
    """The scenarios package zipped into a .pptx file."""
    return _build_archive(scenario_root, tmp_path / "scenarios.pptx")


@pytest.fixture
def make_package(tmp_path: Path) -> Callable[..., Path]:
    """Build an ad hoc extracted package from part contents.

    Usage: make_package({"ppt/slides/_rels/slide1.xml.rels": b"..."},
    media={"image1.png": b"..."})
    """

    def _make(
        parts: dict[str, bytes | str] | None = None,
        media: dict[str, bytes] | None = None,
        name: str = "package",
    ) -> Path:
        root = tmp_path / name
        root.mkdir()
        for uri, content in (parts or {}).items():
            path = root / uri
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, str):
                content = content.encode("utf-8")
            path.write_bytes(content)
        if media is not None:
            media_dir = root / "ppt" / "media"
            media_dir.mkdir(parents=True, exist_ok=True)
            for file_name, data in media.items():
                (media_dir / file_name).write_bytes(data)
        return root

    return _make


@pytest.fixture
def not_a_zip(tmp_path: Path) -> Path:
    """Create a .pptx file that is not a valid ZIP."""
    path = tmp_path / "not_a_zip.pptx"
    path.write_text("This is not a ZIP file")
    return path
