"""Tests for media directory scanning."""

from __future__ import annotations

from pathlib import Path

from pptx_media_audit.errors import DiagnosticType, Severity
from pptx_media_audit.media import MediaKind
from pptx_media_audit.scanner import scan_media
from tests.fixture_loader import SCENARIO_MEDIA


class TestScanMedia:
    """Tests for scan_media."""

    def test_lists_every_file_sorted(self, scenario_root: Path) -> None:
        """Test all media files are found in name order."""
        result = scan_media(scenario_root / "ppt" / "media")

        assert [a.file_name for a in result.value] == sorted(SCENARIO_MEDIA)
        assert result.diagnostics == []

    def test_asset_fields(self, scenario_root: Path) -> None:
        """Test name, extension, kind and size are extracted."""
        result = scan_media(scenario_root / "ppt" / "media")
        assets = {a.file_name: a for a in result.value}

        image = assets["image59.png"]
        assert image.extension == ".png"
        assert image.kind == MediaKind.IMAGE
        assert image.size_bytes == 300_000
        assert image.size_kb == 292.97
        assert image.path == scenario_root / "ppt" / "media" / "image59.png"

        assert assets["video1.mp4"].kind == MediaKind.VIDEO
        assert assets["audio1.mp3"].kind == MediaKind.AUDIO
        assert assets["readme.bin"].kind == MediaKind.OTHER

    def test_extension_is_lowercased(self, make_package) -> None:
        root = make_package(media={"Photo.JPEG": b"x", "noext": b"y"})

        assets = {a.file_name: a for a in scan_media(root / "ppt" / "media").value}

        assert assets["Photo.JPEG"].extension == ".jpeg"
        assert assets["Photo.JPEG"].kind == MediaKind.IMAGE
        assert assets["noext"].extension == ""
        assert assets["noext"].kind == MediaKind.OTHER

    def test_subdirectories_are_ignored(self, make_package) -> None:
        """Test scanning is not recursive."""
        root = make_package(
            parts={"ppt/media/nested/image9.png": b"nested"},
            media={"image1.png": b"top"},
        )

        result = scan_media(root / "ppt" / "media")

        assert [a.file_name for a in result.value] == ["image1.png"]

    def test_missing_directory_is_informational(self, tmp_path: Path) -> None:
        """Test a package without media yields no assets and an info diagnostic."""
        result = scan_media(tmp_path / "ppt" / "media")

        assert result.value == []
        assert len(result.diagnostics) == 1
        assert result.diagnostics[0].diagnostic_type == DiagnosticType.MEDIA_DIRECTORY
        assert result.diagnostics[0].severity == Severity.INFO
        assert result.warnings == []

    def test_unlistable_directory_is_a_warning(self, make_package, monkeypatch) -> None:
        """Test a media directory that cannot be listed yields no assets and a warning."""
        root = make_package(media={"image1.png": b"x"})
        media_dir = root / "ppt" / "media"
        original_iterdir = Path.iterdir

        def iterdir(self: Path):
            if self == media_dir:
                raise PermissionError(13, "Permission denied", str(self))
            return original_iterdir(self)

        monkeypatch.setattr(Path, "iterdir", iterdir)

        result = scan_media(media_dir)

        assert result.value == []
        assert len(result.warnings) == 1
        assert result.warnings[0].diagnostic_type == DiagnosticType.MEDIA_DIRECTORY
        assert result.warnings[0].part_uri == str(media_dir)
