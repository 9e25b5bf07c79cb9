"""Tests for relationship parsing and media target matching."""

from __future__ import annotations

import pytest
from lxml import etree

from pptx_media_audit.relationships import (
    Relationship,
    RelationshipCollection,
    get_rels_path,
    media_file_name,
)
from tests.fixture_loader import load_fixture_bytes


class TestMediaFileName:
    """Tests for relationship target matching."""

    @pytest.mark.parametrize(
        ("target", "expected"),
        [
            ("../media/image1.png", "image1.png"),
            ("media/image2.jpeg", "image2.jpeg"),
            ("../media/Picture With Spaces.JPG", "Picture With Spaces.JPG"),
            ("../media/nested/image5.png", "nested/image5.png"),
        ],
    )
    def test_matching_targets(self, target: str, expected: str) -> None:
        """Test targets that point into the media directory."""
        assert media_file_name(target) == expected

    @pytest.mark.parametrize(
        "target",
        [
            "../../media/image3.png",
            "/ppt/media/image4.png",
            "../slideLayouts/slideLayout1.xml",
            "../media/",
            "media",
            "",
            "../mediafiles/image1.png",
            "https://example.com/media/video.mp4",
        ],
    )
    def test_non_matching_targets(self, target: str) -> None:
        """Test targets that are ignored."""
        assert media_file_name(target) is None


class TestRelationship:
    """Tests for Relationship dataclass."""

    def test_is_external(self) -> None:
        """Test external relationship detection."""
        rel = Relationship(
            id="rId1",
            type="http://example.com/type",
            target="https://example.com/clip.mp4",
            target_mode="External",
        )
        assert rel.is_external

    def test_is_internal_by_default(self) -> None:
        """Test relationships are internal unless marked otherwise."""
        rel = Relationship(id="rId1", type="http://example.com/type", target="../media/a.png")
        assert not rel.is_external
        assert rel.media_file_name == "a.png"

    def test_external_media_is_not_embedded(self) -> None:
        """Test linked media never counts as an embedded media reference."""
        rel = Relationship(
            id="rId1",
            type="http://example.com/type",
            target="../media/linked.png",
            target_mode="External",
        )
        assert rel.media_file_name is None


class TestRelationshipCollection:
    """Tests for RelationshipCollection."""

    def test_from_xml(self) -> None:
        """Test parsing relationships from XML; entries without an Id are dropped."""
        xml = load_fixture_bytes("relationships", "media_targets.xml.rels")

        rels = RelationshipCollection.from_xml(xml)

        assert len(rels) == 8
        targets = {rel.id: rel.target for rel in rels}
        assert "" not in targets
        assert targets["rId3"] == "media/image2.jpeg"

    def test_ids_for_media(self) -> None:
        """Test collecting every ID that embeds one file."""
        xml = load_fixture_bytes("relationships", "media_targets.xml.rels")

        rels = RelationshipCollection.from_xml(xml)

        assert rels.ids_for_media("image1.png") == {"rId2", "rId4"}
        assert rels.ids_for_media("image3.png") == set()
        assert rels.ids_for_media("linked.png") == set()

    def test_iteration_preserves_document_order(self) -> None:
        """Test iterating over relationships."""
        xml = load_fixture_bytes("relationships", "media_targets.xml.rels")

        rels = RelationshipCollection.from_xml(xml)

        assert [rel.id for rel in rels][:3] == ["rId1", "rId2", "rId3"]

    def test_malformed_xml_raises(self) -> None:
        """Test malformed XML is reported to the caller."""
        xml = load_fixture_bytes("relationships", "malformed.xml.rels")

        with pytest.raises(etree.XMLSyntaxError):
            RelationshipCollection.from_xml(xml)


def test_get_rels_path() -> None:
    """Test mapping a part to its relationship file."""
    assert get_rels_path("ppt/slides/slide1.xml") == "ppt/slides/_rels/slide1.xml.rels"
    assert (
        get_rels_path("ppt/slideLayouts/slideLayout12.xml")
        == "ppt/slideLayouts/_rels/slideLayout12.xml.rels"
    )
