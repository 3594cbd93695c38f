"""
Unit tests for core models (segments, dimensions, page items).
"""

import pytest

from xcard_toolkit.core.models import (
    ImageDimensions,
    ImageItem,
    ImageSegment,
    Page,
    TextItem,
    TextSegment,
)


class TestSegments:
    """Tests for TextSegment and ImageSegment."""

    def test_to_dict_when_text_then_tagged(self):
        assert TextSegment("hi").to_dict() == {"kind": "text", "value": "hi"}

    def test_to_dict_when_image_then_tagged(self):
        assert ImageSegment(2).to_dict() == {"kind": "image", "image_index": 2}

    def test_init_when_negative_index_then_raises_error(self):
        with pytest.raises(ValueError, match="image_index"):
            ImageSegment(-1)


class TestImageDimensions:
    """Tests for ImageDimensions."""

    def test_is_known_when_positive_then_true(self):
        assert ImageDimensions(800, 400).is_known

    @pytest.mark.parametrize("width,height", [(0, 100), (100, 0), (-1, 5)])
    def test_is_known_when_not_positive_then_false(self, width, height):
        assert not ImageDimensions(width, height).is_known

    def test_aspect_when_known_then_height_over_width(self):
        assert ImageDimensions(800, 400).aspect == 0.5

    def test_from_dict_when_serialized_then_equal(self):
        dims = ImageDimensions(10, 20)
        assert ImageDimensions.from_dict(dims.to_dict()) == dims


class TestImageItem:
    """Tests for ImageItem invariants."""

    def test_display_height_when_whole_then_full_height(self):
        # Arrange
        item = ImageItem(ref="a.png", image_index=0, full_height=166)

        # Act & Assert
        assert not item.is_slice
        assert item.display_height == 166
        assert item.clip_bottom == 166

    def test_display_height_when_slice_then_clip_height(self):
        item = ImageItem(ref="a.png", image_index=0, full_height=500, clip_top=100, clip_height=200)

        assert item.is_slice
        assert item.display_height == 200
        assert item.clip_bottom == 300

    def test_init_when_only_clip_top_then_raises_error(self):
        with pytest.raises(ValueError, match="set together"):
            ImageItem(ref="a.png", image_index=0, full_height=500, clip_top=10)

    def test_init_when_slice_exceeds_full_height_then_raises_error(self):
        with pytest.raises(ValueError, match="exceeds full_height"):
            ImageItem(ref="a.png", image_index=0, full_height=100, clip_top=50, clip_height=60)

    def test_to_dict_when_slice_then_includes_clip_fields(self):
        item = ImageItem(ref="a.png", image_index=1, full_height=500, clip_top=0, clip_height=200)

        assert item.to_dict() == {
            "kind": "image",
            "image_index": 1,
            "full_height": 500,
            "ref": "a.png",
            "clip_top": 0,
            "clip_height": 200,
        }

    def test_to_dict_when_ref_not_string_then_omits_ref(self):
        item = ImageItem(ref=b"\x89PNG", image_index=0, full_height=10)

        assert "ref" not in item.to_dict()


class TestPage:
    """Tests for Page."""

    def test_is_empty_when_no_items_then_true(self):
        assert Page(index=0).is_empty

    def test_item_filters_when_mixed_then_split_by_kind(self):
        # Arrange
        text = TextItem("hello")
        image = ImageItem(ref="a.png", image_index=0, full_height=10)
        page = Page(index=3, items=(text, image))

        # Act & Assert
        assert page.text_items == (text,)
        assert page.image_items == (image,)
        assert page.to_dict()["index"] == 3
        assert len(page.to_dict()["items"]) == 2
