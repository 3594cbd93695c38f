"""
Unit tests for pagination constraints and presets.
"""

import pytest

from xcard_toolkit.layout.config import (
    CARD_FIXED_PX,
    AspectRatio,
    Language,
    PaginationConstraints,
    line_metrics,
)


class TestPaginationConstraints:
    """Tests for PaginationConstraints dataclass."""

    def test_init_when_defaults_then_standard_card(self):
        # Act
        constraints = PaginationConstraints()

        # Assert
        assert constraints.content_width == 332
        assert constraints.max_chars_per_line == 20
        assert constraints.max_page_height == 480
        assert constraints.fixed_chrome == CARD_FIXED_PX == 156

    def test_for_ratio_when_3_4_then_480_high(self):
        constraints = PaginationConstraints.for_ratio(AspectRatio.PORTRAIT_3_4)

        assert constraints.max_page_height == 480
        assert constraints.content_max_height == 324

    def test_for_ratio_when_9_16_then_640_high(self):
        constraints = PaginationConstraints.for_ratio("9:16", language="en")

        assert constraints.max_page_height == 640
        assert constraints.language is Language.EN

    def test_for_ratio_when_wider_preview_then_more_chars_per_line(self):
        constraints = PaginationConstraints.for_ratio(AspectRatio.PORTRAIT_3_4, preview_width=540)

        assert constraints.content_width == 512
        assert constraints.max_chars_per_line == 32
        assert constraints.max_page_height == 720

    def test_lines_per_page_when_standard_then_floor_of_content_height(self):
        # 324 // 21 = 15 lines -> 300 width units per unit budget
        constraints = PaginationConstraints()

        assert constraints.lines_per_page == 15
        assert constraints.max_unit_width == 300
        assert constraints.subdivide_width == 150

    def test_lines_per_page_when_tiny_page_then_at_least_three(self):
        constraints = PaginationConstraints(max_page_height=CARD_FIXED_PX + 10)

        assert constraints.lines_per_page == 3

    def test_subdivide_width_when_small_budget_then_minimum_twenty(self):
        constraints = PaginationConstraints(max_chars_per_line=2, max_page_height=CARD_FIXED_PX + 10)

        assert constraints.subdivide_width == 20

    @pytest.mark.parametrize(
        "kwargs,message",
        [
            ({"content_width": 0}, "content_width"),
            ({"max_chars_per_line": 0}, "max_chars_per_line"),
            ({"max_page_height": -1}, "max_page_height"),
            ({"fixed_chrome": -1}, "fixed_chrome"),
        ],
    )
    def test_init_when_invalid_then_raises_error(self, kwargs, message):
        with pytest.raises(ValueError, match=message):
            PaginationConstraints(**kwargs)

    def test_init_when_frozen_then_cannot_mutate(self):
        constraints = PaginationConstraints()

        with pytest.raises(AttributeError):
            constraints.max_page_height = 10


def test_line_metrics_when_any_language_then_same_pair():
    assert line_metrics(Language.ZH) == line_metrics(Language.EN) == (21, 8)


def test_aspect_ratio_parts_when_9_16_then_tuple():
    assert AspectRatio.STORY_9_16.parts == (9, 16)
