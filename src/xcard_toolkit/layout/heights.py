"""
Module: layout.heights

Purpose:
    Estimate rendered heights without rendering: text blocks, images
    scaled to the content width, and whole pages (chrome + content).

Key Functions:
    - text_block_height(): Height of a block of paragraphs
    - image_full_height(): Displayed height of an image at a given width
    - page_content_height(): Estimated card height for a list of items
    - card_heights(): Display height per page for previews

Dependencies:
    - layout.width: estimate_width
    - layout.config: Metrics and constraints

Used By:
    - layout.paginator: Overflow checks
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

from xcard_toolkit.core.models import ImageDimensions, ImageItem, Page, PageItem, TextItem

from .config import (
    Language,
    MEDIA_GAP_PX,
    MIN_CARD_HEIGHT_PX,
    UNKNOWN_IMAGE_HEIGHT_PX,
    PaginationConstraints,
    line_metrics,
)
from .width import estimate_width


def text_block_height(
    text: str,
    chars_per_line: int,
    language: Language = Language.ZH,
) -> int:
    """
    Estimate height of a text block.

    Each newline-separated paragraph takes ceil(width / chars_per_line)
    lines, at least one. Paragraphs are separated by the paragraph gap.

    Args:
        text: Text block, paragraphs separated by newlines
        chars_per_line: Line width budget in character units
        language: Display language

    Returns:
        Height in pixels (0 for empty text)

    Example:
        >>> text_block_height("Hello world.", 20)
        21
    """
    line_height, para_gap = line_metrics(language)
    paragraphs = [p for p in text.split("\n") if p]
    total_lines = 0
    for paragraph in paragraphs:
        total_lines += max(1, math.ceil(estimate_width(paragraph) / chars_per_line))
    return total_lines * line_height + max(0, len(paragraphs) - 1) * para_gap


def image_full_height(
    dims: Optional[ImageDimensions],
    container_width: int,
) -> int:
    """
    Displayed height of an image scaled to ``container_width``.

    Unknown dimensions give UNKNOWN_IMAGE_HEIGHT_PX so an image that has
    not been decoded yet does not look huge.

    Example:
        >>> image_full_height(ImageDimensions(800, 400), 332)
        166
    """
    if dims is None or not dims.is_known:
        return UNKNOWN_IMAGE_HEIGHT_PX
    return math.ceil(container_width * dims.height / dims.width)


def content_height(
    items: Sequence[PageItem],
    chars_per_line: int,
    language: Language = Language.ZH,
) -> int:
    """Height of the content column only (no chrome)."""
    _, para_gap = line_metrics(language)
    height = 0
    prev_was_media = False
    for item in items:
        if isinstance(item, TextItem):
            if height > 0:
                height += para_gap
            height += text_block_height(item.value, chars_per_line, language)
            prev_was_media = False
        else:
            if prev_was_media:
                height += MEDIA_GAP_PX
            height += item.display_height
            prev_was_media = True
    return height


def page_content_height(
    items: Sequence[PageItem],
    constraints: PaginationConstraints,
) -> int:
    """
    Estimated card height for ``items``: fixed chrome plus content.

    A text item preceded by anything gets a paragraph gap; an image item
    directly after another image gets the smaller media gap.
    """
    return constraints.fixed_chrome + content_height(
        items, constraints.max_chars_per_line, constraints.language
    )


def media_gap_before(items: Sequence[PageItem]) -> int:
    """Gap an image appended after ``items`` would add."""
    if items and isinstance(items[-1], ImageItem):
        return MEDIA_GAP_PX
    return 0


def card_heights(
    pages: Sequence[Page],
    constraints: PaginationConstraints,
) -> List[int]:
    """
    Display height for each page.

    Short pages are floored at MIN_CARD_HEIGHT_PX; no card is taller
    than the aspect height.
    """
    return [
        min(max(MIN_CARD_HEIGHT_PX, page_content_height(page.items, constraints)),
            constraints.max_page_height)
        for page in pages
    ]
