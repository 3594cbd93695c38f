"""
Module: layout.config

Purpose:
    Configuration for the pagination engine.
    Defines card metrics, aspect-ratio presets and the constraints
    a pagination run reads.

Key Classes:
    - AspectRatio: Supported card aspect ratios
    - Language: Display languages
    - PaginationConstraints: Immutable per-run constraints

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - layout.heights: Line metrics and chrome
    - layout.paginator: Page budget
    - cli: Builds constraints from command-line flags
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# Preview card width in CSS pixels
PREVIEW_WIDTH_PX = 360
# Horizontal padding around the content column
CONTENT_PADDING_PX = 28
DEFAULT_CONTENT_WIDTH_PX = PREVIEW_WIDTH_PX - CONTENT_PADDING_PX

# Horizontal pixels per full-width character
CHAR_UNIT_PX = 16

# Card chrome: header, content margins, action footer
CARD_TOP_PX = 52
CARD_CONTENT_MARGIN_PX = 14 + 16
CARD_FOOTER_PX = 74
CARD_FIXED_PX = CARD_TOP_PX + CARD_CONTENT_MARGIN_PX + CARD_FOOTER_PX

LINE_HEIGHT_PX = 21
PARA_GAP_PX = 8
MEDIA_GAP_PX = 10

# Height used for images whose dimensions are not known yet
UNKNOWN_IMAGE_HEIGHT_PX = 100
MIN_CARD_HEIGHT_PX = 180

MIN_LINES_PER_PAGE = 3
MIN_SUBDIVIDE_WIDTH = 20
MAX_IMAGES = 4


class AspectRatio(str, Enum):
    """Card aspect ratio presets (width:height)."""

    PORTRAIT_3_4 = "3:4"
    STORY_9_16 = "9:16"

    @property
    def parts(self) -> tuple[int, int]:
        w, h = self.value.split(":")
        return int(w), int(h)


class Language(str, Enum):
    """Display language of the card."""

    ZH = "zh"
    EN = "en"


def line_metrics(language: Language = Language.ZH) -> tuple[int, int]:
    """
    Return (line height, paragraph gap) in pixels for a display language.

    Both languages currently share the same metrics.
    """
    return LINE_HEIGHT_PX, PARA_GAP_PX


@dataclass(frozen=True)
class PaginationConstraints:
    """
    Constraints for one pagination run (immutable).

    Callers rebuild this whenever the aspect ratio, preview width or
    language changes; the engine never caches it between runs.

    Attributes:
        content_width: Width of the content column in pixels
        max_chars_per_line: Full-width characters that fit on one line
        max_page_height: Maximum card height in pixels
        fixed_chrome: Vertical space taken by header/footer/margins
        language: Display language

    Example:
        >>> c = PaginationConstraints.for_ratio(AspectRatio.PORTRAIT_3_4)
        >>> c.max_page_height, c.content_max_height
        (480, 324)
    """

    content_width: int = DEFAULT_CONTENT_WIDTH_PX
    max_chars_per_line: int = DEFAULT_CONTENT_WIDTH_PX // CHAR_UNIT_PX
    max_page_height: int = 480
    fixed_chrome: int = CARD_FIXED_PX
    language: Language = Language.ZH

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.content_width <= 0:
            raise ValueError(f"content_width must be positive: {self.content_width}")
        if self.max_chars_per_line <= 0:
            raise ValueError(
                f"max_chars_per_line must be positive: {self.max_chars_per_line}"
            )
        if self.max_page_height <= 0:
            raise ValueError(f"max_page_height must be positive: {self.max_page_height}")
        if self.fixed_chrome < 0:
            raise ValueError(f"fixed_chrome must be non-negative: {self.fixed_chrome}")

    @classmethod
    def for_ratio(
        cls,
        ratio: AspectRatio = AspectRatio.PORTRAIT_3_4,
        preview_width: int = PREVIEW_WIDTH_PX,
        language: Language = Language.ZH,
    ) -> PaginationConstraints:
        """
        Derive constraints from an aspect ratio and preview width.

        Args:
            ratio: Card aspect ratio
            preview_width: Card width in pixels
            language: Display language

        Returns:
            Constraints with the standard card chrome
        """
        w, h = AspectRatio(ratio).parts
        content_width = preview_width - CONTENT_PADDING_PX
        return cls(
            content_width=content_width,
            max_chars_per_line=max(1, content_width // CHAR_UNIT_PX),
            max_page_height=round(preview_width * h / w),
            fixed_chrome=CARD_FIXED_PX,
            language=Language(language),
        )

    @property
    def content_max_height(self) -> int:
        """Height available for content (excluding chrome). May be <= 0."""
        return self.max_page_height - self.fixed_chrome

    @property
    def lines_per_page(self) -> int:
        """Text lines that fit on one page (never fewer than 3)."""
        line_height, _ = line_metrics(self.language)
        return max(MIN_LINES_PER_PAGE, self.content_max_height // line_height)

    @property
    def max_unit_width(self) -> int:
        """Width budget of a single text unit: one page of lines."""
        return self.lines_per_page * self.max_chars_per_line

    @property
    def subdivide_width(self) -> int:
        """Width budget used when a unit alone overflows an empty page."""
        return max(MIN_SUBDIVIDE_WIDTH, self.max_unit_width // 2)
