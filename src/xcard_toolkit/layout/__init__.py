"""
Module: layout

Purpose:
    Pagination and height-estimation engine.
    Converts content with inline image markers into page plans.

Key Functions:
    - paginate(): Content + images -> pages
    - segment(): Content -> text/image segments
    - reconcile_markers(): Keep markers and image list consistent
    - unitize(): Text -> packable units
    - estimate_width(): Heuristic text width

Key Classes:
    - PaginationConstraints: Page budget for a run
    - AspectRatio, Language: Presets

Dependencies:
    - xcard_toolkit.core.models: Segments, pages

Used By:
    - xcard_toolkit.cli
"""

from .config import AspectRatio, Language, PaginationConstraints
from .width import estimate_width
from .segmenter import insert_image, reconcile_markers, remove_image, segment
from .units import PARAGRAPH_BREAK, split_long_unit, unitize
from .heights import card_heights, image_full_height, page_content_height, text_block_height
from .paginator import paginate

__all__ = [
    # Config
    "AspectRatio",
    "Language",
    "PaginationConstraints",
    # Functions
    "estimate_width",
    "segment",
    "reconcile_markers",
    "insert_image",
    "remove_image",
    "PARAGRAPH_BREAK",
    "unitize",
    "split_long_unit",
    "text_block_height",
    "image_full_height",
    "page_content_height",
    "card_heights",
    "paginate",
]
