"""
Core Models Package

Immutable data models shared by the segmenter, the paginator and the
image collaborators.

All models in this package are frozen dataclasses. A pagination run
treats its inputs as snapshots and returns fresh values; nothing is
updated in place.
"""

from .segments import ContentSegment, ImageSegment, TextSegment
from .dimensions import ImageDimensions
from .pages import ImageItem, Page, PageItem, TextItem

__all__ = [
    "ContentSegment",
    "TextSegment",
    "ImageSegment",
    "ImageDimensions",
    "PageItem",
    "TextItem",
    "ImageItem",
    "Page",
]
