"""
Module: pages

Purpose:
    Output of a pagination run - pages made of text blocks and
    (possibly clipped) images.

Key Classes:
    - TextItem: Contiguous block of text assigned to one page
    - ImageItem: Whole image, or a vertical slice of a taller image
    - Page: Ordered items of one card

Dependencies:
    - dataclasses (std)

Used By:
    - layout.paginator: Creates pages
    - layout.heights: Estimates page heights
    - images.cropper: Crops slices for export
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Union


@dataclass(frozen=True, slots=True)
class TextItem:
    """
    Text block on a page.

    Paragraphs inside ``value`` are separated by a single newline.
    """

    kind: ClassVar[str] = "text"

    value: str

    def to_dict(self) -> dict:
        return {"kind": self.kind, "value": self.value}


@dataclass(frozen=True, slots=True)
class ImageItem:
    """
    Image placed on a page (immutable).

    An item without clip fields shows the whole image. An item with
    ``clip_top``/``clip_height`` shows rows ``[clip_top, clip_top + clip_height)``
    of the image scaled to the content width.

    Attributes:
        ref: Opaque image reference (path, URL, bytes...) - never inspected
        image_index: 0-based index into the image list
        full_height: Full displayed height at the content width
        clip_top: Offset of the slice within the full height
        clip_height: Extent of the slice

    Invariants:
        - clip_top and clip_height are both set or both None
        - 0 <= clip_top < clip_top + clip_height <= full_height

    Example:
        >>> item = ImageItem(ref="a.png", image_index=0, full_height=900,
        ...                  clip_top=0, clip_height=324)
        >>> item.is_slice, item.display_height
        (True, 324)
    """

    kind: ClassVar[str] = "image"

    ref: Any
    image_index: int
    full_height: int
    clip_top: Optional[int] = None
    clip_height: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate clip fields on construction."""
        if self.full_height < 0:
            raise ValueError(f"full_height must be >= 0: {self.full_height}")
        if (self.clip_top is None) != (self.clip_height is None):
            raise ValueError("clip_top and clip_height must be set together")
        if self.clip_top is not None:
            if self.clip_top < 0:
                raise ValueError(f"clip_top must be >= 0: {self.clip_top}")
            if self.clip_height <= 0:
                raise ValueError(f"clip_height must be > 0: {self.clip_height}")
            if self.clip_top + self.clip_height > self.full_height:
                raise ValueError(
                    f"slice [{self.clip_top}, {self.clip_top + self.clip_height}) "
                    f"exceeds full_height {self.full_height}"
                )

    @property
    def is_slice(self) -> bool:
        """True when only part of the image is shown."""
        return self.clip_height is not None

    @property
    def display_height(self) -> int:
        """Vertical space the item occupies on its page."""
        return self.clip_height if self.clip_height is not None else self.full_height

    @property
    def clip_bottom(self) -> int:
        """End offset of the shown region (exclusive)."""
        if self.clip_top is None:
            return self.full_height
        return self.clip_top + self.clip_height

    def to_dict(self) -> dict:
        d = {
            "kind": self.kind,
            "image_index": self.image_index,
            "full_height": self.full_height,
        }
        if isinstance(self.ref, str):
            d["ref"] = self.ref
        if self.is_slice:
            d["clip_top"] = self.clip_top
            d["clip_height"] = self.clip_height
        return d


PageItem = Union[TextItem, ImageItem]


@dataclass(frozen=True, slots=True)
class Page:
    """
    Single card of content.

    Attributes:
        index: Page number (0-indexed)
        items: Ordered items on the page
    """

    index: int
    items: tuple[PageItem, ...] = ()

    @property
    def is_empty(self) -> bool:
        return len(self.items) == 0

    @property
    def text_items(self) -> tuple[TextItem, ...]:
        return tuple(i for i in self.items if isinstance(i, TextItem))

    @property
    def image_items(self) -> tuple[ImageItem, ...]:
        return tuple(i for i in self.items if isinstance(i, ImageItem))

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "items": [item.to_dict() for item in self.items],
        }
