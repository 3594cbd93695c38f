"""
Module: images.cropper

Purpose:
    Cut the bitmap for a page's image item: the whole image, or the
    rows a slice covers, scaled to the content width.

Key Functions:
    - slice_box(): Crop box in natural pixels for an ImageItem
    - crop_slice(): Cropped and scaled image for an ImageItem

Dependencies:
    - PIL: Image manipulation
    - xcard_toolkit.core.models: ImageItem

Used By:
    - cli: Slice export
"""

from __future__ import annotations

from typing import Tuple

from PIL import Image

from xcard_toolkit.core.models import ImageItem


def slice_box(item: ImageItem, natural_size: Tuple[int, int]) -> Tuple[int, int, int, int]:
    """
    Crop box (left, top, right, bottom) for ``item`` in natural pixels.

    Slice offsets are expressed in displayed pixels; they are mapped back
    onto the natural image height proportionally.

    Args:
        item: Image item from a page
        natural_size: (width, height) of the source image

    Returns:
        Box suitable for ``Image.crop``

    Raises:
        ValueError: If the source or the item has no height

    Example:
        >>> item = ImageItem("a.png", 0, full_height=200, clip_top=50, clip_height=100)
        >>> slice_box(item, (400, 400))
        (0, 100, 400, 300)
    """
    width, height = natural_size
    if width <= 0 or height <= 0:
        raise ValueError(f"Source image has no area: {natural_size}")
    if item.full_height <= 0:
        raise ValueError(f"Item full_height must be positive: {item.full_height}")

    if not item.is_slice:
        return (0, 0, width, height)

    scale = height / item.full_height
    top = round(item.clip_top * scale)
    bottom = min(height, round(item.clip_bottom * scale))
    if bottom <= top:
        bottom = min(height, top + 1)
        top = bottom - 1
    return (0, top, width, bottom)


def crop_slice(
    image: Image.Image,
    item: ImageItem,
    content_width: int,
) -> Image.Image:
    """
    Bitmap for an image item at display size.

    Args:
        image: Source image at natural size
        item: Image item (whole or slice)
        content_width: Display width in pixels

    Returns:
        New image of size (content_width, item.display_height)

    Raises:
        ValueError: If sizes are not positive
    """
    if content_width <= 0:
        raise ValueError(f"content_width must be positive: {content_width}")
    box = slice_box(item, image.size)
    region = image.crop(box)
    target = (content_width, max(1, item.display_height))
    if region.size == target:
        return region
    return region.resize(target, Image.Resampling.LANCZOS)
