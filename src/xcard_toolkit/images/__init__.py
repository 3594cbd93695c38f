"""
Module: images

Purpose:
    Image collaborators of the pagination engine: dimension discovery
    for the dimension map, and slice cropping for export.

Key Functions:
    - read_dimensions(), collect_dimensions(): Natural image sizes
    - open_image(): Open a path, data URL or bytes
    - crop_slice(), slice_box(): Bitmap for a page image item

Key Classes:
    - ImageDecodeError: Exception for unreadable images

Dependencies:
    - PIL: Image decoding and manipulation

Used By:
    - xcard_toolkit.cli
"""

from .provider import (
    FALLBACK_DIMENSIONS,
    ImageDecodeError,
    collect_dimensions,
    open_image,
    read_dimensions,
)
from .cropper import crop_slice, slice_box

__all__ = [
    "FALLBACK_DIMENSIONS",
    "ImageDecodeError",
    "collect_dimensions",
    "open_image",
    "read_dimensions",
    "crop_slice",
    "slice_box",
]
