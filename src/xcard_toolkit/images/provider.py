"""
Module: images.provider

Purpose:
    Load images from the references a caller keeps in its image list
    and discover their natural dimensions for pagination.

Key Functions:
    - open_image(): Open a reference as a PIL image
    - read_dimensions(): Natural size of one image
    - collect_dimensions(): Dimension map for a whole image list

Key Classes:
    - ImageDecodeError: Exception for unreadable images

Dependencies:
    - PIL: Image decoding

Used By:
    - cli: Dimension discovery and slice export
    - images.cropper: Source images for slices
"""

from __future__ import annotations

import base64
import binascii
import io
import logging
from pathlib import Path
from typing import Dict, Sequence, Union
from urllib.parse import unquote_to_bytes

from PIL import Image, UnidentifiedImageError

from xcard_toolkit.core.models import ImageDimensions
from xcard_toolkit.layout.config import DEFAULT_CONTENT_WIDTH_PX, UNKNOWN_IMAGE_HEIGHT_PX

logger = logging.getLogger(__name__)

ImageSource = Union[str, Path, bytes]

DATA_URL_PREFIX = "data:"
# Reported for images that fail to decode
FALLBACK_DIMENSIONS = ImageDimensions(DEFAULT_CONTENT_WIDTH_PX, UNKNOWN_IMAGE_HEIGHT_PX)


class ImageDecodeError(Exception):
    """Image reference could not be read or decoded."""
    pass


def _decode_data_url(url: str) -> bytes:
    header, sep, payload = url.partition(",")
    if not sep:
        raise ImageDecodeError("Malformed data URL: missing ','")
    if header.endswith(";base64"):
        try:
            return base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ImageDecodeError(f"Invalid base64 payload in data URL: {e}") from e
    return unquote_to_bytes(payload)


def open_image(source: ImageSource) -> Image.Image:
    """
    Open an image reference.

    Args:
        source: File path, ``data:`` URL, or raw encoded bytes

    Returns:
        PIL Image (lazy; pixel data is loaded on first access)

    Raises:
        ImageDecodeError: If the reference cannot be read or decoded
    """
    try:
        if isinstance(source, bytes):
            return Image.open(io.BytesIO(source))
        if isinstance(source, str) and source.startswith(DATA_URL_PREFIX):
            return Image.open(io.BytesIO(_decode_data_url(source)))
        return Image.open(Path(source))
    except UnidentifiedImageError as e:
        raise ImageDecodeError(f"Unrecognized image format: {_describe(source)}") from e
    except OSError as e:
        raise ImageDecodeError(f"Could not read image {_describe(source)}: {e}") from e


def read_dimensions(source: ImageSource) -> ImageDimensions:
    """
    Natural size of an image.

    Only the image header is read.

    Raises:
        ImageDecodeError: If the reference cannot be read or decoded
    """
    with open_image(source) as img:
        width, height = img.size
    return ImageDimensions(width, height)


def collect_dimensions(images: Sequence[ImageSource]) -> Dict[int, ImageDimensions]:
    """
    Build the dimension map for an image list.

    Images that fail to decode get FALLBACK_DIMENSIONS, so pagination
    still treats them as small content-width blocks.

    Returns:
        Mapping of 0-based image index to dimensions
    """
    dims: Dict[int, ImageDimensions] = {}
    for index, source in enumerate(images):
        try:
            dims[index] = read_dimensions(source)
        except ImageDecodeError as e:
            logger.warning(f"Image {index + 1}: {e}; using fallback size")
            dims[index] = FALLBACK_DIMENSIONS
    logger.debug(f"Collected dimensions for {len(dims)} images")
    return dims


def _describe(source: ImageSource) -> str:
    if isinstance(source, bytes):
        return f"<{len(source)} bytes>"
    text = str(source)
    if text.startswith(DATA_URL_PREFIX):
        return text[:32] + "..."
    return text
