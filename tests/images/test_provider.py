"""
Tests for images.provider

Test Coverage:
- open_image(): paths, raw bytes, data URLs
- read_dimensions(): natural size
- collect_dimensions(): fallback for unreadable images
"""
import base64
import io
from urllib.parse import quote_from_bytes

import pytest
from PIL import Image

from xcard_toolkit.core.models import ImageDimensions
from xcard_toolkit.images.provider import (
    FALLBACK_DIMENSIONS,
    ImageDecodeError,
    collect_dimensions,
    open_image,
    read_dimensions,
)


def _png_bytes(size=(40, 20)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color="red").save(buffer, format="PNG")
    return buffer.getvalue()


def test_read_dimensions_from_path(sample_image):
    """Reads natural size from a file path."""
    assert read_dimensions(sample_image) == ImageDimensions(800, 400)


def test_read_dimensions_from_str_path(sample_image):
    """Accepts string paths."""
    assert read_dimensions(str(sample_image)) == ImageDimensions(800, 400)


def test_read_dimensions_from_bytes():
    """Reads natural size from encoded bytes."""
    assert read_dimensions(_png_bytes()) == ImageDimensions(40, 20)


def test_read_dimensions_from_data_url():
    """Decodes base64 data URLs."""
    # Arrange
    url = "data:image/png;base64," + base64.b64encode(_png_bytes((7, 9))).decode("ascii")

    # Act & Assert
    assert read_dimensions(url) == ImageDimensions(7, 9)


def test_read_dimensions_from_percent_encoded_data_url():
    """Decodes non-base64 data URLs through percent-decoding."""
    # Arrange
    url = "data:image/png," + quote_from_bytes(_png_bytes((5, 3)))

    # Act & Assert
    assert read_dimensions(url) == ImageDimensions(5, 3)


def test_open_image_when_data_url_payload_not_latin1_then_raises():
    """Non-Latin-1 text payloads raise ImageDecodeError."""
    with pytest.raises(ImageDecodeError, match="Unrecognized"):
        open_image("data:image/png,字")


def test_open_image_when_missing_file_then_raises(tmp_path):
    """Missing files raise ImageDecodeError."""
    with pytest.raises(ImageDecodeError, match="Could not read"):
        open_image(tmp_path / "missing.png")


def test_open_image_when_not_an_image_then_raises(tmp_path):
    """Non-image content raises ImageDecodeError."""
    # Arrange
    path = tmp_path / "notes.txt"
    path.write_text("not an image")

    # Act & Assert
    with pytest.raises(ImageDecodeError, match="Unrecognized"):
        open_image(path)


def test_open_image_when_bad_base64_then_raises():
    """Invalid base64 payloads raise ImageDecodeError."""
    with pytest.raises(ImageDecodeError, match="base64"):
        open_image("data:image/png;base64,@@@@")


def test_collect_dimensions_with_fallback(sample_image, tmp_path):
    """Unreadable images get fallback dimensions; readable ones keep theirs."""
    # Arrange
    images = [str(sample_image), str(tmp_path / "missing.png"), _png_bytes()]

    # Act
    dims = collect_dimensions(images)

    # Assert
    assert dims == {
        0: ImageDimensions(800, 400),
        1: FALLBACK_DIMENSIONS,
        2: ImageDimensions(40, 20),
    }


def test_collect_dimensions_when_text_data_url_then_fallback():
    """Undecodable text data URLs fall back instead of aborting the pass."""
    assert collect_dimensions(["data:image/png,字", _png_bytes()]) == {
        0: FALLBACK_DIMENSIONS,
        1: ImageDimensions(40, 20),
    }


def test_collect_dimensions_empty():
    """Empty image list gives empty map."""
    assert collect_dimensions([]) == {}
