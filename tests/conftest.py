import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import xcard_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from xcard_toolkit.layout import PaginationConstraints  # noqa: E402


# Common test fixtures
@pytest.fixture
def default_constraints():
    """Standard 3:4 card constraints (480px tall, 332px content width)."""
    return PaginationConstraints()


@pytest.fixture
def sample_image(tmp_path: Path):
    """Create a simple 800x400 test image."""
    img = Image.new("RGB", (800, 400), color="white")
    img_path = tmp_path / "sample.png"
    img.save(img_path)
    return img_path


@pytest.fixture
def tall_image(tmp_path: Path):
    """Create a 100x3000 test image with a gradient so slices differ."""
    img = Image.new("L", (100, 3000))
    img.putdata([y * 255 // 3000 for y in range(3000) for _ in range(100)])
    img_path = tmp_path / "tall.png"
    img.save(img_path)
    return img_path
