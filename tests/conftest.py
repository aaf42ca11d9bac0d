import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import passport_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from passport_toolkit.core.models import Element, Paint
from passport_toolkit.sheet.host import RasterDocumentHost


# Common test fixtures
@pytest.fixture
def photo_image():
    """A small two-tone portrait image (top half red, bottom half blue)."""
    img = Image.new("RGB", (70, 90), color=(255, 0, 0))
    img.paste((0, 0, 255), (0, 45, 70, 90))
    return img


@pytest.fixture
def sample_image(tmp_path: Path, photo_image):
    """Photo fixture saved to disk."""
    img_path = tmp_path / "photo.png"
    photo_image.save(img_path)
    return img_path


@pytest.fixture
def host():
    return RasterDocumentHost()


@pytest.fixture
def photo_element(host, photo_image):
    """Image element registered and selected on the host."""
    element = host.add(Element(
        name="photo",
        x=40,
        y=25,
        width=photo_image.width,
        height=photo_image.height,
        fills=[Paint.from_image(photo_image)],
    ))
    host.select(element)
    return element
