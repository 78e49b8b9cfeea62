import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import image_catalog
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from image_catalog.core.models import CatalogImage
from image_catalog.layout import LayoutConfig


# Common test fixtures
@pytest.fixture
def layout_config():
    """Reference layout: Letter in picas, 3x3 grid."""
    return LayoutConfig()


@pytest.fixture
def sample_image(tmp_path: Path):
    """Create a simple test image."""
    img = Image.new("RGB", (200, 100), color="white")
    img_path = tmp_path / "sample.png"
    img.save(img_path)
    return img_path


@pytest.fixture
def image_folder(tmp_path: Path):
    """Factory writing ``count`` small images named img_00.png, img_01.png, ..."""
    def _create(count: int, name: str = "images", size=(120, 80)) -> Path:
        folder = tmp_path / name
        folder.mkdir(exist_ok=True)
        for i in range(count):
            color = (i * 20 % 256, 100, 200)
            Image.new("RGB", size, color=color).save(folder / f"img_{i:02d}.png")
        return folder
    return _create


@pytest.fixture
def catalog_images(image_folder):
    """Factory returning CatalogImages backed by real files."""
    def _create(count: int):
        folder = image_folder(count)
        return [CatalogImage.from_path(p) for p in sorted(folder.iterdir())]
    return _create
