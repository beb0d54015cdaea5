import json
import sys
from pathlib import Path

import pytest
from PIL import Image

# Add src to sys.path so we can import readme_slicer
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from readme_slicer.core.models import LayoutConfig


# Common test fixtures
@pytest.fixture
def gradient_image() -> Image.Image:
    """40x30 image where every pixel is unique: (x*6, y*8, 128)."""
    img = Image.new("RGB", (40, 30))
    for x in range(40):
        for y in range(30):
            img.putpixel((x, y), (x * 6, y * 8, 128))
    return img


@pytest.fixture
def blank_image() -> Image.Image:
    """Plain white 40x30 image; equal-sized crops are byte-identical."""
    return Image.new("RGB", (40, 30), color="white")


@pytest.fixture
def layout_data() -> dict:
    """Two rows: a linked row and a row with a placeholder link."""
    return {
        "rows": [
            {
                "bottomY": 10,
                "links": [
                    {"leftX": 5, "rightX": 15, "href": "https://example.com/a"},
                    {"leftX": 20, "rightX": 30, "href": "https://example.com/b"},
                ],
            },
            {
                "bottomY": 24,
                "links": [
                    {"leftX": 0, "rightX": 12, "href": "${LATEST_CONTENT_URL}"},
                ],
            },
        ]
    }


@pytest.fixture
def layout(layout_data) -> LayoutConfig:
    return LayoutConfig.from_dict(layout_data)


@pytest.fixture
def project_dir(tmp_path: Path, gradient_image, layout_data) -> Path:
    """Generator project directory with data/image.png and data/image-config.json."""
    root = tmp_path / "generator"
    data_dir = root / "data"
    data_dir.mkdir(parents=True)
    gradient_image.save(data_dir / "image.png")
    (data_dir / "image-config.json").write_text(json.dumps(layout_data), encoding="utf-8")
    return root
