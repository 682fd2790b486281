"""Shared pytest fixtures for ClassifyIt tests."""

from __future__ import annotations

import numpy as np
import pytest
from PIL import Image, ImageFont

from classifyit.compositor import BannerCompositor
from classifyit.enums import ImageFormat, Placement
from classifyit.models import BannerSpec, SourceBitmap


def make_gradient(width: int = 100, height: int = 50) -> Image.Image:
    """Create an RGB image where every pixel differs from its neighbours."""
    ys, xs = np.mgrid[0:height, 0:width]
    arr = np.stack(
        [(xs * 7) % 256, (ys * 11) % 256, (xs + ys * 3) % 256], axis=-1
    ).astype(np.uint8)
    return Image.fromarray(arr, mode="RGB")


@pytest.fixture
def font() -> ImageFont.FreeTypeFont:
    """Pillow's built-in scalable font, independent of installed system fonts."""
    return ImageFont.load_default(size=36)


@pytest.fixture
def compositor(font) -> BannerCompositor:
    return BannerCompositor(font)


@pytest.fixture
def gradient_source() -> SourceBitmap:
    """A 100x50 RGB PNG source."""
    return SourceBitmap(image=make_gradient(100, 50), format=ImageFormat.PNG)


@pytest.fixture
def rgba_source() -> SourceBitmap:
    """A 80x40 half-transparent RGBA source."""
    img = Image.new("RGBA", (80, 40), (10, 20, 30, 100))
    return SourceBitmap(image=img, format=ImageFormat.PNG)


@pytest.fixture
def cui_spec() -> BannerSpec:
    return BannerSpec(
        background_color=(0, 255, 0),
        text_color=(0, 0, 0),
        label_text="CUI",
        banner_height=60,
        placement=Placement.CENTER,
    )


@pytest.fixture
def image_dir(tmp_path):
    """Directory with 3 valid images, 1 corrupt file and 1 subdirectory."""
    src = tmp_path / "input"
    src.mkdir()
    make_gradient(100, 50).save(src / "a.png", format="PNG")
    make_gradient(64, 32).save(src / "b.jpg", format="JPEG")
    Image.new("RGBA", (30, 30), (255, 0, 255, 128)).save(src / "c.png", format="PNG")
    (src / "corrupt.png").write_bytes(b"this is not an image")
    nested = src / "nested"
    nested.mkdir()
    make_gradient(10, 10).save(nested / "skipped.png", format="PNG")
    return src
