"""
Pytest configuration and shared fixtures for SquarePad tests.

Images are built in memory with Pillow; nothing here needs a display.
"""

from pathlib import Path

import pytest
from PIL import Image

from squarepad.models.image_model import ImageData


def make_image_data(image: Image.Image, name: str = "memory.png") -> ImageData:
    """Wrap an in-memory PIL image the way ImageService does after decoding."""
    rgba = image.convert("RGBA")
    return ImageData(
        path=Path(name),
        pil_image=rgba,
        width=rgba.width,
        height=rgba.height,
        mode=image.mode,
        size_bytes=None,
        mime_type="image/png",
    )


@pytest.fixture
def solid_image():
    """Factory: solid RGBA image of the given size and color."""

    def _make(width, height, color=(255, 0, 0, 255)):
        return Image.new("RGBA", (width, height), color)

    return _make


@pytest.fixture
def red_400x200(solid_image):
    return solid_image(400, 200, (255, 0, 0, 255))


@pytest.fixture
def png_file(tmp_path, solid_image):
    """Factory: write a solid PNG into tmp_path and return its path."""

    def _write(name="input.png", width=400, height=200, color=(255, 0, 0, 255)):
        path = tmp_path / name
        solid_image(width, height, color).save(path, format="PNG")
        return path

    return _write
