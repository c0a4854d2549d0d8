import os

import pytest
from PIL import Image, ImageDraw

from reaper_icon_forge.core.raster import RasterBuffer

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def solid(width, height, color=(200, 80, 40, 255)):
    return RasterBuffer.from_image(Image.new('RGBA', (width, height), color))


def gradient(width, height):
    """Opaque image with distinct colors everywhere, so crops are detectable."""
    image = Image.new('RGBA', (width, height))
    pixels = image.load()
    for y in range(height):
        for x in range(width):
            pixels[x, y] = (x * 255 // max(1, width - 1), y * 255 // max(1, height - 1), 128, 255)
    return RasterBuffer.from_image(image)


def logo(size=96):
    """Colored circle on a transparent background."""
    image = Image.new('RGBA', (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)
    draw.ellipse((size // 8, size // 8, size - size // 8, size - size // 8), fill=(30, 144, 255, 255))
    return RasterBuffer.from_image(image)


@pytest.fixture
def source():
    return gradient(120, 80)


@pytest.fixture
def square_logo():
    return logo()
