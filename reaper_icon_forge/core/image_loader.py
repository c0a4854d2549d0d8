"""
Image loading for REAPER Icon Forge.
Decodes common raster formats into RasterBuffer.
"""

import logging
from io import BytesIO
from pathlib import Path
from typing import Union

from PIL import Image, UnidentifiedImageError

from reaper_icon_forge.core.errors import ImageLoadError
from reaper_icon_forge.core.raster import RasterBuffer

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = ('.png', '.jpg', '.jpeg', '.webp', '.tif', '.tiff', '.bmp', '.gif')


def _decode(image: Image.Image, label: str) -> RasterBuffer:
    # Animated GIF/WEBP: the first frame is the icon
    image.seek(0)
    buffer = RasterBuffer.from_image(image)
    logger.debug("Decoded %s (%s, %dx%d)", label, image.format, buffer.width, buffer.height)
    return buffer


def load_image(path: Union[str, Path]) -> RasterBuffer:
    """
    Load an image file from disk.
    Supports: PNG, JPG, WEBP, TIFF, BMP, GIF.

    Args:
        path: Path to image file

    Returns:
        RGBA buffer of the (first frame of the) image

    Raises:
        FileNotFoundError: If the path does not point to a file
        ImageLoadError: If the file is not a readable image
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")

    try:
        with Image.open(path) as image:
            return _decode(image, str(path))
    except (UnidentifiedImageError, OSError) as exc:
        raise ImageLoadError(f"Not a readable image: {path}") from exc


def load_image_bytes(data: bytes) -> RasterBuffer:
    """
    Decode an in-memory image (e.g. dropped or pasted data).

    Raises:
        ImageLoadError: If the bytes are not a readable image
    """
    try:
        with Image.open(BytesIO(data)) as image:
            return _decode(image, f"{len(data)} bytes")
    except (UnidentifiedImageError, OSError) as exc:
        raise ImageLoadError("Data is not a readable image") from exc


def is_supported_file(path: Union[str, Path]) -> bool:
    """Extension check used to filter dropped files before decoding."""
    return Path(path).suffix.lower() in SUPPORTED_EXTENSIONS
