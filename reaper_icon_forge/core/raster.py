"""
Raster buffer shared by every pipeline stage.
Plain RGBA8 pixels with straight alpha and exact pixel dimensions.
"""

from dataclasses import dataclass
from typing import Tuple

from PIL import Image


@dataclass(frozen=True)
class RasterBuffer:
    """Immutable RGBA8 pixel buffer.

    Fields:
        width: Width in pixels.
        height: Height in pixels.
        pixels: Row-major RGBA bytes, exactly width * height * 4 long.
    """
    width: int
    height: int
    pixels: bytes

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Buffer dimensions must be positive, got {self.width}x{self.height}")
        expected = self.width * self.height * 4
        if len(self.pixels) != expected:
            raise ValueError(
                f"Pixel data length {len(self.pixels)} does not match "
                f"{self.width}x{self.height} RGBA ({expected} bytes)"
            )

    @classmethod
    def from_image(cls, image: Image.Image) -> "RasterBuffer":
        """Snapshot a Pillow image of any mode as an RGBA buffer."""
        if image.mode != 'RGBA':
            image = image.convert('RGBA')
        width, height = image.size
        return cls(width, height, image.tobytes('raw', 'RGBA'))

    @classmethod
    def blank(cls, width: int, height: int) -> "RasterBuffer":
        """Fully transparent buffer."""
        return cls(width, height, bytes(width * height * 4))

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def to_image(self) -> Image.Image:
        """Fresh Pillow image; mutating it never touches this buffer."""
        return Image.frombytes('RGBA', (self.width, self.height), self.pixels)

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height}")
        offset = (y * self.width + x) * 4
        r, g, b, a = self.pixels[offset:offset + 4]
        return r, g, b, a

    def region(self, x: int, y: int, width: int, height: int) -> "RasterBuffer":
        """Copy of a rectangular area (used for inspecting sprite tiles)."""
        if x < 0 or y < 0 or x + width > self.width or y + height > self.height:
            raise ValueError(
                f"Region ({x}, {y}, {width}, {height}) outside {self.width}x{self.height}"
            )
        return RasterBuffer.from_image(self.to_image().crop((x, y, x + width, y + height)))

    def __repr__(self) -> str:
        return f"RasterBuffer({self.width}x{self.height})"
