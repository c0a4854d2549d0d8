"""
Color adjustment for REAPER Icon Forge.
Derives hover/active/on states from a single source image.
"""

import math
from typing import Optional

import numpy as np

from reaper_icon_forge.core.models import HSBAdjustment
from reaper_icon_forge.core.raster import RasterBuffer


class ColorAdjuster:
    """Two-stage HSB perturbation: color controls, then hue rotation."""

    # Rec. 709 luma weights, used for desaturation
    LUMA = np.array([0.2125, 0.7154, 0.0721], dtype=np.float32)

    # RGB <-> YIQ; hue rotates the (I, Q) chroma plane around the luma axis
    RGB_TO_YIQ = np.array([
        [0.299, 0.587, 0.114],
        [0.596, -0.274, -0.322],
        [0.211, -0.523, 0.312],
    ], dtype=np.float64)
    YIQ_TO_RGB = np.linalg.inv(RGB_TO_YIQ)

    CONTRAST = 1.0

    # Pixels converted to float per band; bounds working memory for large sources
    BAND_PIXELS = 1 << 18

    @staticmethod
    def adjust_hsb(buffer: RasterBuffer, adjustment: HSBAdjustment) -> RasterBuffer:
        """
        Apply a hue/saturation/brightness adjustment.

        Saturation and brightness are applied first (contrast held at
        1.0), then the hue is rotated by adjustment.hue * pi radians.
        Alpha passes through unchanged. Rows are processed in bands so
        float working memory stays constant whatever the image size.

        Args:
            buffer: Source buffer
            adjustment: Adjustment to apply

        Returns:
            Adjusted buffer
        """
        if adjustment.is_identity:
            return buffer

        width, height = buffer.size
        pixels = np.frombuffer(buffer.pixels, dtype=np.uint8).reshape(height, width, 4)
        out = np.empty_like(pixels)
        out[..., 3] = pixels[..., 3]

        hue_matrix = ColorAdjuster._hue_matrix(adjustment.hue * math.pi)
        band_rows = max(1, ColorAdjuster.BAND_PIXELS // width)

        for top in range(0, height, band_rows):
            rows = slice(top, top + band_rows)
            rgb = pixels[rows, :, :3].astype(np.float32)
            rgb /= 255.0

            ColorAdjuster._color_controls(rgb, adjustment.saturation, adjustment.brightness)
            if hue_matrix is not None:
                rgb = rgb @ hue_matrix

            np.clip(rgb, 0.0, 1.0, out=rgb)
            rgb *= 255.0
            np.rint(rgb, out=rgb)
            out[rows, :, :3] = rgb

        return RasterBuffer(width, height, out.tobytes())

    @staticmethod
    def _color_controls(rgb: np.ndarray, saturation: float, brightness: float) -> None:
        """Saturation, brightness and contrast, in place on a float32 band."""
        if saturation != 0:
            luma = (rgb @ ColorAdjuster.LUMA)[..., None]
            rgb -= luma
            rgb *= 1.0 + saturation
            rgb += luma
        if brightness != 0:
            rgb += brightness
        if ColorAdjuster.CONTRAST != 1.0:
            rgb -= 0.5
            rgb *= ColorAdjuster.CONTRAST
            rgb += 0.5

    @staticmethod
    def _hue_matrix(angle: float) -> Optional[np.ndarray]:
        """Right-multiplied RGB matrix for a hue rotation, None for no rotation."""
        if angle == 0:
            return None

        cos_a, sin_a = math.cos(angle), math.sin(angle)
        rotation = np.array([
            [1.0, 0.0, 0.0],
            [0.0, cos_a, -sin_a],
            [0.0, sin_a, cos_a],
        ], dtype=np.float64)

        # Single combined matrix: YIQ -> rotate -> RGB
        matrix = ColorAdjuster.YIQ_TO_RGB @ rotation @ ColorAdjuster.RGB_TO_YIQ
        return matrix.T.astype(np.float32)
