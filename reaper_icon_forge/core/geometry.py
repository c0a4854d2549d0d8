"""
Geometry operations for REAPER Icon Forge.
Handles square cropping, exact resizing and padded resizing.
"""

import math

from PIL import Image

from reaper_icon_forge.core.raster import RasterBuffer


class GeometryOps:
    """Crop and scale operations. Input buffers are never modified."""

    # Alpha-aware high-quality filter for both up- and downscaling
    RESAMPLE = Image.Resampling.LANCZOS

    @staticmethod
    def crop_to_square(buffer: RasterBuffer) -> RasterBuffer:
        """
        Center-crop to a square along the longer axis.

        Args:
            buffer: Source buffer

        Returns:
            Square buffer with side min(width, height)
        """
        width, height = buffer.size
        if width == height:
            return buffer

        side = min(width, height)
        left = (width - side) // 2
        top = (height - side) // 2

        cropped = buffer.to_image().crop((left, top, left + side, top + side))
        return RasterBuffer.from_image(cropped)

    @staticmethod
    def scale_exact(buffer: RasterBuffer, target_w: int, target_h: int) -> RasterBuffer:
        """
        Resize to exactly target_w x target_h physical pixels.

        Args:
            buffer: Source buffer
            target_w: Output width in pixels
            target_h: Output height in pixels

        Returns:
            Resized buffer (alpha preserved)
        """
        if target_w <= 0 or target_h <= 0:
            raise ValueError(f"Target size must be positive, got {target_w}x{target_h}")

        if buffer.size == (target_w, target_h):
            return buffer

        # Pillow premultiplies RGBA internally while resampling, so
        # transparent pixels don't bleed their color into the edges.
        resized = buffer.to_image().resize((target_w, target_h), GeometryOps.RESAMPLE)
        return RasterBuffer.from_image(resized)

    @staticmethod
    def padding_pixels(target_w: int, padding: float) -> int:
        """
        Margin on each side for a padding fraction of the target width.

        Half pixels round up (45 px at 0.1 gives 5, not 4). The content
        box is target_w - 2 * margin, so it can differ from
        target_w * (1 - 2 * padding) by up to one pixel.
        """
        return int(math.floor(target_w * padding + 0.5))

    @staticmethod
    def scale_with_padding(buffer: RasterBuffer, target_w: int, target_h: int,
                           padding: float) -> RasterBuffer:
        """
        Resize into a transparent canvas leaving a uniform margin.

        The margin is the same number of pixels on both axes and is
        derived from the target width.

        Args:
            buffer: Source buffer
            target_w: Canvas width in pixels
            target_h: Canvas height in pixels
            padding: Margin as a fraction of target_w, in [0, 0.5)

        Returns:
            target_w x target_h buffer with the source inset
        """
        if target_w <= 0 or target_h <= 0:
            raise ValueError(f"Target size must be positive, got {target_w}x{target_h}")
        if not 0.0 <= padding < 0.5:
            raise ValueError(f"padding must be within [0, 0.5), got {padding}")

        pad = GeometryOps.padding_pixels(target_w, padding)
        inner_w = max(1, target_w - 2 * pad)
        inner_h = max(1, target_h - 2 * pad)

        canvas = Image.new('RGBA', (target_w, target_h), (0, 0, 0, 0))
        inner = buffer.to_image().resize((inner_w, inner_h), GeometryOps.RESAMPLE)

        # Source-over, not paste: the canvas stays transparent around the inset
        canvas.alpha_composite(inner, dest=(pad, pad))
        return RasterBuffer.from_image(canvas)
