"""
Icon generation for REAPER Icon Forge.
Turns source images into toolbar sprite sheets, track icons and previews.
"""

from typing import Sequence

from reaper_icon_forge.core.color import ColorAdjuster
from reaper_icon_forge.core.compositor import Compositor
from reaper_icon_forge.core.geometry import GeometryOps
from reaper_icon_forge.core.models import HSBAdjustment, IconScale, StateTriple, TrackIconSize
from reaper_icon_forge.core.raster import RasterBuffer


class IconGenerator:
    """
    Pure generation functions; none of them perform I/O or keep state,
    so they can run concurrently for different parameter sets.
    """

    @staticmethod
    def prepare_state_tile(source: RasterBuffer, tile_size: int,
                           padding: float = 0.0) -> RasterBuffer:
        """
        Crop and scale one state image to a tile, without color changes.

        Args:
            source: Source buffer of any aspect ratio
            tile_size: Output edge length in pixels
            padding: Margin fraction; 0 disables padding

        Returns:
            tile_size x tile_size buffer
        """
        squared = GeometryOps.crop_to_square(source)
        if padding > 0:
            return GeometryOps.scale_with_padding(squared, tile_size, tile_size, padding)
        return GeometryOps.scale_exact(squared, tile_size, tile_size)

    @staticmethod
    def generate_toolbar_icon(source: RasterBuffer, scale: IconScale,
                              adjustments: Sequence[HSBAdjustment],
                              padding: float = 0.0) -> RasterBuffer:
        """
        Build a three-state sprite sheet from a single image (automatic mode).

        Args:
            source: Source buffer
            scale: Target toolbar scale
            adjustments: (normal, hover, active) adjustments
            padding: Margin fraction; 0 disables padding

        Returns:
            Sprite sheet of scale.sheet_size
        """
        if padding > 0:
            adjusted = IconGenerator.adjust_states(source, adjustments)
            return IconGenerator.generate_toolbar_icon_padded(adjusted, scale, padding)

        squared = GeometryOps.crop_to_square(source)
        tile = scale.tile_size
        scaled = GeometryOps.scale_exact(squared, tile, tile)
        return Compositor.combine_states(
            *(ColorAdjuster.adjust_hsb(scaled, adjustment) for adjustment in adjustments),
            tile,
        )

    @staticmethod
    def adjust_states(source: RasterBuffer,
                      adjustments: Sequence[HSBAdjustment]) -> StateTriple:
        """
        Square-crop the source once and color-adjust it for each state
        at full resolution. The result does not depend on the scale, so
        one call can feed every padded sheet of a pass.
        """
        squared = GeometryOps.crop_to_square(source)
        return StateTriple(*(
            ColorAdjuster.adjust_hsb(squared, adjustment) for adjustment in adjustments
        ))

    @staticmethod
    def generate_toolbar_icon_padded(adjusted: Sequence[RasterBuffer], scale: IconScale,
                                     padding: float) -> RasterBuffer:
        """
        Sprite sheet from already adjusted square states (see adjust_states).

        Adjusting happens before padding so the transparent margin isn't tinted.
        """
        tile = scale.tile_size
        return Compositor.combine_states(
            *(GeometryOps.scale_with_padding(state, tile, tile, padding) for state in adjusted),
            tile,
        )

    @staticmethod
    def generate_toolbar_icon_manual(images: Sequence[RasterBuffer], scale: IconScale,
                                     padding: float = 0.0) -> RasterBuffer:
        """
        Build a sprite sheet from one image per state (manual mode).

        Args:
            images: (normal, hover, active) source buffers
            scale: Target toolbar scale
            padding: Margin fraction; 0 disables padding

        Returns:
            Sprite sheet of scale.sheet_size
        """
        normal, hover, active = images
        tile = scale.tile_size
        return Compositor.combine_states(
            IconGenerator.prepare_state_tile(normal, tile, padding),
            IconGenerator.prepare_state_tile(hover, tile, padding),
            IconGenerator.prepare_state_tile(active, tile, padding),
            tile,
        )

    @staticmethod
    def generate_track_icon(source: RasterBuffer, size: TrackIconSize) -> RasterBuffer:
        """Square track icon: crop and scale, no color adjustment or padding."""
        squared = GeometryOps.crop_to_square(source)
        return GeometryOps.scale_exact(squared, size.value, size.value)

    @staticmethod
    def generate_preview(source: RasterBuffer, adjustment: HSBAdjustment,
                         size: int) -> RasterBuffer:
        """On-screen preview of one state. Never written to disk."""
        squared = GeometryOps.crop_to_square(source)
        scaled = GeometryOps.scale_exact(squared, size, size)
        return ColorAdjuster.adjust_hsb(scaled, adjustment)

    @staticmethod
    def generate_state_previews(source: RasterBuffer, adjustments: Sequence[HSBAdjustment],
                                size: int) -> StateTriple:
        """Previews for all three states of one section."""
        return StateTriple(*(
            IconGenerator.generate_preview(source, adjustment, size)
            for adjustment in adjustments
        ))
