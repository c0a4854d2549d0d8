"""Sprite sheet assembly for toolbar icons."""

from PIL import Image

from reaper_icon_forge.core.raster import RasterBuffer


class Compositor:

    @staticmethod
    def combine_states(normal: RasterBuffer, hover: RasterBuffer, active: RasterBuffer,
                       tile_size: int) -> RasterBuffer:
        """
        Lay out normal, hover and active tiles left to right with no gaps.

        Tiles are copied, not blended, and must already be tile_size square.
        """
        for name, tile in (('normal', normal), ('hover', hover), ('active', active)):
            if tile.size != (tile_size, tile_size):
                raise ValueError(
                    f"{name} tile is {tile.width}x{tile.height}, expected {tile_size}x{tile_size}"
                )

        sheet = Image.new('RGBA', (tile_size * 3, tile_size), (0, 0, 0, 0))
        for index, tile in enumerate((normal, hover, active)):
            # Paste without a mask replaces pixels, alpha included
            sheet.paste(tile.to_image(), (index * tile_size, 0))

        return RasterBuffer.from_image(sheet)
