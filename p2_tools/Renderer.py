# p2_tools/Renderer.py
"""
Offline snapshot renderer.

Rasterises lists of kites and darts into a Pillow image. Tiles are asked for
polygon(xoff, yoff, scale) and the resulting outlines are filled per shape,
kites in color1 and darts in color2, mirroring the two-colour scheme of the
config file.
"""
import logging
from PIL import Image, ImageDraw
from p2_tools.Operations import Operations


class ImageRenderer:
    def __init__(self, width, height, color1=(205, 255, 255), color2=(0, 0, 255),
                 outline=(0, 0, 0), background=(255, 255, 255)):
        self.logger = logging.getLogger('ImageRenderer')
        self.op = Operations()
        self.width = int(width)
        self.height = int(height)
        self.kite_color = self.op.clamp_color(color1)
        self.dart_color = self.op.clamp_color(color2)
        self.outline = self.op.clamp_color(outline)
        self.background = self.op.clamp_color(background)

    @classmethod
    def from_settings(cls, settings):
        return cls(settings['width'], settings['height'],
                   color1=settings['color1'], color2=settings['color2'],
                   outline=settings['outline'])

    def new_image(self):
        return Image.new('RGB', (self.width, self.height), self.background)

    def to_pixels(self, points):
        """Flip output coordinates (y up) into image rows (y down)."""
        return [(x, self.height - y) for x, y in points]

    def draw_tiles(self, image, tiles, xoff, yoff, scale):
        """Fill and stroke every tile onto `image` in place."""
        draw = ImageDraw.Draw(image)
        outlines = self.op.to_canvas(tiles, xoff, yoff, scale)
        for tile, outline in zip(tiles, outlines):
            points = self.to_pixels(outline)
            fill = self.kite_color if tile.is_kite else self.dart_color
            draw.polygon(points, fill=fill, outline=self.outline)
        return image

    def render(self, tiles, xoff, yoff, scale):
        image = self.draw_tiles(self.new_image(), tiles, xoff, yoff, scale)
        self.logger.info(f"Rendered {len(tiles)} tiles into {self.width}x{self.height} image")
        return image

    def render_groups(self, groups, scale):
        """Render several tile lists given in pixel space, one after another.

        `groups` holds tile lists whose coordinates were already divided by
        `scale`, so the pixel mapping is a plain scale with no offset.
        """
        image = self.new_image()
        count = 0
        for tiles in groups:
            self.draw_tiles(image, tiles, 0., 0., scale)
            count += len(tiles)
        self.logger.info(f"Rendered {len(groups)} groups ({count} tiles) into {self.width}x{self.height} image")
        return image

    def save(self, image, path):
        image.save(path)
        self.logger.info(f"Saved snapshot to {path}")
        return path
