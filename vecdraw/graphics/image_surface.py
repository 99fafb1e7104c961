"""
Offscreen Image Surface

Draws shapes into a Pillow image, used for raster export.
"""

from PIL import Image, ImageDraw

from ..core.shapes import Color, WHITE
from ..core.surface import DrawingSurface


class ImageSurface(DrawingSurface):
    """
    DrawingSurface backed by a Pillow RGB image.

    Rectangles and ovals cover the same pixels as the screen canvas:
    a fill of size (w, h) at (x, y) spans x..x+w-1 and y..y+h-1, and
    a zero-sized fill draws nothing.
    """

    def __init__(self, width: int, height: int,
                 background: Color = WHITE, line_width: int = 2):
        super().__init__(line_width)
        self.image = Image.new("RGB", (width, height), background.as_tuple())
        self._draw = ImageDraw.Draw(self.image)

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
        self._draw.line([(x1, y1), (x2, y2)], fill=color.as_tuple(),
                        width=self.line_width)

    def fill_rect(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        if width <= 0 or height <= 0:
            return
        self._draw.rectangle([x, y, x + width - 1, y + height - 1],
                             fill=color.as_tuple())

    def fill_oval(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        if width <= 0 or height <= 0:
            return
        self._draw.ellipse([x, y, x + width - 1, y + height - 1],
                           fill=color.as_tuple())
