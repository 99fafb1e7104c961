"""
Raster Export for VecDraw

Renders the committed shapes onto an offscreen Pillow image sized like the
canvas and encodes it as a standard image file.
"""

from typing import Iterable, Optional
import logging

from PIL import Image

from ..core.errors import StorageIOFailure
from ..core.shapes import Color, Shape, WHITE
from ..graphics.image_surface import ImageSurface

logger = logging.getLogger(__name__)


def render_image(shapes: Iterable[Shape], width: int, height: int,
                 background: Color = WHITE, line_width: int = 2) -> Image.Image:
    """
    Draw shapes in order onto a new RGB image.

    Args:
        shapes: Shapes in paint order
        width: Image width in pixels
        height: Image height in pixels
        background: Fill color of the empty canvas
        line_width: Stroke width for lines

    Returns:
        The rendered PIL image
    """
    surface = ImageSurface(width, height, background, line_width)
    for shape in shapes:
        shape.draw(surface)
    return surface.image


def export_image(shapes: Iterable[Shape], filepath: str, width: int, height: int,
                 background: Color = WHITE, line_width: int = 2,
                 image_format: Optional[str] = None) -> None:
    """
    Render shapes and save the image.

    The format follows the file extension unless image_format is given.

    Raises:
        StorageIOFailure: if the image cannot be encoded or written
    """
    image = render_image(shapes, width, height, background, line_width)
    try:
        image.save(filepath, format=image_format)
    except (OSError, ValueError) as e:
        logger.error(f"Error exporting image to {filepath}: {e}")
        raise StorageIOFailure(f"Could not export {filepath}: {e}", filepath) from e

    logger.info(f"Exported {width}x{height} image to {filepath}")
