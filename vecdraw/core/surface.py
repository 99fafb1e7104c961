"""
Drawing Surface Interface

Shapes render themselves through this small set of primitives so the same
drawing code serves the on-screen canvas and the offscreen image export.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .shapes import Color


class DrawingSurface(ABC):
    """
    Abstract target for shape drawing.

    Coordinates are integer canvas units with the origin at the top-left
    and y growing downwards. The stroke width of lines belongs to the
    surface.
    """

    def __init__(self, line_width: int = 2):
        self.line_width = line_width

    @abstractmethod
    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: 'Color') -> None:
        """Stroke a line segment between two points."""
        pass

    @abstractmethod
    def fill_rect(self, x: int, y: int, width: int, height: int, color: 'Color') -> None:
        """Fill the rectangle with top-left (x, y) and the given size."""
        pass

    @abstractmethod
    def fill_oval(self, x: int, y: int, width: int, height: int, color: 'Color') -> None:
        """Fill the oval inscribed in the given bounding rectangle."""
        pass
