"""
QPainter Surface

Adapts a QPainter to the DrawingSurface primitives for on-screen rendering.
"""

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPainter, QPen, QBrush, QColor

from ..core.shapes import Color, clamp_int32
from ..core.surface import DrawingSurface


def to_qcolor(color: Color) -> QColor:
    """Convert a core Color to a QColor."""
    return QColor(color.r, color.g, color.b)


class PainterSurface(DrawingSurface):
    """
    DrawingSurface that forwards to an active QPainter.

    QPainter only takes 32-bit ints, so arguments are clamped; shapes
    moved or built past that range are drawn at the edge instead.
    """

    def __init__(self, painter: QPainter, line_width: int = 2):
        super().__init__(line_width)
        self.painter = painter

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
        self.painter.setPen(QPen(to_qcolor(color), self.line_width))
        self.painter.setBrush(QBrush(Qt.BrushStyle.NoBrush))
        self.painter.drawLine(*map(clamp_int32, (x1, y1, x2, y2)))

    def fill_rect(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        self.painter.fillRect(*map(clamp_int32, (x, y, width, height)), to_qcolor(color))

    def fill_oval(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        self.painter.setPen(Qt.PenStyle.NoPen)
        self.painter.setBrush(QBrush(to_qcolor(color)))
        self.painter.drawEllipse(*map(clamp_int32, (x, y, width, height)))
