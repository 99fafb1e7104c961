"""
VecDraw Canvas - the drawing area.

Forwards Qt mouse events to the InteractionController and paints the
canvas state through a PainterSurface.
"""

from PyQt6.QtWidgets import QWidget, QSizePolicy
from PyQt6.QtCore import Qt, QSize, pyqtSignal
from PyQt6.QtGui import QPainter, QMouseEvent, QPaintEvent

from ..core.interaction import InteractionController, MouseButton
from ..core.shapes import Point
from ..graphics.painter_surface import PainterSurface, to_qcolor


class DrawCanvas(QWidget):
    """
    Canvas widget for drawing and editing shapes.

    Left button draws or edits depending on the mode, right button
    deletes the shape under the cursor.
    """

    # Signals
    cursor_position = pyqtSignal(int, int)  # Pointer position in canvas units

    def __init__(self, controller: InteractionController, parent=None):
        super().__init__(parent)

        self.controller = controller
        self.settings = controller.settings

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setCursor(Qt.CursorShape.CrossCursor)
        self.setMouseTracking(True)

        controller.add_redraw_listener(self.update)

    def sizeHint(self) -> QSize:
        return QSize(self.settings.canvas_width, self.settings.canvas_height)

    @staticmethod
    def _to_point(event: QMouseEvent) -> Point:
        pos = event.position().toPoint()
        return Point(pos.x(), pos.y())

    @staticmethod
    def _to_button(button: Qt.MouseButton) -> MouseButton:
        if button == Qt.MouseButton.LeftButton:
            return MouseButton.PRIMARY
        if button == Qt.MouseButton.RightButton:
            return MouseButton.SECONDARY
        return MouseButton.OTHER

    def mousePressEvent(self, event: QMouseEvent):
        """Handle mouse press."""
        self.controller.pointer_down(self._to_point(event), self._to_button(event.button()))

    def mouseMoveEvent(self, event: QMouseEvent):
        """Handle mouse move; only left-button drags edit shapes."""
        point = self._to_point(event)
        self.cursor_position.emit(point.x, point.y)
        if event.buttons() & Qt.MouseButton.LeftButton:
            self.controller.pointer_drag(point, MouseButton.PRIMARY)

    def mouseReleaseEvent(self, event: QMouseEvent):
        """Handle mouse release."""
        self.controller.pointer_up(self._to_point(event), self._to_button(event.button()))

    def paintEvent(self, event: QPaintEvent):
        """Paint the background, committed shapes and the shape being drawn."""
        painter = QPainter(self)
        try:
            painter.fillRect(self.rect(), to_qcolor(self.settings.background))
            self.controller.render(PainterSurface(painter, self.settings.line_width))
        finally:
            painter.end()
