"""
Color Panel

R/G/B entry fields with a preview swatch. The color only changes when
"Set Color" is pressed and all three values are valid.
"""

from PyQt6.QtWidgets import (
    QWidget, QHBoxLayout, QLabel, QLineEdit, QPushButton, QFrame, QMessageBox
)
from PyQt6.QtCore import pyqtSignal
import logging

from ...core.errors import InvalidColorInput
from ...core.interaction import InteractionController
from ...core.shapes import Color

logger = logging.getLogger(__name__)


class ColorPanel(QWidget):
    """Panel for choosing the color of new shapes."""

    color_changed = pyqtSignal(object)  # Emits the new Color

    def __init__(self, controller: InteractionController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self._init_ui()
        self._update_preview(controller.app_state.color)

    def _init_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 0, 4, 0)

        color = self.controller.app_state.color
        self.r_edit = self._add_field(layout, "R:", color.r)
        self.g_edit = self._add_field(layout, "G:", color.g)
        self.b_edit = self._add_field(layout, "B:", color.b)

        self.set_button = QPushButton("Set Color")
        self.set_button.clicked.connect(self._on_set_color)
        layout.addWidget(self.set_button)

        self.preview = QFrame()
        self.preview.setFixedSize(50, 20)
        layout.addWidget(self.preview)

    def _add_field(self, layout: QHBoxLayout, label: str, value: int) -> QLineEdit:
        layout.addWidget(QLabel(label))
        edit = QLineEdit(str(value))
        edit.setMaxLength(3)
        edit.setFixedWidth(40)
        edit.returnPressed.connect(self._on_set_color)
        layout.addWidget(edit)
        return edit

    def _update_preview(self, color: Color):
        self.preview.setStyleSheet(
            f"background-color: {color.to_hex()}; border: 1px solid black;"
        )

    def _on_set_color(self):
        """Apply the entered color, or report invalid input."""
        try:
            color = self.controller.set_color_text(
                self.r_edit.text(), self.g_edit.text(), self.b_edit.text()
            )
        except InvalidColorInput as e:
            logger.warning(f"Rejected color input: {e}")
            QMessageBox.warning(
                self,
                "Invalid Color",
                "Invalid color values. Please enter integers between 0 and 255."
            )
            return

        self._update_preview(color)
        self.color_changed.emit(color)
