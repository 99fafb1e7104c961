"""
Main Application Window for VecDraw
"""

from PyQt6.QtWidgets import (
    QMainWindow, QToolBar, QStatusBar, QLabel, QFileDialog, QMessageBox
)
from PyQt6.QtCore import Qt, QSettings
from PyQt6.QtGui import QAction, QKeySequence, QActionGroup
from pathlib import Path
from typing import Optional
import logging

from ..core.errors import StorageIOFailure
from ..core.interaction import InteractionController, Mode
from ..core.settings import EditorSettings
from ..core.shapes import Color, ShapeType
from ..io.shape_io import save_shapes, load_shapes
from ..io.raster_export import export_image
from .canvas import DrawCanvas
from .panels.color_panel import ColorPanel

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Vector Graphics Editor"


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, settings: Optional[EditorSettings] = None):
        super().__init__()

        self.settings = settings or EditorSettings()
        self.controller = InteractionController(settings=self.settings)

        self.setWindowTitle(WINDOW_TITLE)
        self.resize(self.settings.canvas_width, self.settings.canvas_height)

        # Directory used by the file dialogs
        self._last_directory = str(Path.cwd())

        # Setup UI components
        self._create_actions()
        self._create_menus()
        self._create_central_widget()
        self._create_toolbars()
        self._create_status_bar()

        # Load settings
        self._load_settings()

    def _create_actions(self):
        """Create all menu/toolbar actions."""

        # File actions
        self.action_save = QAction("&Save", self)
        self.action_save.setShortcut(QKeySequence.StandardKey.Save)
        self.action_save.setStatusTip("Save shapes to a text file")
        self.action_save.triggered.connect(self._on_save)

        self.action_load = QAction("&Load", self)
        self.action_load.setShortcut(QKeySequence.StandardKey.Open)
        self.action_load.setStatusTip("Load shapes from a text file")
        self.action_load.triggered.connect(self._on_load)

        self.action_export = QAction("&Export Image...", self)
        self.action_export.setShortcut("Ctrl+E")
        self.action_export.setStatusTip("Export the canvas as an image")
        self.action_export.triggered.connect(self._on_export)

        self.action_clear = QAction("&Clear", self)
        self.action_clear.setShortcut("Ctrl+Shift+N")
        self.action_clear.setStatusTip("Remove all shapes")
        self.action_clear.triggered.connect(self._on_clear)

        self.action_exit = QAction("E&xit", self)
        self.action_exit.setShortcut(QKeySequence.StandardKey.Quit)
        self.action_exit.triggered.connect(self.close)

        # Mode actions
        self.action_mode_draw = QAction("Draw", self)
        self.action_mode_draw.setShortcut("D")
        self.action_mode_draw.setCheckable(True)
        self.action_mode_draw.setChecked(True)
        self.action_mode_draw.setToolTip("Draw Mode (D)\nDrag to draw the selected shape")
        self.action_mode_draw.triggered.connect(
            lambda: self._set_mode(Mode.DRAW)
        )

        self.action_mode_edit = QAction("Edit", self)
        self.action_mode_edit.setShortcut("M")
        self.action_mode_edit.setCheckable(True)
        self.action_mode_edit.setToolTip(
            "Edit Mode (M)\nDrag a shape to move it, drag a line end to reshape it"
        )
        self.action_mode_edit.triggered.connect(
            lambda: self._set_mode(Mode.EDIT)
        )

        self.mode_action_group = QActionGroup(self)
        self.mode_action_group.addAction(self.action_mode_draw)
        self.mode_action_group.addAction(self.action_mode_edit)

        # Tool actions
        self.action_tool_line = QAction("Line", self)
        self.action_tool_line.setShortcut("L")
        self.action_tool_line.setCheckable(True)
        self.action_tool_line.setChecked(True)
        self.action_tool_line.setToolTip("Line Tool (L)\nDraw straight lines")
        self.action_tool_line.triggered.connect(
            lambda: self._set_tool(ShapeType.LINE)
        )

        self.action_tool_rect = QAction("Rectangle", self)
        self.action_tool_rect.setShortcut("R")
        self.action_tool_rect.setCheckable(True)
        self.action_tool_rect.setToolTip("Rectangle Tool (R)\nDraw filled rectangles")
        self.action_tool_rect.triggered.connect(
            lambda: self._set_tool(ShapeType.RECTANGLE)
        )

        self.action_tool_circle = QAction("Circle", self)
        self.action_tool_circle.setShortcut("C")
        self.action_tool_circle.setCheckable(True)
        self.action_tool_circle.setToolTip(
            "Circle Tool (C)\nDrag from the center to the edge"
        )
        self.action_tool_circle.triggered.connect(
            lambda: self._set_tool(ShapeType.CIRCLE)
        )

        # Create tool action group for mutual exclusivity
        self.tool_action_group = QActionGroup(self)
        self.tool_action_group.addAction(self.action_tool_line)
        self.tool_action_group.addAction(self.action_tool_rect)
        self.tool_action_group.addAction(self.action_tool_circle)

    def _create_menus(self):
        """Create menu bar and menus."""
        menubar = self.menuBar()

        # File menu
        file_menu = menubar.addMenu("&File")
        file_menu.addAction(self.action_save)
        file_menu.addAction(self.action_load)
        file_menu.addSeparator()
        file_menu.addAction(self.action_export)
        file_menu.addSeparator()
        file_menu.addAction(self.action_clear)
        file_menu.addSeparator()
        file_menu.addAction(self.action_exit)

        # Mode menu
        mode_menu = menubar.addMenu("&Mode")
        mode_menu.addAction(self.action_mode_draw)
        mode_menu.addAction(self.action_mode_edit)

        # Tools menu
        tools_menu = menubar.addMenu("&Tools")
        tools_menu.addAction(self.action_tool_line)
        tools_menu.addAction(self.action_tool_rect)
        tools_menu.addAction(self.action_tool_circle)

    def _create_central_widget(self):
        """Create the central canvas widget."""
        self.canvas = DrawCanvas(self.controller)
        self.setCentralWidget(self.canvas)

    def _create_toolbars(self):
        """Create toolbars."""
        # Mode and file operations along the top
        operation_toolbar = QToolBar("Operations", self)
        operation_toolbar.setObjectName("OperationToolBar")
        operation_toolbar.setMovable(False)
        operation_toolbar.addWidget(QLabel("Mode: "))
        operation_toolbar.addAction(self.action_mode_draw)
        operation_toolbar.addAction(self.action_mode_edit)
        operation_toolbar.addSeparator()
        operation_toolbar.addAction(self.action_save)
        operation_toolbar.addAction(self.action_load)
        operation_toolbar.addAction(self.action_clear)
        operation_toolbar.addAction(self.action_export)
        self.addToolBar(Qt.ToolBarArea.TopToolBarArea, operation_toolbar)

        # Shape tools and color along the bottom
        control_toolbar = QToolBar("Controls", self)
        control_toolbar.setObjectName("ControlToolBar")
        control_toolbar.setMovable(False)
        control_toolbar.addAction(self.action_tool_line)
        control_toolbar.addAction(self.action_tool_rect)
        control_toolbar.addAction(self.action_tool_circle)
        control_toolbar.addSeparator()
        self.color_panel = ColorPanel(self.controller)
        self.color_panel.color_changed.connect(self._on_color_changed)
        control_toolbar.addWidget(self.color_panel)
        self.addToolBar(Qt.ToolBarArea.BottomToolBarArea, control_toolbar)

    def _create_status_bar(self):
        """Create status bar."""
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

        self.position_label = QLabel("")
        self.status_bar.addPermanentWidget(self.position_label)
        self.canvas.cursor_position.connect(
            lambda x, y: self.position_label.setText(f"{x}, {y}")
        )

        self.status_bar.showMessage("Ready")

    def _load_settings(self):
        """Load application settings."""
        settings = QSettings("VecDraw", "VecDraw")

        geometry = settings.value("geometry")
        if geometry:
            self.restoreGeometry(geometry)

        state = settings.value("windowState")
        if state:
            self.restoreState(state)

        last_directory = settings.value("lastDirectory")
        if last_directory and Path(last_directory).is_dir():
            self._last_directory = last_directory

    def _save_settings(self):
        """Save application settings."""
        settings = QSettings("VecDraw", "VecDraw")
        settings.setValue("geometry", self.saveGeometry())
        settings.setValue("windowState", self.saveState())
        settings.setValue("lastDirectory", self._last_directory)

    def closeEvent(self, event):
        """Handle window close."""
        self._save_settings()
        event.accept()

    # Action handlers
    def _set_mode(self, mode: Mode):
        self.controller.set_mode(mode)
        self.status_bar.showMessage(f"{mode.value.capitalize()} mode", 2000)

    def _set_tool(self, tool: ShapeType):
        self.controller.set_tool(tool)
        self.status_bar.showMessage(f"{tool.value.capitalize()} tool", 2000)

    def _on_color_changed(self, color: Color):
        self.status_bar.showMessage(f"Color set to {color.r}, {color.g}, {color.b}", 2000)

    def _on_save(self):
        """Save the committed shapes."""
        filepath, _ = QFileDialog.getSaveFileName(
            self,
            "Save Shapes",
            str(Path(self._last_directory) / self.settings.default_filename),
            "Shape Files (*.txt);;All Files (*)"
        )
        if not filepath:
            return

        if not Path(filepath).suffix:
            filepath += '.txt'

        try:
            save_shapes(self.controller.canvas_state.shapes, filepath)
        except StorageIOFailure as e:
            QMessageBox.critical(self, "Save Failed", f"Error saving file:\n{e}")
            self.status_bar.showMessage("Failed to save file", 3000)
            return

        self._last_directory = str(Path(filepath).parent)
        self.setWindowTitle(f"{WINDOW_TITLE} - {Path(filepath).name}")
        self.status_bar.showMessage(f"Saved {Path(filepath).name}", 3000)

    def _on_load(self):
        """Replace the canvas with shapes from a file."""
        filepath, _ = QFileDialog.getOpenFileName(
            self,
            "Load Shapes",
            self._last_directory,
            "Shape Files (*.txt);;All Files (*)"
        )
        if not filepath:
            return

        try:
            shapes = load_shapes(filepath)
        except StorageIOFailure as e:
            QMessageBox.critical(self, "Load Failed", f"Error loading file:\n{e}")
            self.status_bar.showMessage("Failed to load file", 3000)
            return

        self.controller.load_shapes(shapes)
        self._last_directory = str(Path(filepath).parent)
        self.setWindowTitle(f"{WINDOW_TITLE} - {Path(filepath).name}")
        self.status_bar.showMessage(
            f"Loaded {len(shapes)} shapes from {Path(filepath).name}", 3000
        )

    def _on_export(self):
        """Export the committed shapes as a raster image."""
        filepath, _ = QFileDialog.getSaveFileName(
            self,
            "Export Image",
            str(Path(self._last_directory) / self.settings.default_export_filename),
            "PNG Images (*.png);;JPEG Images (*.jpg *.jpeg);;Bitmap Images (*.bmp)"
        )
        if not filepath:
            return

        if not Path(filepath).suffix:
            filepath += '.png'

        try:
            export_image(
                self.controller.canvas_state.shapes,
                filepath,
                self.canvas.width(),
                self.canvas.height(),
                background=self.settings.background,
                line_width=self.settings.line_width
            )
        except StorageIOFailure as e:
            QMessageBox.critical(self, "Export Failed", f"Error exporting image:\n{e}")
            self.status_bar.showMessage("Failed to export image", 3000)
            return

        self._last_directory = str(Path(filepath).parent)
        self.status_bar.showMessage(f"Exported {Path(filepath).name}", 3000)

    def _on_clear(self):
        """Remove all shapes."""
        self.controller.clear()
        self.status_bar.showMessage("Canvas cleared", 2000)
