"""
Interaction State Machine for VecDraw

Turns pointer events into edits of the CanvasState, according to the
current mode (Draw or Edit), the selected tool and the current color.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, List, Optional
import logging

from .canvas_state import ActiveSelection, CanvasState
from .settings import EditorSettings
from .shapes import BLACK, Color, Line, Point, Shape, ShapeType, create_shape
from .surface import DrawingSurface

logger = logging.getLogger(__name__)


class EditorState(Enum):
    """Gesture currently being performed."""
    IDLE = "idle"
    DRAWING = "drawing"
    EDITING_MOVE = "editing_move"
    EDITING_ENDPOINT = "editing_endpoint"


class Mode(Enum):
    """What a primary-button drag does."""
    DRAW = "draw"
    EDIT = "edit"


class MouseButton(Enum):
    """Pointer buttons as seen by the editor."""
    PRIMARY = "primary"
    SECONDARY = "secondary"
    OTHER = "other"


@dataclass
class AppState:
    """User-selected mode, tool and color, set from the GUI controls."""
    mode: Mode = Mode.DRAW
    tool: ShapeType = ShapeType.LINE
    color: Color = field(default_factory=lambda: BLACK)


class InteractionController:
    """
    Pointer-driven editing of a CanvasState.

    Draw mode: press records an anchor, each drag rebuilds the in-progress
    shape from the anchor to the pointer, release commits it.

    Edit mode: press grabs the first shape within the hit radius; dragging
    moves it incrementally, or moves a grabbed line endpoint to the pointer.
    Release lets go of the shape.

    A secondary-button press deletes the shape under the pointer in either
    mode. All changes happen synchronously and notify redraw listeners.
    """

    def __init__(self, canvas_state: Optional[CanvasState] = None,
                 app_state: Optional[AppState] = None,
                 settings: Optional[EditorSettings] = None):
        self.settings = settings or EditorSettings()
        self.canvas_state = canvas_state if canvas_state is not None else CanvasState()
        self.app_state = app_state or AppState(color=self.settings.default_color)

        self._state = EditorState.IDLE
        self._anchor: Optional[Point] = None
        self._last_point: Optional[Point] = None
        self._redraw_listeners: List[Callable[[], None]] = []

    @property
    def state(self) -> EditorState:
        return self._state

    def add_redraw_listener(self, callback: Callable[[], None]) -> None:
        """Register a callback invoked after every state-changing event."""
        self._redraw_listeners.append(callback)

    def _request_redraw(self) -> None:
        for callback in self._redraw_listeners:
            callback()

    def _reset_gesture(self) -> None:
        self._state = EditorState.IDLE
        self._anchor = None
        self._last_point = None
        self.canvas_state.in_progress = None
        self.canvas_state.active_selection = None

    # Commands from the GUI

    def set_mode(self, mode: Mode) -> None:
        """Switch between Draw and Edit, cancelling any active gesture."""
        if mode == self.app_state.mode:
            return
        self.app_state.mode = mode
        self._reset_gesture()
        logger.debug(f"Mode set to {mode.value}")
        self._request_redraw()

    def set_tool(self, tool: ShapeType) -> None:
        """Select the shape type drawn in Draw mode."""
        if tool == self.app_state.tool:
            return
        self.app_state.tool = tool
        if self._state == EditorState.DRAWING:
            self._reset_gesture()
            self._request_redraw()
        logger.debug(f"Tool set to {tool.value}")

    def set_color(self, r: int, g: int, b: int) -> Color:
        """
        Set the color used for new shapes.

        Raises:
            InvalidColorInput: if a component is not an int in 0-255;
                the previous color is kept
        """
        self.app_state.color = Color(r, g, b)
        return self.app_state.color

    def set_color_text(self, r: str, g: str, b: str) -> Color:
        """Like set_color, parsing the components from text fields."""
        self.app_state.color = Color.from_strings(r, g, b)
        return self.app_state.color

    def clear(self) -> None:
        """Delete every shape."""
        self._reset_gesture()
        self.canvas_state.clear_all()
        logger.info("Canvas cleared")
        self._request_redraw()

    def load_shapes(self, shapes: Iterable[Shape]) -> None:
        """Replace all committed shapes (file order becomes draw order)."""
        self._reset_gesture()
        self.canvas_state.replace_all(shapes)
        self._request_redraw()

    def render(self, surface: DrawingSurface) -> None:
        """Paint callback for the GUI."""
        self.canvas_state.render(surface)

    # Pointer events

    def pointer_down(self, point: Point, button: MouseButton) -> None:
        """Handle a button press at `point`."""
        if button == MouseButton.SECONDARY:
            self._delete_at(point)
            return
        if button != MouseButton.PRIMARY:
            return

        if self.app_state.mode == Mode.DRAW:
            self._anchor = point.copy()
            self.canvas_state.in_progress = None
            self._state = EditorState.DRAWING
        else:
            self._grab_at(point)

    def pointer_drag(self, point: Point, button: MouseButton = MouseButton.PRIMARY) -> None:
        """Handle pointer motion with a button held."""
        if button != MouseButton.PRIMARY:
            return

        if self._state == EditorState.DRAWING:
            self.canvas_state.in_progress = create_shape(
                self.app_state.tool, self._anchor, point, self.app_state.color
            )
            self._request_redraw()
        elif self._state == EditorState.EDITING_MOVE:
            selection = self.canvas_state.active_selection
            dx = point.x - self._last_point.x
            dy = point.y - self._last_point.y
            self._last_point = point.copy()
            selection.shape.move(dx, dy)
            self._request_redraw()
        elif self._state == EditorState.EDITING_ENDPOINT:
            selection = self.canvas_state.active_selection
            selection.shape.set_endpoint(selection.grabbed_endpoint, point.x, point.y)
            self._last_point = point.copy()
            self._request_redraw()

    def pointer_up(self, point: Point, button: MouseButton = MouseButton.PRIMARY) -> None:
        """Handle a button release."""
        if button != MouseButton.PRIMARY:
            return

        if self._state == EditorState.DRAWING:
            shape = self.canvas_state.commit_in_progress()
            if shape is not None:
                logger.debug(f"Committed {shape.serialize()}")
        elif self._state in (EditorState.EDITING_MOVE, EditorState.EDITING_ENDPOINT):
            self.canvas_state.active_selection = None
        else:
            return

        self._state = EditorState.IDLE
        self._anchor = None
        self._last_point = None
        self._request_redraw()

    def _grab_at(self, point: Point) -> None:
        radius = self.settings.hit_radius
        shape = self.canvas_state.hit_test(point, radius)
        if shape is None:
            self._state = EditorState.IDLE
            self.canvas_state.active_selection = None
            return

        endpoint = None
        if isinstance(shape, Line):
            endpoint = shape.nearest_endpoint(point, radius)

        self.canvas_state.active_selection = ActiveSelection(shape, endpoint)
        self._last_point = point.copy()
        if endpoint is not None:
            self._state = EditorState.EDITING_ENDPOINT
        else:
            self._state = EditorState.EDITING_MOVE
        self._request_redraw()

    def _delete_at(self, point: Point) -> None:
        shape = self.canvas_state.hit_test(point, self.settings.hit_radius)
        if shape is None:
            return
        self.canvas_state.remove(shape)
        self._reset_gesture()
        logger.debug(f"Deleted {shape.serialize()}")
        self._request_redraw()
