"""
VecDraw Core Module

Contains the Qt-free editor model:
- Shapes: Point, Color, Line, Rectangle, Circle and the text encoding
- CanvasState: committed shapes, in-progress shape, active selection
- InteractionController: pointer-event state machine
- EditorSettings: tunable constants
"""

# Import order matters - shapes first, then state, then interaction
from .errors import (
    VecDrawError, InvalidColorInput, MalformedShapeLine, StorageIOFailure
)
from .surface import DrawingSurface
from .shapes import (
    Point, Color, BLACK, WHITE, ShapeType, Shape,
    Line, Rectangle, Circle,
    create_shape, parse_shape, deserialize, parse_int, clamp_int32
)
from .settings import EditorSettings
from .canvas_state import ActiveSelection, CanvasState
from .interaction import (
    AppState, EditorState, InteractionController, Mode, MouseButton
)

__all__ = [
    'VecDrawError', 'InvalidColorInput', 'MalformedShapeLine', 'StorageIOFailure',
    'DrawingSurface',
    'Point', 'Color', 'BLACK', 'WHITE', 'ShapeType', 'Shape',
    'Line', 'Rectangle', 'Circle',
    'create_shape', 'parse_shape', 'deserialize', 'parse_int', 'clamp_int32',
    'EditorSettings',
    'ActiveSelection', 'CanvasState',
    'AppState', 'EditorState', 'InteractionController', 'Mode', 'MouseButton',
]
