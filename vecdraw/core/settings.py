"""
VecDraw Editor Settings

Tunable constants of the editor, grouped the same way shape-level
parameters are grouped elsewhere in the codebase.
"""

from dataclasses import dataclass, field

from .shapes import Color, BLACK, WHITE


@dataclass
class EditorSettings:
    """Editor parameters shared by the interaction logic and the UI."""
    hit_radius: int = 40             # Selection distance in canvas units
    line_width: int = 2              # Stroke width for lines
    canvas_width: int = 800          # Viewport / export size in pixels
    canvas_height: int = 600
    background: Color = field(default_factory=lambda: WHITE)
    default_color: Color = field(default_factory=lambda: BLACK)

    # File dialog defaults
    default_filename: str = "shapes.txt"
    default_export_filename: str = "shapes.png"
