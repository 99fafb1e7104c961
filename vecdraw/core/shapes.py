"""
VecDraw Core Shapes Module

Defines the fundamental value types (Point, Color) and the three drawable
shapes: Line, Rectangle and Circle. Every shape knows how to draw itself on a
DrawingSurface, how to move, and how to encode itself as one line of text:

    LINE startX startY endX endY r g b
    RECTANGLE x y width height r g b
    CIRCLE centerX centerY radius r g b
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Type
import logging
import math
import re

from .errors import InvalidColorInput, MalformedShapeLine
from .surface import DrawingSurface

logger = logging.getLogger(__name__)

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")

# Coordinates are stored as 32-bit signed integers
INT_MIN = -2**31
INT_MAX = 2**31 - 1


def parse_int(token: str) -> int:
    """
    Parse a base-10 integer token in the 32-bit signed range.

    Raises:
        ValueError: if the token is not such an integer
    """
    if not _INT_TOKEN.fullmatch(token):
        raise ValueError(f"Not an integer: {token!r}")
    try:
        value = int(token)
    except ValueError:
        # More digits than int() accepts
        raise ValueError(f"Integer out of range: {token[:20]!r}...") from None
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"Integer out of range: {value}")
    return value


def clamp_int32(value: int) -> int:
    """Clamp a coordinate into the 32-bit signed range."""
    return max(INT_MIN, min(INT_MAX, value))


def _half(value: int) -> int:
    """Divide by two, truncating toward zero."""
    quotient = abs(value) // 2
    return quotient if value >= 0 else -quotient


@dataclass
class Point:
    """A 2D integer point, mutable in place."""
    x: int
    y: int

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)

    def translate(self, dx: int, dy: int) -> None:
        """Shift the point by (dx, dy)."""
        self.x += dx
        self.y += dy

    def move_to(self, x: int, y: int) -> None:
        """Set both coordinates."""
        self.x = x
        self.y = y

    def distance_to(self, other: 'Point') -> float:
        """Calculate Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def copy(self) -> 'Point':
        return Point(self.x, self.y)


@dataclass(frozen=True)
class Color:
    """An opaque RGB color with 8-bit components."""
    r: int
    g: int
    b: int

    def __post_init__(self):
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidColorInput(
                    f"Color component {name} must be an integer, got {value!r}"
                )
            if not 0 <= value <= 255:
                raise InvalidColorInput(
                    f"Color component {name} must be between 0 and 255, got {value}"
                )

    @classmethod
    def from_strings(cls, r: str, g: str, b: str) -> 'Color':
        """
        Parse a color from user text entry.

        Raises:
            InvalidColorInput: if a field is not an integer or out of range
        """
        values = []
        for text in (r, g, b):
            text = (text or "").strip()
            try:
                values.append(parse_int(text))
            except ValueError:
                raise InvalidColorInput(f"Not an integer color value: {text!r}") from None
        return cls(*values)

    def as_tuple(self) -> tuple:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Return the color as '#rrggbb'."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


class ShapeType(Enum):
    """Shape variants; the value is the tag used in the text format."""
    LINE = "LINE"
    RECTANGLE = "RECTANGLE"
    CIRCLE = "CIRCLE"


class Shape(ABC):
    """
    Abstract base class for all shapes.

    Every shape must implement:
    - draw(): Issue its primitive on a DrawingSurface
    - geometry(): Integer geometry fields in serialization order
    - get_center(): The anchor used for hit testing and moving
    - move(): Translate all point-valued fields
    - clone(): Create a deep copy
    - from_geometry(): Rebuild the shape from decoded fields
    """

    shape_type: ShapeType
    field_count: int = 0

    def __init__(self, color: Color):
        self.color = color

    @abstractmethod
    def draw(self, surface: DrawingSurface) -> None:
        """Draw the shape in its own color."""
        pass

    @abstractmethod
    def geometry(self) -> List[int]:
        """Return the geometry fields in serialization order."""
        pass

    @abstractmethod
    def get_center(self) -> Point:
        """Return a copy of the shape's center."""
        pass

    @abstractmethod
    def move(self, dx: int, dy: int) -> None:
        """Translate the shape by (dx, dy)."""
        pass

    @abstractmethod
    def clone(self) -> 'Shape':
        """Create a deep copy of this shape."""
        pass

    @classmethod
    @abstractmethod
    def from_geometry(cls, fields: Sequence[int], color: Color) -> 'Shape':
        """Build a shape from decoded geometry fields."""
        pass

    def get_hit_points(self) -> List[Point]:
        """Points that select the shape when clicked near."""
        return [self.get_center()]

    def serialize(self) -> str:
        """Encode the shape as a single line of the text format."""
        tokens = [self.shape_type.value]
        tokens.extend(str(value) for value in self.geometry())
        tokens.extend(str(component) for component in self.color.as_tuple())
        return " ".join(tokens)

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.serialize()}>"


class Line(Shape):
    """A straight line segment, stroked on draw."""

    shape_type = ShapeType.LINE
    field_count = 4

    def __init__(self, start: Point, end: Point, color: Color):
        super().__init__(color)
        self.start = start.copy()
        self.end = end.copy()
        self._center = Point(0, 0)
        self.recalculate_center()

    def recalculate_center(self) -> None:
        """Update the cached midpoint after the endpoints changed."""
        self._center.move_to(
            _half(self.start.x + self.end.x),
            _half(self.start.y + self.end.y)
        )

    def draw(self, surface: DrawingSurface) -> None:
        surface.draw_line(self.start.x, self.start.y,
                          self.end.x, self.end.y, self.color)

    def geometry(self) -> List[int]:
        return [self.start.x, self.start.y, self.end.x, self.end.y]

    def get_center(self) -> Point:
        return self._center.copy()

    def get_hit_points(self) -> List[Point]:
        return [self.get_center(), self.start.copy(), self.end.copy()]

    def endpoints(self) -> List[Point]:
        """The live endpoint objects, start first."""
        return [self.start, self.end]

    def nearest_endpoint(self, point: Point, radius: float) -> Optional[Point]:
        """Return the endpoint nearest to `point` within `radius`; start wins ties."""
        best = None
        best_distance = radius
        for endpoint in self.endpoints():
            distance = endpoint.distance_to(point)
            if distance <= best_distance and (best is None or distance < best_distance):
                best = endpoint
                best_distance = distance
        return best

    def set_endpoint(self, endpoint: Point, x: int, y: int) -> None:
        """
        Move one endpoint to an absolute position.

        Args:
            endpoint: self.start or self.end (matched by identity)
            x: New x coordinate
            y: New y coordinate
        """
        if endpoint is not self.start and endpoint is not self.end:
            raise ValueError("Point is not an endpoint of this line")
        endpoint.move_to(x, y)
        self.recalculate_center()

    def move(self, dx: int, dy: int) -> None:
        self.start.translate(dx, dy)
        self.end.translate(dx, dy)
        self.recalculate_center()

    def clone(self) -> 'Line':
        return Line(self.start, self.end, self.color)

    @classmethod
    def from_geometry(cls, fields: Sequence[int], color: Color) -> 'Line':
        start_x, start_y, end_x, end_y = fields
        return cls(Point(start_x, start_y), Point(end_x, end_y), color)


class Rectangle(Shape):
    """An axis-aligned filled rectangle."""

    shape_type = ShapeType.RECTANGLE
    field_count = 4

    def __init__(self, x: int, y: int, width: int, height: int, color: Color):
        super().__init__(color)
        if width < 0 or height < 0:
            raise ValueError(f"Rectangle size must be non-negative, got {width}x{height}")
        self.top_left = Point(x, y)
        self.width = width
        self.height = height

    @classmethod
    def from_corners(cls, corner1: Point, corner2: Point, color: Color) -> 'Rectangle':
        """Normalize two opposite corners, dragged in any direction."""
        return cls(
            min(corner1.x, corner2.x),
            min(corner1.y, corner2.y),
            abs(corner1.x - corner2.x),
            abs(corner1.y - corner2.y),
            color
        )

    def draw(self, surface: DrawingSurface) -> None:
        surface.fill_rect(self.top_left.x, self.top_left.y,
                          self.width, self.height, self.color)

    def geometry(self) -> List[int]:
        return [self.top_left.x, self.top_left.y, self.width, self.height]

    def get_center(self) -> Point:
        return Point(self.top_left.x + self.width // 2,
                     self.top_left.y + self.height // 2)

    def move(self, dx: int, dy: int) -> None:
        self.top_left.translate(dx, dy)

    def clone(self) -> 'Rectangle':
        return Rectangle(self.top_left.x, self.top_left.y,
                         self.width, self.height, self.color)

    @classmethod
    def from_geometry(cls, fields: Sequence[int], color: Color) -> 'Rectangle':
        # Stored as corners so a negative size still yields a normalized rect
        x, y, width, height = fields
        return cls.from_corners(Point(x, y), Point(x + width, y + height), color)


class Circle(Shape):
    """A filled circle."""

    shape_type = ShapeType.CIRCLE
    field_count = 3

    def __init__(self, center_x: int, center_y: int, radius: int, color: Color):
        super().__init__(color)
        if radius < 0:
            raise ValueError(f"Circle radius must be non-negative, got {radius}")
        self.center = Point(center_x, center_y)
        self.radius = radius

    @classmethod
    def from_edge(cls, center: Point, edge: Point, color: Color) -> 'Circle':
        """Circle through `edge`; the radius is truncated to an integer."""
        dx = edge.x - center.x
        dy = edge.y - center.y
        return cls(center.x, center.y, math.isqrt(dx * dx + dy * dy), color)

    def draw(self, surface: DrawingSurface) -> None:
        surface.fill_oval(self.center.x - self.radius, self.center.y - self.radius,
                          self.radius * 2, self.radius * 2, self.color)

    def geometry(self) -> List[int]:
        return [self.center.x, self.center.y, self.radius]

    def get_center(self) -> Point:
        return self.center.copy()

    def move(self, dx: int, dy: int) -> None:
        self.center.translate(dx, dy)

    def clone(self) -> 'Circle':
        return Circle(self.center.x, self.center.y, self.radius, self.color)

    @classmethod
    def from_geometry(cls, fields: Sequence[int], color: Color) -> 'Circle':
        center_x, center_y, radius = fields
        return cls(center_x, center_y, radius, color)


SHAPE_CLASSES: Dict[ShapeType, Type[Shape]] = {
    ShapeType.LINE: Line,
    ShapeType.RECTANGLE: Rectangle,
    ShapeType.CIRCLE: Circle,
}

# Two-point constructors used while dragging out a new shape
_DRAG_BUILDERS: Dict[ShapeType, Callable[[Point, Point, Color], Shape]] = {
    ShapeType.LINE: Line,
    ShapeType.RECTANGLE: Rectangle.from_corners,
    ShapeType.CIRCLE: Circle.from_edge,
}


def create_shape(shape_type: ShapeType, anchor: Point, current: Point,
                 color: Color) -> Shape:
    """
    Factory function to build a shape from a drag gesture.

    Args:
        shape_type: Variant to create
        anchor: Point where the drag started (circle center)
        current: Current pointer position (circle edge)
        color: Fill or stroke color

    Returns:
        New Shape; the input points are copied, never mutated
    """
    builder = _DRAG_BUILDERS.get(shape_type)
    if builder:
        return builder(anchor, current, color)

    raise ValueError(f"Unknown shape type: {shape_type}")


def parse_shape(line: str) -> Shape:
    """
    Decode one line of the text format.

    Raises:
        MalformedShapeLine: on unknown type, wrong token count,
            non-integer token, or invalid color/geometry
    """
    tokens = line.split()
    if not tokens:
        raise MalformedShapeLine("Empty line")

    try:
        shape_type = ShapeType(tokens[0])
    except ValueError:
        raise MalformedShapeLine(f"Unknown shape type: {tokens[0]!r}") from None

    shape_class = SHAPE_CLASSES[shape_type]
    expected = 1 + shape_class.field_count + 3
    if len(tokens) != expected:
        raise MalformedShapeLine(
            f"{shape_type.value} expects {expected} tokens, got {len(tokens)}"
        )

    try:
        values = [parse_int(token) for token in tokens[1:]]
        color = Color(*values[-3:])
        return shape_class.from_geometry(values[:-3], color)
    except ValueError as e:
        raise MalformedShapeLine(str(e)) from e


def deserialize(line: str) -> Optional[Shape]:
    """Decode one line, returning None when it is not a valid shape."""
    try:
        return parse_shape(line)
    except MalformedShapeLine as e:
        logger.debug(f"Skipping malformed shape line {line!r}: {e}")
        return None
