"""
VecDraw Canvas State

The ordered collection of committed shapes plus the single shape that is
currently being drawn, and the shape currently grabbed for editing.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional

from .shapes import Point, Shape
from .surface import DrawingSurface


@dataclass
class ActiveSelection:
    """
    A committed shape grabbed in Edit mode.

    grabbed_endpoint is one of the Line's own endpoint objects when an
    endpoint is being dragged, otherwise None (the whole shape moves).
    """
    shape: Shape
    grabbed_endpoint: Optional[Point] = None


@dataclass
class CanvasState:
    """
    The shapes on the canvas.

    Committed shapes are kept in insertion order, which is also the paint
    order: later shapes are drawn over earlier ones. The in-progress shape
    is never part of the committed list until it is committed.
    """
    committed: List[Shape] = field(default_factory=list)
    in_progress: Optional[Shape] = None
    active_selection: Optional[ActiveSelection] = None

    def __len__(self) -> int:
        return len(self.committed)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.committed)

    @property
    def shapes(self) -> List[Shape]:
        """A copy of the committed shapes in draw order."""
        return list(self.committed)

    def add_shape(self, shape: Shape) -> None:
        """Append a shape to the committed collection."""
        self.committed.append(shape)

    def commit_in_progress(self) -> Optional[Shape]:
        """Move the in-progress shape, if any, to the committed collection."""
        shape = self.in_progress
        if shape is not None:
            self.committed.append(shape)
            self.in_progress = None
        return shape

    def remove(self, shape: Shape) -> bool:
        """Remove a committed shape by identity; no-op if absent."""
        for index, candidate in enumerate(self.committed):
            if candidate is shape:
                del self.committed[index]
                if self.active_selection and self.active_selection.shape is shape:
                    self.active_selection = None
                return True
        return False

    def clear_all(self) -> None:
        """Remove every shape and drop any gesture in progress."""
        self.committed.clear()
        self.in_progress = None
        self.active_selection = None

    def replace_all(self, shapes: Iterable[Shape]) -> None:
        """Replace the committed collection, keeping the given order."""
        self.committed = list(shapes)
        self.in_progress = None
        self.active_selection = None

    def hit_test(self, point: Point, radius: float) -> Optional[Shape]:
        """
        Find the first committed shape near a point.

        A shape is hit when its center (or, for a Line, either endpoint)
        lies within `radius` of `point`. Shapes are scanned in insertion
        order and the first match wins, so an earlier shape is preferred
        over a later one painted on top of it.
        """
        for shape in self.committed:
            for anchor in shape.get_hit_points():
                if anchor.distance_to(point) <= radius:
                    return shape
        return None

    def render(self, surface: DrawingSurface) -> None:
        """Draw committed shapes in order, then the in-progress shape."""
        for shape in self.committed:
            shape.draw(surface)
        if self.in_progress is not None:
            self.in_progress.draw(surface)
