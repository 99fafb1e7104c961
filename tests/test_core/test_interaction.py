"""
Tests for the pointer-event state machine.

Each test drives the controller the way the canvas widget does: press,
a few drags, release.
"""

import unittest
from unittest.mock import Mock

from vecdraw.core.errors import InvalidColorInput
from vecdraw.core.interaction import (
    AppState, EditorState, InteractionController, Mode, MouseButton
)
from vecdraw.core.settings import EditorSettings
from vecdraw.core.shapes import Point, Color, ShapeType, Line, Rectangle, Circle
from vecdraw.core.surface import DrawingSurface

PRIMARY = MouseButton.PRIMARY
SECONDARY = MouseButton.SECONDARY
RED = Color(255, 0, 0)


class ControllerTestCase(unittest.TestCase):
    """Base class with a fresh controller and gesture helpers."""

    def setUp(self):
        self.controller = InteractionController()
        self.state = self.controller.canvas_state

    def drag(self, start, *points, button=PRIMARY):
        """Press at start, drag through points, release at the last one."""
        self.controller.pointer_down(Point(*start), button)
        for point in points:
            self.controller.pointer_drag(Point(*point), button)
        end = points[-1] if points else start
        self.controller.pointer_up(Point(*end), button)

    def serialized(self):
        return [shape.serialize() for shape in self.state]


class TestDefaults(ControllerTestCase):
    """Test the initial application state."""

    def test_defaults(self):
        """Test the initial mode, tool, color and hit radius."""
        self.assertEqual(self.controller.state, EditorState.IDLE)
        self.assertEqual(self.controller.app_state.mode, Mode.DRAW)
        self.assertEqual(self.controller.app_state.tool, ShapeType.LINE)
        self.assertEqual(self.controller.app_state.color, Color(0, 0, 0))
        self.assertEqual(self.controller.settings.hit_radius, 40)

    def test_explicit_state(self):
        """Test passing an application state in."""
        app_state = AppState(mode=Mode.EDIT, tool=ShapeType.CIRCLE, color=RED)
        controller = InteractionController(app_state=app_state)
        self.assertIs(controller.app_state, app_state)


class TestDrawMode(ControllerTestCase):
    """Test drawing new shapes."""

    def test_line_scenario(self):
        """Test drawing a red line."""
        self.controller.set_color(255, 0, 0)
        self.drag((10, 10), (30, 30), (50, 50))
        self.assertEqual(self.serialized(), ["LINE 10 10 50 50 255 0 0"])
        self.assertEqual(self.controller.state, EditorState.IDLE)
        self.assertIsNone(self.state.in_progress)

    def test_rectangle_scenario(self):
        """Test drawing a rectangle dragged right to left."""
        self.controller.set_tool(ShapeType.RECTANGLE)
        self.drag((80, 20), (20, 70))
        self.assertEqual(self.serialized(), ["RECTANGLE 20 20 60 50 0 0 0"])

    def test_circle_scenario(self):
        """Test drawing a circle from its center."""
        self.controller.set_tool(ShapeType.CIRCLE)
        self.drag((100, 100), (103, 104))
        self.assertEqual(self.serialized(), ["CIRCLE 100 100 5 0 0 0"])

    def test_press_records_anchor_only(self):
        """Test a press starts drawing without creating a shape."""
        self.controller.pointer_down(Point(10, 10), PRIMARY)
        self.assertEqual(self.controller.state, EditorState.DRAWING)
        self.assertIsNone(self.state.in_progress)

    def test_click_without_drag_commits_nothing(self):
        """Test a click without a drag adds no shape."""
        self.drag((10, 10))
        self.assertEqual(len(self.state), 0)
        self.assertEqual(self.controller.state, EditorState.IDLE)

    def test_each_drag_replaces_in_progress_shape(self):
        """Test every drag builds a fresh in-progress shape."""
        self.controller.pointer_down(Point(0, 0), PRIMARY)
        self.controller.pointer_drag(Point(10, 10), PRIMARY)
        first = self.state.in_progress
        self.controller.pointer_drag(Point(20, 20), PRIMARY)
        second = self.state.in_progress
        self.assertIsNot(first, second)
        self.assertEqual(second.serialize(), "LINE 0 0 20 20 0 0 0")
        self.assertEqual(len(self.state), 0)

    def test_drags_from_original_anchor(self):
        """Test the shape always spans from the press point."""
        self.controller.set_tool(ShapeType.RECTANGLE)
        self.drag((10, 10), (20, 20), (40, 30))
        self.assertEqual(self.serialized(), ["RECTANGLE 10 10 30 20 0 0 0"])

    def test_shapes_keep_their_color(self):
        """Test a color change does not recolor existing shapes."""
        self.controller.set_color(255, 0, 0)
        self.drag((0, 0), (10, 10))
        self.controller.set_color(0, 0, 255)
        self.drag((20, 20), (30, 30))
        self.assertEqual(self.serialized(), [
            "LINE 0 0 10 10 255 0 0",
            "LINE 20 20 30 30 0 0 255",
        ])

    def test_secondary_drag_does_not_draw(self):
        """Test right-button drags draw nothing."""
        self.drag((10, 10), (50, 50), button=SECONDARY)
        self.assertEqual(len(self.state), 0)
        self.assertEqual(self.controller.state, EditorState.IDLE)

    def test_mode_change_cancels_drawing(self):
        """Test switching mode drops the shape being drawn."""
        self.controller.pointer_down(Point(0, 0), PRIMARY)
        self.controller.pointer_drag(Point(10, 10), PRIMARY)
        self.controller.set_mode(Mode.EDIT)
        self.assertIsNone(self.state.in_progress)
        self.assertEqual(self.controller.state, EditorState.IDLE)
        self.controller.pointer_up(Point(10, 10), PRIMARY)
        self.assertEqual(len(self.state), 0)

    def test_tool_change_cancels_drawing(self):
        """Test switching tool drops the shape being drawn."""
        self.controller.pointer_down(Point(0, 0), PRIMARY)
        self.controller.pointer_drag(Point(10, 10), PRIMARY)
        self.controller.set_tool(ShapeType.CIRCLE)
        self.assertIsNone(self.state.in_progress)
        self.assertEqual(self.controller.state, EditorState.IDLE)


class TestColor(ControllerTestCase):
    """Test color commands."""

    def test_set_color_text(self):
        """Test setting the color from text fields."""
        color = self.controller.set_color_text("10", "20", "30")
        self.assertEqual(color, Color(10, 20, 30))
        self.assertEqual(self.controller.app_state.color, Color(10, 20, 30))

    def test_invalid_color_keeps_previous(self):
        """Test invalid color input keeps the previous color."""
        self.controller.set_color(1, 2, 3)
        with self.assertRaises(InvalidColorInput):
            self.controller.set_color_text("300", "0", "0")
        with self.assertRaises(InvalidColorInput):
            self.controller.set_color_text("a", "0", "0")
        with self.assertRaises(InvalidColorInput):
            self.controller.set_color(-1, 0, 0)
        self.assertEqual(self.controller.app_state.color, Color(1, 2, 3))


class TestEditMode(ControllerTestCase):
    """Test moving shapes and line endpoints."""

    def setUp(self):
        super().setUp()
        self.controller.set_mode(Mode.EDIT)

    def test_move_is_incremental(self):
        """Test moving applies the delta between drag events."""
        rect = Rectangle(20, 20, 60, 50, RED)  # center (50, 45)
        self.state.add_shape(rect)

        self.controller.pointer_down(Point(55, 45), PRIMARY)
        self.assertEqual(self.controller.state, EditorState.EDITING_MOVE)
        self.assertIs(self.state.active_selection.shape, rect)

        self.controller.pointer_drag(Point(60, 50), PRIMARY)
        self.assertEqual(rect.geometry(), [25, 25, 60, 50])
        self.controller.pointer_drag(Point(70, 50), PRIMARY)
        self.assertEqual(rect.geometry(), [35, 25, 60, 50])

        self.controller.pointer_up(Point(70, 50), PRIMARY)
        self.assertEqual(self.controller.state, EditorState.IDLE)
        self.assertIsNone(self.state.active_selection)
        self.assertEqual(self.state.shapes, [rect])

    def test_move_line_by_center(self):
        """Test moving a line grabbed near its center."""
        line = Line(Point(0, 0), Point(200, 0), RED)
        self.state.add_shape(line)
        self.drag((100, 0), (110, 10))
        self.assertEqual(line.geometry(), [10, 10, 210, 10])
        self.assertEqual(line.get_center(), Point(110, 10))

    def test_drag_endpoint_is_absolute(self):
        """Test a grabbed start point follows the pointer."""
        line = Line(Point(10, 10), Point(200, 10), RED)
        self.state.add_shape(line)

        self.controller.pointer_down(Point(15, 12), PRIMARY)
        self.assertEqual(self.controller.state, EditorState.EDITING_ENDPOINT)
        self.assertIs(self.state.active_selection.grabbed_endpoint, line.start)

        self.controller.pointer_drag(Point(0, 100), PRIMARY)
        self.assertEqual(line.start, Point(0, 100))
        self.assertEqual(line.get_center(), Point(100, 55))

        self.controller.pointer_drag(Point(5, 105), PRIMARY)
        self.assertEqual(line.geometry(), [5, 105, 200, 10])

        self.controller.pointer_up(Point(5, 105), PRIMARY)
        self.assertEqual(self.controller.state, EditorState.IDLE)
        self.assertIsNone(self.state.active_selection)

    def test_drag_end_point(self):
        """Test dragging the end point of a line."""
        line = Line(Point(10, 10), Point(200, 10), RED)
        self.state.add_shape(line)
        self.drag((198, 15), (250, 50))
        self.assertEqual(line.geometry(), [10, 10, 250, 50])

    def test_miss_does_nothing(self):
        """Test pressing away from every shape."""
        circle = Circle(100, 100, 10, RED)
        self.state.add_shape(circle)
        self.controller.pointer_down(Point(300, 300), PRIMARY)
        self.assertEqual(self.controller.state, EditorState.IDLE)
        self.controller.pointer_drag(Point(310, 310), PRIMARY)
        self.controller.pointer_up(Point(310, 310), PRIMARY)
        self.assertEqual(circle.geometry(), [100, 100, 10])

    def test_grabs_first_inserted_shape(self):
        """Test overlapping shapes grab the earliest one."""
        first = Circle(100, 100, 10, RED)
        second = Circle(105, 100, 10, RED)
        self.state.add_shape(first)
        self.state.add_shape(second)
        self.drag((103, 100), (113, 100))
        self.assertEqual(first.geometry(), [110, 100, 10])
        self.assertEqual(second.geometry(), [105, 100, 10])

    def test_edit_mode_does_not_draw(self):
        """Test dragging in Edit mode draws nothing."""
        self.drag((10, 10), (50, 50))
        self.assertEqual(len(self.state), 0)


class TestDelete(ControllerTestCase):
    """Test deletion with the secondary button."""

    def setUp(self):
        super().setUp()
        self.shapes = [
            Circle(100, 100, 10, RED),
            Circle(300, 300, 10, RED),
            Circle(500, 100, 10, RED),
        ]
        for shape in self.shapes:
            self.state.add_shape(shape)

    def test_deletes_exactly_one_shape(self):
        """Test a right click deletes only the shape under it."""
        for mode in (Mode.EDIT, Mode.DRAW):
            with self.subTest(mode=mode):
                self.controller.set_mode(mode)
                self.state.replace_all(self.shapes)
                self.controller.pointer_down(Point(120, 110), SECONDARY)
                self.assertEqual(self.state.shapes, self.shapes[1:])
                self.assertEqual(self.controller.state, EditorState.IDLE)

    def test_miss_deletes_nothing(self):
        """Test a right click away from every shape."""
        self.controller.pointer_down(Point(700, 500), SECONDARY)
        self.assertEqual(self.state.shapes, self.shapes)

    def test_delete_while_drawing_drops_in_progress(self):
        """Test deleting mid-draw drops the in-progress shape."""
        self.controller.pointer_down(Point(10, 10), PRIMARY)
        self.controller.pointer_drag(Point(20, 20), PRIMARY)
        self.controller.pointer_down(Point(300, 300), SECONDARY)
        self.assertIsNone(self.state.in_progress)
        self.assertEqual(self.controller.state, EditorState.IDLE)
        self.controller.pointer_up(Point(20, 20), PRIMARY)
        self.assertEqual(self.state.shapes, [self.shapes[0], self.shapes[2]])

    def test_delete_while_editing_releases_shape(self):
        """Test deleting mid-edit releases the grabbed shape."""
        self.controller.set_mode(Mode.EDIT)
        self.controller.pointer_down(Point(100, 100), PRIMARY)
        self.controller.pointer_down(Point(100, 100), SECONDARY)
        self.assertIsNone(self.state.active_selection)
        self.controller.pointer_drag(Point(120, 120), PRIMARY)
        self.assertEqual(self.state.shapes, self.shapes[1:])

    def test_clear(self):
        """Test clearing the canvas."""
        self.controller.clear()
        self.assertEqual(len(self.state), 0)


class TestCommandsAndRedraw(ControllerTestCase):
    """Test GUI commands and redraw notifications."""

    def setUp(self):
        super().setUp()
        self.redraw = Mock()
        self.controller.add_redraw_listener(self.redraw)

    def test_redraw_after_state_changes(self):
        """Test each state change requests one redraw."""
        self.drag((0, 0), (10, 10))
        # drag + release
        self.assertEqual(self.redraw.call_count, 2)
        self.controller.pointer_down(Point(5, 5), SECONDARY)
        self.assertEqual(self.redraw.call_count, 3)
        self.controller.clear()
        self.assertEqual(self.redraw.call_count, 4)

    def test_no_redraw_for_ignored_events(self):
        """Test ignored events request no redraw."""
        self.controller.pointer_drag(Point(10, 10), PRIMARY)
        self.controller.pointer_up(Point(10, 10), PRIMARY)
        self.controller.pointer_down(Point(10, 10), SECONDARY)
        self.redraw.assert_not_called()

    def test_load_shapes_replaces_collection(self):
        """Test loading replaces the drawn shapes."""
        self.drag((0, 0), (10, 10))
        loaded = [Circle(1, 1, 1, RED)]
        self.controller.load_shapes(loaded)
        self.assertEqual(self.state.shapes, loaded)
        self.redraw.assert_called()

    def test_render_includes_in_progress(self):
        """Test rendering includes the shape being drawn."""
        self.drag((0, 0), (10, 10))
        self.controller.pointer_down(Point(20, 20), PRIMARY)
        self.controller.pointer_drag(Point(30, 30), PRIMARY)
        surface = Mock(spec=DrawingSurface)
        self.controller.render(surface)
        self.assertEqual(len(surface.method_calls), 2)

    def test_custom_hit_radius(self):
        """Test the hit radius comes from the settings."""
        controller = InteractionController(settings=EditorSettings(hit_radius=5))
        controller.canvas_state.add_shape(Circle(100, 100, 10, RED))
        controller.pointer_down(Point(110, 100), SECONDARY)
        self.assertEqual(len(controller.canvas_state), 1)
        controller.pointer_down(Point(104, 100), SECONDARY)
        self.assertEqual(len(controller.canvas_state), 0)


if __name__ == '__main__':
    unittest.main()
