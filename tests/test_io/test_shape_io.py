"""
Tests for saving and loading the shape text file.
"""

import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from vecdraw.core.errors import StorageIOFailure
from vecdraw.core.shapes import Point, Color, Line, Rectangle, Circle
from vecdraw.io.shape_io import (
    shapes_to_text, shapes_from_text, save_shapes, load_shapes
)

RED = Color(255, 0, 0)


def sample_shapes():
    return [
        Line(Point(10, 10), Point(50, 50), RED),
        Rectangle(20, 20, 60, 50, Color(0, 0, 0)),
        Circle(100, 100, 5, Color(0, 128, 255)),
    ]


class TestTextEncoding(unittest.TestCase):
    """Test encoding and decoding of whole files."""

    def test_shapes_to_text(self):
        """Test encoding shapes as text."""
        self.assertEqual(shapes_to_text(sample_shapes()), (
            "LINE 10 10 50 50 255 0 0\n"
            "RECTANGLE 20 20 60 50 0 0 0\n"
            "CIRCLE 100 100 5 0 128 255\n"
        ))

    def test_empty_collection(self):
        """Test encoding and decoding no shapes."""
        self.assertEqual(shapes_to_text([]), "")
        self.assertEqual(shapes_from_text(""), [])

    def test_garbage_lines_are_skipped(self):
        """Test unreadable lines are skipped."""
        text = (
            "LINE 10 10 50 50 255 0 0\n"
            "this is not a shape\n"
            "RECTANGLE 1 2\n"
            "CIRCLE 100 100 5 0 128 255\n"
        )
        shapes = shapes_from_text(text)
        self.assertEqual([s.serialize() for s in shapes], [
            "LINE 10 10 50 50 255 0 0",
            "CIRCLE 100 100 5 0 128 255",
        ])

    def test_out_of_range_lines_are_skipped(self):
        """Test lines with oversized integers are skipped."""
        text = (
            "LINE " + "1" * 5000 + " 0 0 0 0 0 0\n"
            "LINE 3000000000 0 10 10 0 0 0\n"
            "CIRCLE 1 1 1 0 0 0\n"
        )
        shapes = shapes_from_text(text)
        self.assertEqual([s.serialize() for s in shapes], ["CIRCLE 1 1 1 0 0 0"])

    def test_blank_and_crlf_lines(self):
        """Test blank lines and CRLF line endings."""
        text = "LINE 1 2 3 4 0 0 0\r\n\r\n   \r\nCIRCLE 1 1 1 0 0 0\r\n"
        shapes = shapes_from_text(text)
        self.assertEqual(len(shapes), 2)
        self.assertIsInstance(shapes[1], Circle)

    def test_round_trip_preserves_order(self):
        """Test decoding encoded shapes keeps their order."""
        original = sample_shapes()
        decoded = shapes_from_text(shapes_to_text(original))
        self.assertEqual([s.serialize() for s in decoded],
                         [s.serialize() for s in original])


class TestSaveLoad(unittest.TestCase):
    """Test file persistence."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.directory = Path(self.temp_dir.name)
        self.filepath = self.directory / "shapes.txt"

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_save_and_load(self):
        """Test saving and loading a file."""
        save_shapes(sample_shapes(), self.filepath)
        self.assertEqual(self.filepath.read_text(encoding="utf-8"),
                         shapes_to_text(sample_shapes()))

        loaded = load_shapes(self.filepath)
        self.assertEqual([s.serialize() for s in loaded],
                         [s.serialize() for s in sample_shapes()])

    def test_save_accepts_str_path(self):
        """Test paths may be given as strings."""
        save_shapes(sample_shapes(), str(self.filepath))
        self.assertEqual(len(load_shapes(str(self.filepath))), 3)

    def test_save_overwrites(self):
        """Test saving replaces the previous contents."""
        save_shapes(sample_shapes(), self.filepath)
        save_shapes([], self.filepath)
        self.assertEqual(self.filepath.read_text(encoding="utf-8"), "")
        self.assertEqual(load_shapes(self.filepath), [])

    def test_load_missing_file(self):
        """Test loading a missing file fails with its path."""
        missing = self.directory / "missing.txt"
        with self.assertRaises(StorageIOFailure) as ctx:
            load_shapes(missing)
        self.assertEqual(ctx.exception.filepath, str(missing))

    def test_save_to_missing_directory(self):
        """Test saving into a missing directory fails."""
        target = self.directory / "no" / "such" / "dir" / "shapes.txt"
        with self.assertRaises(StorageIOFailure):
            save_shapes(sample_shapes(), target)
        self.assertFalse(target.exists())

    def test_failed_save_keeps_previous_file(self):
        """Test a failed save leaves the old file intact."""
        save_shapes(sample_shapes(), self.filepath)
        before = self.filepath.read_text(encoding="utf-8")

        with patch("vecdraw.io.shape_io.os.replace", side_effect=OSError("disk full")):
            with self.assertRaises(StorageIOFailure):
                save_shapes([Circle(1, 1, 1, RED)], self.filepath)

        self.assertEqual(self.filepath.read_text(encoding="utf-8"), before)
        self.assertEqual(os.listdir(self.directory), ["shapes.txt"])

    def test_load_binary_file(self):
        """Test loading a file that is not UTF-8 text fails."""
        self.filepath.write_bytes(b"\xff\xfe\x00LINE 1 2 3 4 0 0 0")
        with self.assertRaises(StorageIOFailure):
            load_shapes(self.filepath)

    def test_load_skips_bad_lines(self):
        """Test loading skips unreadable lines."""
        self.filepath.write_text(
            "garbage\nCIRCLE 5 5 2 0 0 0\nLINE 1 1\n", encoding="utf-8"
        )
        loaded = load_shapes(self.filepath)
        self.assertEqual([s.serialize() for s in loaded], ["CIRCLE 5 5 2 0 0 0"])

    def test_storage_failure_is_os_error(self):
        """Test StorageIOFailure is an OSError."""
        with self.assertRaises(OSError):
            load_shapes(self.directory / "missing.txt")


if __name__ == '__main__':
    unittest.main()
