"""
VecDraw Error Types

Every failure in the editor is recoverable: errors are reported to the user
(or skipped silently for malformed shape lines) and the application keeps
running.
"""

from typing import Optional


class VecDrawError(Exception):
    """Base class for all editor errors."""


class InvalidColorInput(VecDrawError, ValueError):
    """RGB input that is not an integer or is outside 0-255."""


class MalformedShapeLine(VecDrawError, ValueError):
    """A line of the text format that does not describe a valid shape."""


class StorageIOFailure(VecDrawError, OSError):
    """The shape file (or exported image) could not be read or written."""

    def __init__(self, message: str, filepath: Optional[str] = None):
        super().__init__(message)
        self.filepath = filepath
