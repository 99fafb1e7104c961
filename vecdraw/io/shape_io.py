"""
Shape File I/O for VecDraw

Saves and loads the committed shapes as plain text, one shape per line:

    LINE startX startY endX endY r g b
    RECTANGLE x y width height r g b
    CIRCLE centerX centerY radius r g b

There is no header. Lines that do not decode are skipped on load.
"""

from pathlib import Path
from typing import Iterable, List, Union
import logging
import os
import shutil
import tempfile

from ..core.errors import StorageIOFailure
from ..core.shapes import Shape, deserialize

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def shapes_to_text(shapes: Iterable[Shape]) -> str:
    """Encode shapes in order, each line newline-terminated."""
    return "".join(f"{shape.serialize()}\n" for shape in shapes)


def shapes_from_text(text: str) -> List[Shape]:
    """
    Decode every valid line of `text`, in file order.

    Malformed lines are skipped; a text with no valid line yields an
    empty list.
    """
    shapes = []
    skipped = 0
    for line in text.splitlines():
        shape = deserialize(line)
        if shape is None:
            if line.strip():
                skipped += 1
            continue
        shapes.append(shape)

    if skipped:
        logger.info(f"Skipped {skipped} malformed line(s)")
    return shapes


def save_shapes(shapes: Iterable[Shape], filepath: PathLike) -> None:
    """
    Write shapes to a text file.

    The file is written to a temporary sibling first and then moved over
    the target, so a failed save leaves any previous file untouched.

    Raises:
        StorageIOFailure: if the file cannot be written
    """
    shapes = list(shapes)
    text = shapes_to_text(shapes)
    target = Path(filepath)

    try:
        fd, temp_path = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
        )
        try:
            with os.fdopen(fd, 'w', encoding='utf-8', newline='\n') as f:
                f.write(text)
            if target.exists():
                shutil.copymode(target, temp_path)
            else:
                os.chmod(temp_path, 0o644)
            os.replace(temp_path, target)
        except BaseException:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise
    except OSError as e:
        logger.error(f"Error saving shapes to {filepath}: {e}")
        raise StorageIOFailure(f"Could not save {filepath}: {e.strerror or e}",
                               str(filepath)) from e

    logger.info(f"Saved {len(shapes)} shapes to {filepath}")


def load_shapes(filepath: PathLike) -> List[Shape]:
    """
    Read shapes from a text file.

    Raises:
        StorageIOFailure: if the file cannot be read or is not UTF-8 text
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            text = f.read()
    except UnicodeDecodeError as e:
        logger.error(f"Error loading shapes from {filepath}: {e}")
        raise StorageIOFailure(f"Could not load {filepath}: not a text file",
                               str(filepath)) from e
    except OSError as e:
        logger.error(f"Error loading shapes from {filepath}: {e}")
        raise StorageIOFailure(f"Could not load {filepath}: {e.strerror or e}",
                               str(filepath)) from e

    shapes = shapes_from_text(text)
    logger.info(f"Loaded {len(shapes)} shapes from {filepath}")
    return shapes
