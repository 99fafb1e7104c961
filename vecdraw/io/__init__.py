"""
VecDraw I/O Module

Handles the shape text format and raster image export.
"""

from .shape_io import shapes_to_text, shapes_from_text, save_shapes, load_shapes
from .raster_export import render_image, export_image

__all__ = [
    'shapes_to_text', 'shapes_from_text', 'save_shapes', 'load_shapes',
    'render_image', 'export_image',
]
