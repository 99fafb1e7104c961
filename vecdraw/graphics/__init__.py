"""
VecDraw Graphics Module

Concrete drawing surfaces:
- ImageSurface: Pillow image, for export
- PainterSurface: QPainter, for the on-screen canvas (imported from
  vecdraw.graphics.painter_surface so export works without Qt)
"""

from .image_surface import ImageSurface

__all__ = ['ImageSurface']
