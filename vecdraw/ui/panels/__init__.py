"""
VecDraw UI Panels
"""

from .color_panel import ColorPanel

__all__ = ['ColorPanel']
