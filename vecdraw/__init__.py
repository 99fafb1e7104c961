"""
VecDraw - a small interactive vector drawing editor.
"""

__version__ = "0.1.0"
