"""
VecDraw UI Module

User interface components:
- MainWindow: Primary application window
- DrawCanvas: Drawing area forwarding mouse events to the editor
- Panels: Color entry panel
"""
