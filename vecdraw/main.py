#!/usr/bin/env python3
"""
VecDraw - Main Entry Point

This is the main entry point for the VecDraw application.
Run with: python -m vecdraw.main
"""

import logging
import os
import sys

from PyQt6.QtWidgets import QApplication


def setup_logging():
    """Configure logging; the level comes from VECDRAW_LOG_LEVEL (default INFO)."""
    level_name = os.environ.get("VECDRAW_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def main():
    """Main entry point for VecDraw application."""
    setup_logging()
    logger = logging.getLogger("vecdraw")
    try:
        # Create application
        app = QApplication(sys.argv)
        app.setApplicationName("VecDraw")
        app.setApplicationVersion("0.1.0")
        app.setOrganizationName("VecDraw")

        # Import here to avoid circular imports and speed up startup check
        from .ui.mainwindow import MainWindow

        # Create and show main window
        window = MainWindow()
        window.show()

        # Run event loop
        return app.exec()
    except Exception:
        logger.exception("Fatal error")
        return 1


if __name__ == "__main__":
    sys.exit(main())
