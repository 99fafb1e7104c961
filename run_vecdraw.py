#!/usr/bin/env python3
"""
VecDraw Launcher Script

Simple launcher for running VecDraw from a source checkout.
"""

import sys
import os

if os.path.dirname(__file__) not in sys.path:
    sys.path.insert(0, os.path.dirname(__file__))


if __name__ == "__main__":
    try:
        from vecdraw.main import main
    except ImportError as e:
        print(f"Error: Failed to import VecDraw modules: {e}")
        print("\nPlease ensure all dependencies are installed:")
        print("  pip install -r requirements.txt")
        sys.exit(1)
    sys.exit(main())
