#!/usr/bin/env python3
"""
main.py — Quick-start entry point.

Drop images into ``images/`` and run:

    python main.py batch

Or use the full CLI:

    python -m shape_mosaic.cli batch --help
    python -m shape_mosaic.cli single my_photo.jpg --shape star
"""

from shape_mosaic.cli import app

if __name__ == "__main__":
    app()
