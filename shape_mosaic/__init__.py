"""
Shape Mosaic Generator
======================

Sample an image on a regular grid and redraw every cell as a single
coloured shape. Four shapes are available:

- **square** and **circle** (plain fills)
- **smoothcircle** (hand-antialiased midpoint circle)
- **star** (five-pointed star polygon)
"""

__version__ = "1.0.0"

from shape_mosaic.builder import build_mosaic, compute_canvas_size
from shape_mosaic.canvas import Canvas
from shape_mosaic.config import SHAPES, MosaicConfig
from shape_mosaic.errors import (
    InvalidConfiguration,
    InvalidImage,
    InvalidShape,
    MosaicError,
)
from shape_mosaic.image_io import (
    decode_image,
    encode_png,
    load_image,
    make_comparison_sheet,
    save_mosaic,
)
from shape_mosaic.sampling import sample_pixels
from shape_mosaic.shapes import draw_shape
from shape_mosaic.smooth_circle import draw_smooth_circle
from shape_mosaic.star import star_points

__all__ = [
    "SHAPES",
    "Canvas",
    "InvalidConfiguration",
    "InvalidImage",
    "InvalidShape",
    "MosaicConfig",
    "MosaicError",
    "build_mosaic",
    "compute_canvas_size",
    "decode_image",
    "draw_shape",
    "draw_smooth_circle",
    "encode_png",
    "load_image",
    "make_comparison_sheet",
    "sample_pixels",
    "save_mosaic",
    "star_points",
]
