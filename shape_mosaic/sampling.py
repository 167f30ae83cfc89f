"""Grid point-sampling of source pixel colours."""

from __future__ import annotations

import math

import numpy as np

from shape_mosaic.config import is_integer
from shape_mosaic.errors import InvalidConfiguration, InvalidImage


def grid_shape(width: int, height: int, stride: int) -> tuple[int, int]:
    """Return ``(rows, cols)`` of the sample grid for a *width* x *height* image."""
    return math.ceil(height / stride), math.ceil(width / stride)


def sample_pixels(image: np.ndarray, stride: int) -> np.ndarray:
    """Read one colour per grid cell.

    Cell ``(i, j)`` takes the single pixel at ``(x, y) = (j * stride,
    i * stride)``. A trailing partial cell is still sampled from its first
    pixel, so the grid is ``ceil(H / stride)`` x ``ceil(W / stride)``.

    This is point sampling, not block averaging: thin details between
    sample points are lost.

    Args:
        image:  (H, W, 3) uint8 RGB array.
        stride: Spacing between sample points, > 0.

    Returns:
        (rows, cols, 3) uint8 read-only array.
    """
    if not is_integer(stride) or stride <= 0:
        raise InvalidConfiguration(f"Sample stride must be a positive integer, got {stride!r}")
    if image.ndim != 3 or image.shape[2] < 3:
        raise InvalidImage(f"Expected an (H, W, 3) RGB array, got shape {image.shape}")
    h, w = image.shape[:2]
    if h == 0 or w == 0:
        raise InvalidImage(f"Image has no pixels ({w}x{h})")

    grid = np.array(image[::stride, ::stride, :3], dtype=np.uint8)
    grid.setflags(write=False)
    return grid
