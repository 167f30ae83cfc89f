"""Antialiased filled circle drawn with an incremental midpoint algorithm.

The interior is filled with opaque 1px lines while the midpoint state walks
one octant of the boundary. Each boundary pixel gets a coverage estimate
from a 5x5 subsample grid, and the colour is blended into the canvas with
``alpha = 100 - coverage`` so the edge fades into what lies underneath.
Everything is mirrored into all eight octants.
"""

from __future__ import annotations

import numpy as np

from shape_mosaic.canvas import ALPHA_OPAQUE, ALPHA_TRANSPARENT, Canvas, Color

SEED_ALPHA = 42

# Subsample positions relative to a boundary pixel, in pixels.
_SUBSAMPLE_OFFSETS = np.array([-0.45, -0.25, -0.05, 0.15, 0.35])
_SUBSAMPLE_WEIGHT = ALPHA_TRANSPARENT // _SUBSAMPLE_OFFSETS.size ** 2

_QUADRANTS = ((1, 1), (1, -1), (-1, 1), (-1, -1))


def edge_coverage(ix: float, iy: float, radius: float) -> int:
    """Estimate how much of pixel (ix, iy) lies inside the circle, 0..100."""
    xs = ix + _SUBSAMPLE_OFFSETS
    ys = iy + _SUBSAMPLE_OFFSETS
    dist = np.sqrt(xs[:, np.newaxis] ** 2 + ys[np.newaxis, :] ** 2)
    return int(np.count_nonzero(dist < radius)) * _SUBSAMPLE_WEIGHT


def _line(canvas: Canvas, x0: float, y0: float, x1: float, y1: float, color: Color) -> None:
    canvas.draw_line(int(x0), int(y0), int(x1), int(y1), color)


def _plot(canvas: Canvas, x: float, y: float, color: Color, alpha: int) -> None:
    canvas.set_pixel(int(x), int(y), color, alpha)


def draw_smooth_circle(
    canvas: Canvas,
    cx: float,
    cy: float,
    radius: float,
    color: Color,
) -> None:
    """Draw a filled antialiased circle of *radius* centred at (cx, cy).

    Centre and radius may be fractional (odd shape sizes give ``.5``).
    The midpoint state and the coverage test run on the exact values;
    only the final pixel coordinates are truncated towards zero.
    """
    if radius < 1:
        _plot(canvas, cx, cy, color, ALPHA_OPAQUE)
        return

    r = radius
    _line(canvas, cx + r - 1, cy, cx, cy, color)
    _line(canvas, cx - r + 1, cy, cx - 1, cy, color)
    _line(canvas, cx, cy + r - 1, cx, cy + 1, color)
    _line(canvas, cx, cy - r + 1, cx, cy - 1, color)

    _plot(canvas, cx + r, cy, color, SEED_ALPHA)
    _plot(canvas, cx - r, cy, color, SEED_ALPHA)
    _plot(canvas, cx, cy + r, color, SEED_ALPHA)
    _plot(canvas, cx, cy - r, color, SEED_ALPHA)

    ix = 0
    iy = r
    ig = 2 * r - 3
    idgr = -6
    idgd = 4 * r - 10
    while ix <= iy - 2:
        if ig < 0:
            ig += idgd
            idgd -= 8
            iy -= 1
        else:
            ig += idgr
            idgd -= 4
        idgr -= 4
        ix += 1

        for sx, sy in _QUADRANTS:
            _line(canvas, cx + sx * ix, cy + sy * (iy - 1), cx + sx * ix, cy + sy * ix, color)
            _line(canvas, cx + sx * (iy - 1), cy + sy * ix, cx + sx * ix, cy + sy * ix, color)

        alpha = ALPHA_TRANSPARENT - edge_coverage(ix, iy, r)
        for sx, sy in _QUADRANTS:
            _plot(canvas, cx + sx * ix, cy + sy * iy, color, alpha)
            _plot(canvas, cx + sx * iy, cy + sy * ix, color, alpha)
