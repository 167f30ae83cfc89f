"""Per-cell shape drawing, dispatched on the shape name."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from shape_mosaic.canvas import Canvas, Color
from shape_mosaic.errors import InvalidShape
from shape_mosaic.smooth_circle import draw_smooth_circle
from shape_mosaic.star import star_points


def _draw_square(canvas: Canvas, ox: int, oy: int, size: int, margin: int, color: Color) -> None:
    canvas.fill_rect(ox, oy, ox + size, oy + size, color)


def _draw_circle(canvas: Canvas, ox: int, oy: int, size: int, margin: int, color: Color) -> None:
    # Plain fill, edges are not antialiased.
    canvas.fill_ellipse(ox + size / 2, oy + size / 2, size, size, color)


def _draw_smooth_circle(
    canvas: Canvas, ox: int, oy: int, size: int, margin: int, color: Color,
) -> None:
    half = size / 2
    draw_smooth_circle(canvas, ox + half, oy + half, half, color)


def _draw_star(canvas: Canvas, ox: int, oy: int, size: int, margin: int, color: Color) -> None:
    # Stars span the margin too, so their points reach into the gap.
    points = star_points(ox + size / 2, oy + size / 2, (size + margin) / 2)
    canvas.fill_polygon(points, color)


_RENDERERS: dict[str, Callable[[Canvas, int, int, int, int, Color], None]] = {
    "square": _draw_square,
    "circle": _draw_circle,
    "smoothcircle": _draw_smooth_circle,
    "star": _draw_star,
}


def draw_shape(
    canvas: Canvas,
    shape: str,
    origin_x: int,
    origin_y: int,
    size: int,
    margin: int,
    color: Sequence[int],
) -> None:
    """Draw one *shape* of *color* in the cell whose top-left is (origin_x, origin_y)."""
    try:
        renderer = _RENDERERS[shape]
    except KeyError:
        raise InvalidShape(f"Unknown shape {shape!r}") from None
    r, g, b = (int(c) for c in color[:3])
    renderer(canvas, origin_x, origin_y, size, margin, (r, g, b))
