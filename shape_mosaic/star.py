"""Vertex generation for star-shaped (or regular) polygons."""

from __future__ import annotations

import math

from shape_mosaic.errors import InvalidConfiguration


def star_points(
    cx: float,
    cy: float,
    radius: float,
    spikes: int = 5,
    ratio: float = 0.5,
    direction: float = 270.0,
) -> list[tuple[float, float]]:
    """Vertices of a star polygon centred at (cx, cy).

    Outer and inner points alternate, starting with the outer point at
    *direction* degrees. In image coordinates (y grows downwards) the
    default 270 puts the first spike straight up. A *ratio* of
    ``cos(180 / spikes)`` gives a regular ``2 * spikes``-gon.

    Args:
        cx, cy:    Centre of the star.
        radius:    Distance from the centre to each outer point.
        spikes:    Number of outer points, at least 2.
        ratio:     Inner radius as a fraction of *radius*.
        direction: Angle of the first outer point, in degrees.

    Returns:
        ``2 * spikes`` ``(x, y)`` pairs, ready for a polygon fill.
    """
    if spikes < 2:
        raise InvalidConfiguration(f"A star needs at least 2 spikes, got {spikes}")

    step = 360 / spikes
    inner = ratio * radius
    points: list[tuple[float, float]] = []
    for i in range(spikes):
        outer_angle = math.radians(direction + step * i)
        inner_angle = math.radians(direction + step * i + step / 2)
        points.append((
            cx + radius * math.cos(outer_angle),
            cy + radius * math.sin(outer_angle),
        ))
        points.append((
            cx + inner * math.cos(inner_angle),
            cy + inner * math.sin(inner_angle),
        ))
    return points
