"""Pillow-backed output canvas with blend-on-write pixels."""

from __future__ import annotations

import io
from collections.abc import Sequence

import numpy as np
from PIL import Image, ImageDraw

from shape_mosaic.errors import InvalidConfiguration

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)

# Alpha scale used by set_pixel: 0 = opaque, ALPHA_TRANSPARENT = invisible.
ALPHA_OPAQUE = 0
ALPHA_TRANSPARENT = 100


class Canvas:
    """Mutable RGB drawing surface.

    Primitive fills and lines overwrite. :meth:`set_pixel` blends its colour
    over whatever is already there, which is what the smooth circle relies
    on for its edge pixels.
    """

    def __init__(self, width: int, height: int, background: Color = WHITE) -> None:
        if width <= 0 or height <= 0:
            raise InvalidConfiguration(f"Canvas must be at least 1x1, got {width}x{height}")
        self.image = Image.new("RGB", (width, height), background)
        self._draw = ImageDraw.Draw(self.image)
        self._pixels = self.image.load()

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size

    # -- primitives ------------------------------------------------------

    def fill_rect(self, x0: float, y0: float, x1: float, y1: float, color: Color) -> None:
        """Fill the rectangle with corners (x0, y0) and (x1, y1), both inclusive."""
        self._draw.rectangle(
            [min(x0, x1), min(y0, y1), max(x0, x1), max(y0, y1)], fill=color,
        )

    def fill_ellipse(
        self, cx: float, cy: float, width: float, height: float, color: Color,
    ) -> None:
        """Fill an axis-aligned ellipse centred at (cx, cy)."""
        self._draw.ellipse(
            [cx - width / 2, cy - height / 2, cx + width / 2, cy + height / 2],
            fill=color,
        )

    def fill_polygon(self, points: Sequence[tuple[float, float]], color: Color) -> None:
        """Fill the closed polygon through *points*."""
        self._draw.polygon(list(points), fill=color)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: Color) -> None:
        """Draw a 1px opaque line, both endpoints included."""
        self._draw.line([(x0, y0), (x1, y1)], fill=color, width=1)
        self._draw.point([(x0, y0), (x1, y1)], fill=color)

    def set_pixel(self, x: int, y: int, color: Color, alpha: int = ALPHA_OPAQUE) -> None:
        """Blend *color* into pixel (x, y).

        *alpha* runs from 0 (replace the pixel) to 100 (leave it unchanged).
        Writes outside the canvas are ignored.
        """
        if not ALPHA_OPAQUE <= alpha <= ALPHA_TRANSPARENT:
            raise ValueError(f"alpha must be within [0, 100], got {alpha}")
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        if alpha == ALPHA_OPAQUE:
            self._pixels[x, y] = tuple(color)
            return
        below = self._pixels[x, y]
        self._pixels[x, y] = tuple(
            round((c * (ALPHA_TRANSPARENT - alpha) + b * alpha) / ALPHA_TRANSPARENT)
            for c, b in zip(color, below, strict=True)
        )

    def get_pixel(self, x: int, y: int) -> Color:
        return self._pixels[x, y]

    # -- export ----------------------------------------------------------

    def to_array(self) -> np.ndarray:
        """Copy of the canvas as an (H, W, 3) uint8 array."""
        return np.array(self.image, dtype=np.uint8)

    def encode_png(self) -> bytes:
        buf = io.BytesIO()
        self.image.save(buf, format="PNG")
        return buf.getvalue()
