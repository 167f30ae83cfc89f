"""Mosaic construction: sample the source, then draw one shape per cell."""

from __future__ import annotations

import logging
import time

import numpy as np
from PIL import Image

from shape_mosaic.canvas import Canvas
from shape_mosaic.config import MosaicConfig
from shape_mosaic.errors import InvalidImage
from shape_mosaic.sampling import grid_shape, sample_pixels
from shape_mosaic.shapes import draw_shape

logger = logging.getLogger(__name__)


def as_rgb_array(image: np.ndarray | Image.Image) -> np.ndarray:
    """Coerce a Pillow image or numpy array to (H, W, 3) uint8.

    Greyscale arrays are expanded to three channels and an alpha channel
    is dropped.
    """
    if isinstance(image, Image.Image):
        return np.array(image.convert("RGB"), dtype=np.uint8)

    arr = np.asarray(image)
    if arr.ndim == 2:
        arr = np.stack([arr] * 3, axis=-1)
    if arr.ndim != 3 or arr.shape[2] < 3:
        raise InvalidImage(f"Expected an RGB image, got array of shape {arr.shape}")
    return arr[:, :, :3].astype(np.uint8, copy=False)


def compute_canvas_size(width: int, height: int, config: MosaicConfig) -> tuple[int, int]:
    """Output (w, h) for a *width* x *height* source under *config*."""
    rows, cols = grid_shape(width, height, config.sample_stride)
    return cols * config.cell_size, rows * config.cell_size


def build_mosaic(
    image: np.ndarray | Image.Image,
    config: MosaicConfig | None = None,
) -> Canvas:
    """Render *image* as a grid of shapes.

    Args:
        image:  Source as an (H, W, 3) uint8 array or a Pillow image.
        config: Sampling and shape parameters (defaults if omitted).

    Returns:
        A fresh :class:`Canvas` holding the mosaic.

    Raises:
        InvalidShape: ``config.shape`` is not supported.
        InvalidConfiguration: stride, size or margin are out of range.
        InvalidImage: the image has no pixels or is not RGB-like.
    """
    cfg = config or MosaicConfig()
    cfg.validate()
    logger.debug("Build config: %s", cfg)

    source = as_rgb_array(image)
    h, w = source.shape[:2]
    if h == 0 or w == 0:
        raise InvalidImage(f"Image has no pixels ({w}x{h})")

    t0 = time.perf_counter()
    grid = sample_pixels(source, cfg.sample_stride)
    rows, cols = grid.shape[:2]

    new_w, new_h = compute_canvas_size(w, h, cfg)
    canvas = Canvas(new_w, new_h)

    step = cfg.cell_size
    for y in range(rows):
        for x in range(cols):
            draw_shape(
                canvas, cfg.shape,
                x * step, y * step,
                cfg.shape_size, cfg.shape_margin,
                grid[y, x],
            )

    logger.info(
        "Mosaic %s: %dx%d cells -> %dx%d px  (%.2f s)",
        cfg.shape, cols, rows, new_w, new_h, time.perf_counter() - t0,
    )
    return canvas
