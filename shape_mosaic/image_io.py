"""Image decoding, downscaling, encoding, saving and comparison sheets."""

from __future__ import annotations

import io
from datetime import datetime
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont, UnidentifiedImageError

from shape_mosaic.canvas import Canvas
from shape_mosaic.errors import InvalidImage


def compute_target_size(
    original_width: int,
    original_height: int,
    max_width: int,
) -> tuple[int, int]:
    """Compute (w, h) after capping the width at *max_width*.

    Narrower images are returned unchanged. Wider ones become exactly
    *max_width* wide with the height scaled proportionally (rounded,
    minimum 1).
    """
    if original_width <= max_width:
        return original_width, original_height
    h = max(1, round(original_height * max_width / original_width))
    return max_width, h


def downscale(img: Image.Image, max_width: int = 1024) -> Image.Image:
    """Shrink *img* so its width does not exceed *max_width*."""
    w, h = compute_target_size(img.width, img.height, max_width)
    if (w, h) == img.size:
        return img
    return img.resize((w, h), Image.LANCZOS)


def _to_rgb_array(img: Image.Image, max_width: int | None) -> np.ndarray:
    img = img.convert("RGB")
    if max_width is not None:
        img = downscale(img, max_width)
    if img.width == 0 or img.height == 0:
        raise InvalidImage(f"Image has no pixels ({img.width}x{img.height})")
    return np.array(img, dtype=np.uint8)


def decode_image(data: bytes, max_width: int | None = 1024) -> np.ndarray:
    """Decode encoded image bytes (PNG, JPEG, ...).

    Returns:
        (H, W, 3) uint8 array.
    """
    try:
        img = Image.open(io.BytesIO(data))
        img.load()
    except (UnidentifiedImageError, OSError) as exc:
        raise InvalidImage(f"Could not decode image: {exc}") from exc
    return _to_rgb_array(img, max_width)


def load_image(path: str | Path, max_width: int | None = 1024) -> np.ndarray:
    """Load an image from disk, capping its width at *max_width*.

    Returns:
        (H, W, 3) uint8 array.
    """
    path = Path(path)
    if not path.is_file():
        raise InvalidImage(f"Image file not found: {path}")
    try:
        with Image.open(path) as img:
            img.load()
            return _to_rgb_array(img, max_width)
    except (UnidentifiedImageError, OSError) as exc:
        raise InvalidImage(f"Could not read image {path}: {exc}") from exc


def encode_png(image: Canvas | Image.Image) -> bytes:
    """Encode a canvas or Pillow image as PNG bytes."""
    if isinstance(image, Canvas):
        return image.encode_png()
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def mosaic_filename(shape: str, when: datetime | None = None) -> str:
    """Default file name, e.g. ``mosaic_star_261019143005.png``."""
    stamp = (when or datetime.now()).strftime("%y%m%d%H%M%S")
    return f"mosaic_{shape}_{stamp}.png"


def save_mosaic(
    canvas: Canvas,
    output_dir: str | Path,
    shape: str,
    filename: str | None = None,
) -> Path:
    """Write *canvas* as PNG into *output_dir* and return the path.

    Without *filename* a timestamped name is generated. A custom name
    without a ``.png`` suffix gets one appended.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    if filename:
        name = filename if filename.endswith(".png") else f"{filename}.png"
    else:
        name = mosaic_filename(shape)
    path = output_dir / name
    canvas.image.save(path, format="PNG")
    return path


def make_comparison_sheet(
    source: np.ndarray,
    mosaic: Canvas,
    output_path: str | Path,
) -> None:
    """Create a 2-panel comparison: Original | Mosaic.

    The original is resized to the mosaic's dimensions so both panels
    line up.
    """
    panel_w, panel_h = mosaic.size
    label_height = 36

    original = Image.fromarray(source).resize((panel_w, panel_h), Image.NEAREST)
    panels = [original, mosaic.image]
    labels = [
        f"Original {source.shape[1]}x{source.shape[0]}",
        f"Mosaic {panel_w}x{panel_h}",
    ]

    gap = 8
    total_w = len(panels) * panel_w + (len(panels) - 1) * gap
    total_h = panel_h + label_height

    sheet = Image.new("RGB", (total_w, total_h), (30, 30, 30))
    draw = ImageDraw.Draw(sheet)

    try:
        font = ImageFont.truetype(
            "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf", 18,
        )
    except OSError:
        font = ImageFont.load_default()

    for i, (panel, label) in enumerate(zip(panels, labels, strict=True)):
        x = i * (panel_w + gap)
        sheet.paste(panel, (x, label_height))

        bbox = draw.textbbox((0, 0), label, font=font)
        text_w = bbox[2] - bbox[0]
        tx = x + (panel_w - text_w) // 2
        draw.text((tx, 6), label, fill=(220, 220, 220), font=font)

    sheet.save(output_path)
