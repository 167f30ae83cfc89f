"""Rich command-line interface powered by Typer."""

from __future__ import annotations

import dataclasses
import logging
import time
from pathlib import Path

import numpy as np
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from shape_mosaic.builder import build_mosaic
from shape_mosaic.config import SHAPES, MosaicConfig
from shape_mosaic.errors import MosaicError
from shape_mosaic.image_io import load_image, make_comparison_sheet, save_mosaic

app = typer.Typer(
    name="shape-mosaic",
    help="Turn any image into a mosaic of squares, circles or stars.",
    add_completion=False,
    rich_markup_mode="rich",
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=True)],
    )


def _collect_images(folder: Path, extensions: frozenset[str]) -> list[Path]:
    if not folder.exists():
        return []
    return sorted(
        f for f in folder.iterdir()
        if f.is_file() and f.suffix.lower() in extensions
    )


def _resolve_shapes(shape: str) -> list[str]:
    if shape == "all":
        return list(SHAPES)
    return [shape]


def _render(
    source: np.ndarray,
    cfg: MosaicConfig,
    output_dir: Path,
    filename: str | None,
    comparison_name: str | None,
) -> Path:
    t0 = time.perf_counter()
    canvas = build_mosaic(source, cfg)
    path = save_mosaic(canvas, output_dir, cfg.shape, filename)
    if comparison_name:
        make_comparison_sheet(source, canvas, output_dir / comparison_name)
    w, h = canvas.size
    console.print(
        f"  [green]✓[/green] {path.name}  "
        f"[dim]{w}x{h} px  time={time.perf_counter() - t0:.1f}s[/dim]"
    )
    return path


# Defaults come from MosaicConfig - single source of truth
_DEFAULTS = MosaicConfig()


# -- batch command -----------------------------------------------------

@app.command()
def batch(
    input_dir: Path = typer.Option(
        _DEFAULTS.input_dir, "--input", "-i", help="Folder with source images",
    ),
    output_dir: Path = typer.Option(
        _DEFAULTS.output_dir, "--output", "-o", help="Results folder",
    ),
    shape: str = typer.Option(
        _DEFAULTS.shape, "--shape", "-s",
        help=f"One of {', '.join(SHAPES)}, or 'all'",
    ),
    stride: int = typer.Option(
        _DEFAULTS.sample_stride, "--stride", help="Pixels between sample points",
    ),
    size: int = typer.Option(
        _DEFAULTS.shape_size, "--size", help="Shape size in output pixels",
    ),
    margin: int = typer.Option(
        _DEFAULTS.shape_margin, "--margin", help="Gap between shapes",
    ),
    max_width: int = typer.Option(
        _DEFAULTS.max_width, "--max-width", help="Downscale wider sources to this width",
    ),
    comparison: bool = typer.Option(
        _DEFAULTS.save_comparison, "--comparison/--no-comparison",
        help="Also save an Original | Mosaic sheet",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Render every image in INPUT_DIR and write results to OUTPUT_DIR."""
    _setup_logging(verbose)
    logger = logging.getLogger("shape_mosaic")

    cfg = MosaicConfig(
        sample_stride=stride,
        shape_size=size,
        shape_margin=margin,
        max_width=max_width,
        save_comparison=comparison,
        input_dir=input_dir,
        output_dir=output_dir,
    )

    images = _collect_images(input_dir, cfg.SUPPORTED_EXTENSIONS)
    if not images:
        console.print(f"\n[yellow]No images found in {input_dir}/[/yellow]")
        console.print("Place .jpg / .png / ... files there and re-run.\n")
        raise typer.Exit(0)

    shapes = _resolve_shapes(shape)
    output_dir.mkdir(parents=True, exist_ok=True)

    console.print(Panel.fit(
        f"[bold]SHAPE MOSAIC[/bold]\n"
        f"Shapes: {', '.join(shapes)}  |  Stride: {cfg.sample_stride}\n"
        f"Size: {cfg.shape_size}  |  Margin: {cfg.shape_margin}  |  Images: {len(images)}",
        border_style="cyan",
    ))

    failures = 0
    for idx, img_path in enumerate(images, 1):
        stem = img_path.stem
        console.rule(f"[bold cyan][{idx}/{len(images)}] {img_path.name}[/bold cyan]")
        try:
            source = load_image(img_path, cfg.max_width)
            logger.info("Source: %dx%d", source.shape[1], source.shape[0])
            for s in shapes:
                shape_cfg = dataclasses.replace(cfg, shape=s)
                _render(
                    source, shape_cfg, output_dir,
                    f"{stem}_{s}.{cfg.output_format}",
                    f"{stem}_{s}_comparison.{cfg.output_format}" if comparison else None,
                )
        except MosaicError as exc:
            failures += 1
            console.print(f"  [red]✗[/red] {img_path.name}: {exc}")

    if failures:
        console.print(Panel.fit(
            f"[bold red]{failures} of {len(images)} images failed[/bold red]",
            border_style="red",
        ))
        raise typer.Exit(1)

    console.print(Panel.fit(
        f"[bold green]ALL DONE[/bold green] - results in [bold]{output_dir}/[/bold]",
        border_style="green",
    ))


# -- single-image command ----------------------------------------------

@app.command()
def single(
    source: Path = typer.Argument(..., help="Path to the source image"),
    output_dir: Path = typer.Option(_DEFAULTS.output_dir, "--output", "-o"),
    name: str | None = typer.Option(
        None, "--name", "-n", help="File name (default: mosaic_<shape>_<timestamp>.png)",
    ),
    shape: str = typer.Option(_DEFAULTS.shape, "--shape", "-s"),
    stride: int = typer.Option(_DEFAULTS.sample_stride, "--stride"),
    size: int = typer.Option(_DEFAULTS.shape_size, "--size"),
    margin: int = typer.Option(_DEFAULTS.shape_margin, "--margin"),
    max_width: int = typer.Option(_DEFAULTS.max_width, "--max-width"),
    comparison: bool = typer.Option(
        _DEFAULTS.save_comparison, "--comparison/--no-comparison",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Render a single image."""
    _setup_logging(verbose)

    try:
        img = load_image(source, max_width)
        for s in _resolve_shapes(shape):
            cfg = MosaicConfig(
                sample_stride=stride,
                shape_size=size,
                shape_margin=margin,
                shape=s,
                max_width=max_width,
                output_dir=output_dir,
            )
            filename = name
            if name and shape == "all":
                filename = f"{Path(name).stem}_{s}.png"
            _render(
                img, cfg, output_dir, filename,
                f"{source.stem}_{s}_comparison.png" if comparison else None,
            )
    except MosaicError as exc:
        console.print(f"[red]✗ {exc}[/red]")
        raise typer.Exit(1) from exc


if __name__ == "__main__":
    app()
