"""Centralised configuration via a frozen dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Integral
from pathlib import Path

from shape_mosaic.errors import InvalidConfiguration, InvalidShape

SHAPES: tuple[str, ...] = ("square", "circle", "smoothcircle", "star")


@dataclass(frozen=True)
class MosaicConfig:
    """All tuneable parameters for a mosaic run.

    Attributes:
        sample_stride:   Pixel spacing between sample points in the source.
        shape_size:      Footprint of each drawn shape in output pixels.
        shape_margin:    Gap between neighbouring shape footprints.
        shape:           One of :data:`SHAPES`.
        max_width:       Wider sources are downscaled to this width on load.
        output_format:   Image format for saved files.
        save_comparison: Also write an Original | Mosaic comparison sheet.
        input_dir:       Folder to scan for source images.
        output_dir:      Folder for results.
    """

    # Sampling
    sample_stride: int = 20

    # Shapes
    shape_size: int = 40
    shape_margin: int = 3
    shape: str = "circle"  # see SHAPES

    # Loading
    max_width: int = 1024  # keeps the output canvas within memory bounds

    # Output
    output_format: str = "png"
    save_comparison: bool = False

    # Paths
    input_dir: Path = field(default_factory=lambda: Path("images"))
    output_dir: Path = field(default_factory=lambda: Path("output"))

    SUPPORTED_EXTENSIONS: frozenset[str] = frozenset(
        {".jpg", ".jpeg", ".png", ".bmp", ".gif", ".tiff", ".tif", ".webp", ".jfif"}
    )

    @property
    def cell_size(self) -> int:
        """Output pixels per sampled cell, shape plus margin."""
        return self.shape_size + self.shape_margin

    def validate(self) -> None:
        """Raise if the configuration cannot drive a build.

        The shape is checked first so an unknown shape is reported even
        when other values are also wrong.
        """
        if self.shape not in SHAPES:
            raise InvalidShape(
                f"Unknown shape {self.shape!r}. Choose from: {', '.join(SHAPES)}"
            )
        if not is_integer(self.sample_stride) or self.sample_stride <= 0:
            raise InvalidConfiguration(
                f"sample_stride must be a positive integer, got {self.sample_stride!r}"
            )
        if not is_integer(self.shape_size) or self.shape_size <= 0:
            raise InvalidConfiguration(
                f"shape_size must be a positive integer, got {self.shape_size!r}"
            )
        if not is_integer(self.shape_margin) or self.shape_margin < 0:
            raise InvalidConfiguration(
                f"shape_margin must be a non-negative integer, got {self.shape_margin!r}"
            )


def is_integer(value: object) -> bool:
    """True for Python and numpy integers, False for bools."""
    return isinstance(value, Integral) and not isinstance(value, bool)
