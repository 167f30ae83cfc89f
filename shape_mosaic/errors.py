"""Exception hierarchy for mosaic builds."""

from __future__ import annotations


class MosaicError(ValueError):
    """Base class for every error raised while building a mosaic."""


class InvalidConfiguration(MosaicError):
    """Stride, shape size, margin or star parameters are out of range."""


class InvalidShape(MosaicError):
    """The requested shape is not one of :data:`shape_mosaic.config.SHAPES`."""


class InvalidImage(MosaicError):
    """The source image is empty, missing or cannot be decoded."""
