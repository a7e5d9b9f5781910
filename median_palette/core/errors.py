"""Exceptions raised by median-palette outside the core algorithm.

An empty bucket is not an error: ColorBucket.from_pixels returns None.
"""


class MedianPaletteError(Exception):
    """Base class for all median-palette errors."""


class PixelSourceError(MedianPaletteError):
    """The input image is missing or cannot be decoded."""


class ConfigError(MedianPaletteError):
    """A configuration value from the environment is invalid."""
