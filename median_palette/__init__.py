"""median-palette — colour palettes from images using the median cut algorithm."""

__version__ = '0.1.0'
