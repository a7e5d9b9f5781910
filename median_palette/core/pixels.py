"""Decode an image file into a flat list of RGBA colours.

Pixels are read row by row, left to right, after converting the image to
RGBA with PIL. Images without alpha get A=255.
"""

import os
import time
from dataclasses import dataclass, field

import numpy as np
from PIL import Image, UnidentifiedImageError

from median_palette.core.color import Color
from median_palette.core.errors import PixelSourceError


@dataclass
class PixelSource:
    """Decoded pixels plus the metadata the report prints."""

    path: str
    width: int
    height: int
    mode: str  # mode before RGBA conversion, e.g. 'RGB', 'P'
    colors: list[Color] = field(default_factory=list)
    elapsed_ms: int = 0


def load_image(path: str) -> Image.Image:
    """Open an image file, raising PixelSourceError if it is missing or unreadable."""
    if not os.path.isfile(path):
        raise PixelSourceError(f'Unable to locate file: {path}')
    try:
        image = Image.open(path)
        image.load()
    except (UnidentifiedImageError, OSError) as e:
        raise PixelSourceError(f'Unable to decode image {path}: {e}') from e
    return image


def image_to_colors(image: Image.Image) -> list[Color]:
    arr = np.array(image.convert('RGBA'), dtype=np.uint8)
    return [Color.from_sequence(row) for row in arr.reshape(-1, 4).tolist()]


def read_pixels(path: str) -> PixelSource:
    start = time.perf_counter()
    image = load_image(path)
    colors = image_to_colors(image)
    elapsed_ms = int((time.perf_counter() - start) * 1000)
    return PixelSource(
        path=path,
        width=image.width,
        height=image.height,
        mode=image.mode,
        colors=colors,
        elapsed_ms=elapsed_ms,
    )
