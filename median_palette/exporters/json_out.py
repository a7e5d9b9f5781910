"""Write the palette as JSON.

Shape: {"palette": [{"r": 0, "g": 0, "b": 0, "a": 255}, ...]}
Colours appear in palette order.

Example:
    median-palette -f photo.jpg -i 2 json
    # writes palette.json
"""

import json
from typing import TextIO

from median_palette.core.color import Color
from median_palette.core.types import Exporter

exporter = Exporter(
    name='json',
    extension='json',
    help='JSON object {"palette": [{"r", "g", "b", "a"}, ...]}.',
)


def palette_to_dict(palette: list[Color]) -> dict:
    return {'palette': [{'r': c.r, 'g': c.g, 'b': c.b, 'a': c.a} for c in palette]}


@exporter.writer
def write(palette: list[Color], out: TextIO, image_path: str) -> None:
    json.dump(palette_to_dict(palette), out, indent=2)
    out.write('\n')
