"""Write the palette as a CSV table.

First row is the header `R, G, B, A`, then one row per colour in palette
order, values separated by a comma and a space.

Example:
    median-palette -f photo.jpg -i 3 csv -o photo_palette
    # writes photo_palette.csv
"""

from typing import TextIO

from median_palette.core.color import Color
from median_palette.core.types import Exporter

exporter = Exporter(
    name='csv',
    extension='csv',
    help='CSV table with header R, G, B, A and one row per colour.',
)

HEADER = 'R, G, B, A'


@exporter.writer
def write(palette: list[Color], out: TextIO, image_path: str) -> None:
    out.write(HEADER + '\n')
    for c in palette:
        out.write(', '.join(str(v) for v in c.as_tuple()) + '\n')
