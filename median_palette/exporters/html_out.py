"""Write an HTML page showing the source image above its palette.

The image is referenced by the path given on the command line, so the page
only displays it when opened from a directory where that path resolves.
Each colour becomes a 100x100 swatch using rgb(r,g,b); alpha is not shown.

Example:
    median-palette -f photo.jpg -i 4 html -o swatches
    # writes swatches.html
"""

import html
from typing import TextIO

from median_palette.core.color import Color
from median_palette.core.types import Exporter

exporter = Exporter(
    name='html',
    extension='html',
    help='HTML page with the source image and one swatch per colour.',
)

_HEAD = (
    '<!DOCTYPE html>\n'
    '<html>\n<head>\n'
    '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
    '<meta charset="utf-8">\n'
    '<style>img {display: block; margin-left: auto; margin-right: auto;}</style>\n'
    '</head>\n<body>\n'
)

_GRID_STYLE = (
    'display: grid;align-items: center;justify-content: center;gap: 5px;'
    'width: 100%;padding-top: 10px;grid-auto-flow: column;'
)

_SWATCH_STYLE = 'display: flex;justify-content: center;align-items: center;height: 100px;width: 100px;'


def swatch(c: Color) -> str:
    return f'<div style="background-color:rgb({c.r},{c.g},{c.b});{_SWATCH_STYLE}"></div>'


@exporter.writer
def write(palette: list[Color], out: TextIO, image_path: str) -> None:
    out.write(_HEAD)
    if image_path:
        src = html.escape(image_path, quote=True)
        out.write(f'<img src="{src}" alt="Input image" class="centered">\n')
    out.write(f'<div style="{_GRID_STYLE}">\n')
    for c in palette:
        out.write(swatch(c) + '\n')
    out.write('</div>\n</body>\n</html>\n')
