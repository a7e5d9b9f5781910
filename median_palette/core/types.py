"""Shared types for median-palette: Exporter, PaletteReport."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from median_palette.core.color import Color


class Exporter:
    """A self-registering palette output format.

    Usage in an exporter module:

        exporter = Exporter(name='csv', extension='csv', help='CSV table')

        @exporter.writer
        def write(palette, out, image_path):
            ...
    """

    def __init__(self, name: str, extension: str, help: str = ''):
        self.name = name
        self.extension = extension
        self.help = help
        self._write_fn: Callable | None = None

    def writer(self, fn: Callable) -> Callable:
        """Decorator to register the write function."""
        self._write_fn = fn
        return fn

    def output_path(self, out_filename: str) -> Path:
        return Path(f'{out_filename}.{self.extension}')

    def export(self, palette: list[Color], out_filename: str, image_path: str = '') -> Path:
        """Write the palette to <out_filename>.<extension> and return that path."""
        if self._write_fn is None:
            raise RuntimeError(f'Exporter {self.name} has no write function')
        path = self.output_path(out_filename)
        with open(path, 'w', encoding='utf-8', newline='') as out:
            self._write_fn(palette, out, image_path)
        return path


@dataclass
class PaletteReport:
    """Everything the CLI prints about one palette run."""

    image_path: str = ''
    image_width: int = 0
    image_height: int = 0
    image_mode: str = ''
    pixel_count: int = 0
    read_ms: int = 0
    palette_ms: int = 0
    requested_iterations: int = 0
    iterations: int = 0
    palette: list[Color] = field(default_factory=list)
    exported: dict[str, str] = field(default_factory=dict)  # format -> file path

    @property
    def max_colours(self) -> int:
        return 2**self.iterations

    def add_export(self, name: str, path: Path) -> None:
        self.exported[name] = str(path)
