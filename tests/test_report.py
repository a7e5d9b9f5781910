"""Tests for median_palette.core.report — text and JSON formatting."""

import json

from median_palette.core.color import Color
from median_palette.core.report import format_json, format_text
from median_palette.core.types import PaletteReport


def _report() -> PaletteReport:
    return PaletteReport(
        image_path='photo.png',
        image_width=4,
        image_height=2,
        image_mode='RGB',
        pixel_count=8,
        read_ms=3,
        palette_ms=1,
        requested_iterations=9,
        iterations=2,
        palette=[Color(1, 2, 3, 255), Color(4, 5, 6, 255)],
    )


class TestFormatText:
    def test_lists_colors_in_order(self):
        lines = format_text(_report()).splitlines()
        first = lines.index('{ R: 1, G: 2, B: 3, A: 255 }')
        assert lines[first + 1] == '{ R: 4, G: 5, B: 6, A: 255 }'

    def test_header_and_timings(self):
        text = format_text(_report())
        assert text.startswith('Image: photo.png (4×2, RGB)')
        assert 'Finished reading 8 pixel values in 3 ms.' in text
        assert 'Finished generating palette in 1 ms.' in text

    def test_summary_counts(self):
        assert '2/4 colours (2 iterations)' in format_text(_report())

    def test_exports_listed(self):
        report = _report()
        report.exported['csv'] = 'palette.csv'
        assert format_text(report).endswith('csv: wrote palette.csv')


class TestFormatJson:
    def test_fields(self):
        obj = json.loads(format_json(_report()))
        assert obj['dimensions'] == {'width': 4, 'height': 2}
        assert obj['iterations'] == {'requested': 9, 'used': 2}
        assert obj['palette'][1] == {'r': 4, 'g': 5, 'b': 6, 'a': 255}
        assert 'exported' not in obj
