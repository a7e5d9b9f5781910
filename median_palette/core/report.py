"""Report builder — text and JSON output for median-palette runs."""

import json
from typing import Any

from median_palette.core.types import PaletteReport


def format_text(report: PaletteReport) -> str:
    """Format report as human-readable text, one colour per line."""
    lines = []
    dim = f'{report.image_width}×{report.image_height}'
    lines.append(f'Image: {report.image_path} ({dim}, {report.image_mode})')
    lines.append(f'Finished reading {report.pixel_count} pixel values in {report.read_ms} ms.')
    lines.append(f'Finished generating palette in {report.palette_ms} ms.')
    lines.append('')

    for color in report.palette:
        lines.append(str(color))

    lines.append('')
    lines.append(
        f'{len(report.palette)}/{report.max_colours} colours '
        f'({report.iterations} iteration{"s" if report.iterations != 1 else ""})'
    )
    for name, path in report.exported.items():
        lines.append(f'{name}: wrote {path}')
    return '\n'.join(lines)


def format_json(report: PaletteReport) -> str:
    """Format report as JSON. The palette list uses the same shape as the json exporter."""
    obj: dict[str, Any] = {
        'image': report.image_path,
        'dimensions': {'width': report.image_width, 'height': report.image_height},
        'mode': report.image_mode,
        'pixels': report.pixel_count,
        'iterations': {'requested': report.requested_iterations, 'used': report.iterations},
        'timing_ms': {'read': report.read_ms, 'palette': report.palette_ms},
        'palette': [{'r': c.r, 'g': c.g, 'b': c.b, 'a': c.a} for c in report.palette],
    }
    if report.exported:
        obj['exported'] = dict(report.exported)
    return json.dumps(obj, indent=2)
