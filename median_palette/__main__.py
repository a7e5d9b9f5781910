"""median-palette — Create colour palettes from images using the median cut algorithm.

Usage: uv run median-palette -f <image> [-i N] [none|html|json|csv] [-o STEM]

Output formats are auto-discovered from median_palette/exporters/.
Each exporter module's docstring is its documentation.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, median-palette looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.

  MEDIAN_PALETTE_ITERATIONS  default iteration count
  MEDIAN_PALETTE_OUT         default output file name (without extension)
"""

import argparse
import sys
import time

from median_palette import __version__, registry
from median_palette.core.color import Color
from median_palette.core.color_bucket import ColorBucket
from median_palette.core.env import Settings, load_env
from median_palette.core.errors import MedianPaletteError
from median_palette.core.pixels import read_pixels
from median_palette.core.report import format_json, format_text
from median_palette.core.types import PaletteReport

MIN_ITERATIONS = 1
MAX_ITERATIONS = 4

NO_OUTPUT = 'none'


def _log(msg: str) -> None:
    print(f'median-palette: {msg}', file=sys.stderr)


def _build_parser() -> argparse.ArgumentParser:
    exporters = registry.all_exporters()

    epilog = 'Output formats:\n'
    for name, exp in sorted(exporters.items()):
        epilog += f'  {name:<6} {exp.help}\n'
    epilog += (
        '\n'
        'Examples:\n'
        '  median-palette -f photo.jpg\n'
        '  median-palette -f photo.jpg -i 3 json\n'
        '  median-palette -f photo.jpg -i 4 html -o swatches\n'
        '  median-palette -f photo.jpg -i 2 --json\n'
    )
    parser = argparse.ArgumentParser(
        prog='median-palette',
        description='A command line tool that creates colour palettes from images using the median cut algorithm.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument('-V', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-f', '--file-name', required=True, help='Target image file name')
    parser.add_argument(
        '-i',
        '--iterations',
        type=int,
        default=None,
        help=f'Number of iterations, clamped to {MIN_ITERATIONS}..{MAX_ITERATIONS} (default: 1)',
    )
    parser.add_argument(
        'output_format',
        nargs='?',
        default=NO_OUTPUT,
        choices=[NO_OUTPUT, *sorted(exporters)],
        help='Data file format to be written (default: none)',
    )
    parser.add_argument(
        '-o',
        '--out-filename',
        default=None,
        help='File path the output is written to, without extension (default: palette)',
    )
    parser.add_argument('-j', '--json', action='store_true', help='Print the report as JSON instead of text')
    return parser


def clamp_iterations(requested: int) -> int:
    """Clamp the iteration count to the supported range, saying so on stderr."""
    if requested > MAX_ITERATIONS:
        _log(f'Switching to maximum number of iterations of {MAX_ITERATIONS}.')
        return MAX_ITERATIONS
    if requested < MIN_ITERATIONS:
        _log(f'Switching to minimum number of iterations of {MIN_ITERATIONS}.')
        return MIN_ITERATIONS
    return requested


def build_palette(colors: list[Color], iterations: int) -> list[Color] | None:
    """Median cut palette for the pixels, or None when there are no pixels."""
    bucket = ColorBucket.from_pixels(colors)
    if bucket is None:
        return None
    return bucket.make_palette(iterations)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        _log(f'loaded {env_path}')

    try:
        settings = Settings.from_env()
        requested = args.iterations if args.iterations is not None else settings.iterations
        out_filename = args.out_filename if args.out_filename is not None else settings.out_filename
        iterations = clamp_iterations(requested)

        source = read_pixels(args.file_name)
    except MedianPaletteError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    report = PaletteReport(
        image_path=source.path,
        image_width=source.width,
        image_height=source.height,
        image_mode=source.mode,
        pixel_count=len(source.colors),
        read_ms=source.elapsed_ms,
        requested_iterations=requested,
        iterations=iterations,
    )

    start = time.perf_counter()
    palette = build_palette(source.colors, iterations)
    if palette is None:
        print('Failed generating color data from the image.', file=sys.stderr)
        sys.exit(1)
    report.palette = palette
    report.palette_ms = int((time.perf_counter() - start) * 1000)

    export_error = None
    if args.output_format != NO_OUTPUT:
        exp = registry.get(args.output_format)
        try:
            path = exp.export(palette, out_filename, image_path=args.file_name)
        except OSError as e:
            export_error = f'Failed writing {exp.name} output file:\n{e}'
        else:
            report.add_export(exp.name, path)

    # The palette is printed even when the export failed
    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    if export_error:
        print(export_error, file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
