"""palette-extractor — Extract a colour palette from an image.

Usage: palette-extractor <image> [options]

Prints one colour per line (hex by default) in order of prominence.
With --grid-output, also renders the palette as a grid of 50px swatches
and saves it; the format is chosen from the file extension.

Quantization engines are auto-discovered from palette_extractor/quantizers/.

Environment variables:
  PALETTE_EXTRACTOR_ALGORITHM  default clustering algorithm (kmeans | median-cut).
                               --algorithm always wins.
"""

import argparse
import logging
import sys

from palette_extractor import registry
from palette_extractor.core.env import ALGORITHM_ENV_VAR, resolve_algorithm
from palette_extractor.core.errors import PaletteError
from palette_extractor.core.extract import extract_palette
from palette_extractor.core.grid import save_grid
from palette_extractor.core.report import format_json, format_text
from palette_extractor.core.types import ColorFormat
from palette_extractor.core.validate import validate_request

logger = logging.getLogger('palette_extractor')


def _build_parser() -> argparse.ArgumentParser:
    algorithms = sorted(a.value for a in registry.all_quantizers())

    epilog = (
        'Examples:\n'
        '  palette-extractor photo.jpg\n'
        '  palette-extractor photo.jpg -m 8 -q 1 --rgb\n'
        '  palette-extractor photo.jpg --prefix Color\n'
        '  palette-extractor photo.jpg --grid-output swatches.png\n'
        '  palette-extractor photo.jpg --algorithm median-cut --json\n'
        '\n'
        'Environment:\n'
        f'  {ALGORITHM_ENV_VAR}=kmeans|median-cut  default for --algorithm\n'
    )
    parser = argparse.ArgumentParser(
        prog='palette-extractor',
        description='Extract a colour palette from an image.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument('image_path', help='Path the image from where to extract the color palette')
    parser.add_argument(
        '-q',
        '--quality',
        type=int,
        default=10,
        help='Quality of the palette (1..10, 1 is best and slowest) (default: 10)',
    )
    parser.add_argument(
        '-m',
        '--max-colors',
        type=int,
        default=6,
        help='Maximum colors of the palette (2..255) (default: 6)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose mode (logging)')
    parser.add_argument('--rgb', action='store_true', help='Output colors using RGB format [default: hex]')
    parser.add_argument(
        '--prefix',
        default=None,
        help='Add prefixes (to make output human-readable. ie. "Color 1: #000000").',
    )
    parser.add_argument(
        '-g',
        '--grid-output',
        metavar='PATH',
        default=None,
        help='Also save the palette as a swatch grid image (format from extension)',
    )
    parser.add_argument(
        '-a',
        '--algorithm',
        choices=algorithms,
        default=None,
        help=f'Clustering algorithm (default: ${ALGORITHM_ENV_VAR} or kmeans)',
    )
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    return parser


def _configure_logging(verbose: bool) -> None:
    """Diagnostics go to stderr and only when asked for; stdout stays clean."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
        )
        # PIL's plugin chatter is noise here
        logging.getLogger('PIL').setLevel(logging.INFO)


def _run(args: argparse.Namespace) -> None:
    algorithm = resolve_algorithm(args.algorithm)
    request = validate_request(args.quality, args.max_colors, args.image_path, algorithm)
    palette = extract_palette(request)

    if args.json:
        # Grid first so the document never names a file that was not written
        if args.grid_output:
            save_grid(palette, args.grid_output)
        print(format_json(request, palette, grid_path=args.grid_output))
        return

    fmt = ColorFormat.RGB if args.rgb else ColorFormat.HEX
    print(format_text(palette, fmt, args.prefix), flush=True)

    if args.grid_output:
        save_grid(palette, args.grid_output)
        print(f'Saved palette grid to {args.grid_output}')


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        _run(args)
    except PaletteError as exc:
        logger.debug('Aborting', exc_info=exc)
        print(f'Error: {exc.message}', file=sys.stderr)
        if exc.hint:
            print(f'Hint: {exc.hint}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
