"""tiny-color — encode, decode and sample RGB colours from the command line.

Usage: tiny-color <command> [options]

Commands:
  hex R G B                       print the #RRGGBB encoding of a colour
  parse TEXT                      print the channels of a #RRGGBB string
  sample IMAGE --at X,Y           print the colour of one pixel
  sample IMAGE --bounds X1,Y1,X2,Y2
                                  print the mean colour of a box

Environment variables:
  TINY_COLOR_FORMAT=json makes --json the default.
  TINY_COLOR_LOG_LEVEL sets the log level when -v is not given.
"""

import argparse
import logging
import os
import sys

from PIL import Image

from tiny_color.core.config import load_settings
from tiny_color.core.report import format_json, format_text
from tiny_color.core.sample import sample_pixel, sample_region
from tiny_color.core.types import Color

logger = logging.getLogger(__name__)


def _coords(count: int):
    """argparse type for comma-separated integer tuples of a fixed length."""

    def parse(text: str) -> tuple[int, ...]:
        parts = [p.strip() for p in text.split(',')]
        if len(parts) != count:
            raise argparse.ArgumentTypeError(f'expected {count} comma-separated integers, got {text!r}')
        try:
            return tuple(int(p) for p in parts)
        except ValueError:
            raise argparse.ArgumentTypeError(f'expected integers, got {text!r}') from None

    return parse


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    p.add_argument('-v', '--verbose', action='count', default=0, help='More logging (-v info, -vv debug)')


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  tiny-color hex 255 0 0\n'
        '  tiny-color parse "#ff8800" --json\n'
        '  tiny-color sample screenshot.png --at 10,20\n'
        '  tiny-color sample screenshot.png --bounds 0,0,280,800\n'
    )
    parser = argparse.ArgumentParser(
        prog='tiny-color',
        description='Encode, decode and sample RGB colours as #RRGGBB strings.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    p = sub.add_parser('hex', help='Encode R G B channels as #RRGGBB')
    p.add_argument('r', type=int, help='Red channel 0-255')
    p.add_argument('g', type=int, help='Green channel 0-255')
    p.add_argument('b', type=int, help='Blue channel 0-255')
    _add_common(p)

    p = sub.add_parser('parse', help='Decode a #RRGGBB string into channels')
    p.add_argument('text', help='Colour string, e.g. "#FF0000"')
    _add_common(p)

    p = sub.add_parser('sample', help='Read a colour from an image')
    p.add_argument('image', help='Path to PNG/JPG')
    where = p.add_mutually_exclusive_group(required=True)
    where.add_argument('-a', '--at', type=_coords(2), metavar='X,Y', help='Single pixel')
    where.add_argument('-b', '--bounds', type=_coords(4), metavar='X1,Y1,X2,Y2', help='Mean over a box')
    _add_common(p)

    return parser


def _run(args: argparse.Namespace) -> list[tuple[str, Color]]:
    if args.command == 'hex':
        color = Color(args.r, args.g, args.b)
        return [(f'{args.r},{args.g},{args.b}', color)]

    if args.command == 'parse':
        return [(args.text, Color.from_hex(args.text))]

    # sample
    if not os.path.isfile(args.image):
        raise FileNotFoundError(f'image not found: {args.image}')
    with Image.open(args.image) as image:
        if args.at is not None:
            x, y = args.at
            return [(f'{x},{y}', sample_pixel(image, x, y))]
        return [(','.join(str(v) for v in args.bounds), sample_region(image, args.bounds))]


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    settings = load_settings(json_flag=args.json, verbose=args.verbose)
    logging.basicConfig(level=settings.log_level, format='%(levelname)s: %(message)s')
    logger.debug('command=%s format=%s', args.command, settings.output_format)

    try:
        entries = _run(args)
    except (ValueError, OSError) as e:
        # InvalidColorString is a ValueError; unreadable images surface as OSError
        print(f'tiny-color: {e}', file=sys.stderr)
        return 1

    if settings.output_format == 'json':
        print(format_json(entries))
    else:
        print(format_text(entries))
    return 0


if __name__ == '__main__':
    sys.exit(main())
