import argparse
import logging
import sys
from collections.abc import Sequence

from bbox2d.bounding_box import BoundingBox
from bbox2d.error import ParserError
from bbox2d.points import load_points, to_vectors
from bbox2d.viewport import ViewportSettings, render_svg, viewport_size

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool, log_file: str | None) -> None:
    """Set up console (and optional file) logging for the command line tool."""

    pkg_logger = logging.getLogger('bbox2d')
    for h in list(pkg_logger.handlers):
        pkg_logger.removeHandler(h)
        h.close()

    # console handler
    ch = logging.StreamHandler()
    ch.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))
    ch.setLevel(logging.DEBUG if verbose else logging.INFO)
    pkg_logger.addHandler(ch)

    # file handler
    if log_file is not None:
        fh = logging.FileHandler(filename=log_file, mode='w')
        fh.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(name)s - %(message)s', '%Y-%m-%d %H:%M:%S'))
        fh.setLevel(logging.DEBUG)
        pkg_logger.addHandler(fh)

    pkg_logger.setLevel(logging.DEBUG)
    pkg_logger.propagate = False


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main function of the bounding-box command line tool.
    """

    # parse arguments
    parser = argparse.ArgumentParser(description='Compute the bounding-box and viewport size of a 2D point list.')

    # fmt: off
    parser.add_argument('file', nargs='?',       help='The point file, one "x y" row per point (default: stdin).', default=None,  type=str)
    parser.add_argument('-d', '--delimiter',     help='The column delimiter (default: whitespace).',             default=None,  type=str)
    parser.add_argument('-m', '--margin',        help='The viewport margin.',                                    default=10.0,  type=float)
    parser.add_argument('-W', '--width',         help='The default viewport width (used for no points).',        default=100.0, type=float)
    parser.add_argument('-H', '--height',        help='The default viewport height (used for no points).',       default=100.0, type=float)
    parser.add_argument('-r', '--radius',        help='The point radius in the SVG output.',                     default=1.0,   type=float)
    parser.add_argument('-s', '--svg',           help='Write a SVG drawing of the points to the given file.',    default=None,  type=str)
    parser.add_argument('-l', '--log-file',      help='Additionally write a debug log to the given file.',       default=None,  type=str)
    parser.add_argument('-v', '--verbose',       help='Enable debug output.',                                    default=False, action='store_true')
    # fmt: on

    args = parser.parse_args(argv)

    configure_logging(args.verbose, args.log_file)

    try:
        settings = ViewportSettings(margin=args.margin, default_width=args.width, default_height=args.height, point_radius=args.radius)
    except ValueError as e:
        parser.error(str(e))

    try:
        data = load_points(args.file if args.file is not None else sys.stdin, delimiter=args.delimiter)
    except (ParserError, OSError) as e:
        logger.error('%s', e)
        return 1

    points = to_vectors(data)
    box = BoundingBox.from_array(data)
    width, height = viewport_size(points, settings)

    if box is None:
        print('no points')
    else:
        print(f'bounds:   {box}')
        print(f'width:    {box.width()}')
        print(f'height:   {box.height()}')
        print(f'area:     {box.area()}')
    print(f'viewport: {width} x {height}')

    if args.svg is not None:
        try:
            with open(args.svg, 'w', encoding='utf-8') as f:
                f.write(render_svg(points, settings))
        except OSError as e:
            logger.error('%s', e)
            return 1
        logger.info('Wrote SVG to %s.', args.svg)

    return 0
