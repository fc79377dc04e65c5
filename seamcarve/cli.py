"""
Command-line seam carving.

    seamcarve image.pgm 10 5

removes 10 vertical seams, then 5 horizontal seams, and writes
image_processed.pgm next to the input.
"""

import argparse
import logging
import sys
from pathlib import Path

from .carving import SeamCarvingError, carve_image
from .image_io import load_image, save_image
from .pgm import PGMFormatError


def _seam_count(value: str) -> int:
    count = int(value)
    if count < 0:
        raise argparse.ArgumentTypeError(f"seam count must be non-negative, got {count}")
    return count


def default_output_path(input_path) -> Path:
    path = Path(input_path)
    return path.with_name(f"{path.stem}_processed{path.suffix}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Content-aware grayscale image shrinking by seam carving"
    )
    parser.add_argument('image', type=str,
                        help='Input image (plain PGM, or any format Pillow reads)')
    parser.add_argument('vertical', type=_seam_count,
                        help='Number of vertical seams to remove (shrinks width)')
    parser.add_argument('horizontal', type=_seam_count,
                        help='Number of horizontal seams to remove (shrinks height)')
    parser.add_argument('-o', '--output', type=str,
                        help='Output path (default: {stem}_processed{suffix})')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log every removed seam')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    output = Path(args.output) if args.output else default_output_path(args.image)

    try:
        print(f"Loading {args.image}...")
        image = load_image(args.image)
        print(f"Image size: {image.width} x {image.height}")

        print(f"Removing {args.vertical} vertical and {args.horizontal} horizontal seams...")
        carved = carve_image(image, vertical=args.vertical, horizontal=args.horizontal)
        print(f"Carved size: {carved.width} x {carved.height}")

        save_image(carved, output)
    except (PGMFormatError, SeamCarvingError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Saved: {output}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
