"""
Command line entry point.

Example:
    seamcarve -in sky.png -out sky-reduced.png -width 125 -height 50

-width and -height are the number of columns and rows to remove.
"""

import argparse
import logging
import sys

import torch

from .carving import resize_file
from .errors import ImageIOError, UsageError

PROG = 'seamcarve'


def _count(value: str) -> int:
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: {value!r}")
    if count < 0:
        raise argparse.ArgumentTypeError(f"count must be non-negative: {value}")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Shrink an image with content-aware seam carving.",
        allow_abbrev=False)
    parser.add_argument('-in', dest='input', required=True, metavar='PATH',
                        help="input image")
    parser.add_argument('-out', dest='output', required=True, metavar='PATH',
                        help="output image (PNG unless the suffix says otherwise)")
    parser.add_argument('-width', dest='reduce_width_by', type=_count, default=0,
                        metavar='N', help="number of columns to remove")
    parser.add_argument('-height', dest='reduce_height_by', type=_count, default=0,
                        metavar='N', help="number of rows to remove")
    parser.add_argument('--device', default='cpu',
                        help="torch device to carve on (default: cpu)")
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help="logging verbosity (default: WARNING)")
    return parser


def _configure_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        torch.device(args.device)
    except RuntimeError as ex:
        parser.error(f"invalid --device {args.device!r}: {ex}")
    _configure_logging(args.log_level)

    try:
        resize_file(args.input, args.output,
                    reduce_width_by=args.reduce_width_by,
                    reduce_height_by=args.reduce_height_by,
                    device=args.device)
    except UsageError as ex:
        print(f"{PROG}: error: {ex}", file=sys.stderr)
        return 2
    except ImageIOError as ex:
        print(f"{PROG}: error: {ex}", file=sys.stderr)
        return 1

    return 0
