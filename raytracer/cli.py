"""
Command-line entry point.

    raytracer colorswatch   -> color_swatch.ppm
    raytracer bluesky       -> blue_sky.ppm

Anything else prints the usage line and exits with status 0.
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from .scenes import SCENES

USAGE = "Usage: ./raytracer [colorswatch|bluesky]"

_PROGRESS_WIDTH = len("Scanlines remaining: 00000 ")


class UsageError(Exception):
    """Bad argument count or unknown command."""
    pass


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog='raytracer', usage=USAGE, add_help=False)
    parser.add_argument('command', choices=sorted(SCENES))
    return parser


def _print_scanlines_remaining(remaining: int) -> None:
    print(f"\rScanlines remaining: {remaining} ", end='', flush=True)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    argv = sys.argv[1:] if argv is None else argv
    try:
        # argparse drops "--", so count the raw arguments first
        if len(argv) != 1:
            raise UsageError(f"expected one command, got {len(argv)} arguments")
        args = build_parser().parse_args(argv)
    except UsageError:
        print(USAGE)
        return 0

    SCENES[args.command](progress=_print_scanlines_remaining)

    # Erase the progress line
    print('\r' + ' ' * _PROGRESS_WIDTH + '\r', end='')
    print("Done.")
    return 0
