#!/usr/bin/env python3
"""
raytracer - renders the color swatch and blue sky scenes to PPM files.

Usage: ./raytracer [colorswatch|bluesky]
"""

import sys

from raytracer.cli import main


if __name__ == '__main__':
    sys.exit(main())
