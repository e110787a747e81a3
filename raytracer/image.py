"""
Image output.

Colors are converted to 8-bit channel values by scaling with 255.999 and
truncating. Nothing is clamped: components outside [0, 1) produce values
outside 0..255 in the PPM output, and NaN produces an unspecified integer.
"""

from __future__ import annotations
from pathlib import Path
from typing import Union
import numpy as np

from .vec3 import Color

PathLike = Union[str, Path]

CHANNEL_SCALE = 255.999
MAX_CHANNEL = 255


def to_bytes(image: np.ndarray) -> np.ndarray:
    """Convert a float color array to integer channel values.

    Args:
        image: Float array whose last axis holds RGB in [0, 1)

    Returns:
        int64 array of the same shape, truncated toward zero
    """
    with np.errstate(invalid='ignore', over='ignore'):
        return (CHANNEL_SCALE * np.asarray(image, dtype=np.float64)).astype(np.int64)


def format_color(color: Color) -> str:
    """Format one color as a PPM triplet such as '0 255 63'."""
    r, g, b = to_bytes(color.to_array())
    return f"{r} {g} {b}"


def write_ppm(image: np.ndarray, filename: PathLike) -> None:
    """Write a plain-text (P3) PPM file.

    Args:
        image: Float image of shape (height, width, 3), top row first
        filename: Output path; OSError from opening or writing propagates
    """
    height, width = image.shape[:2]
    pixels = to_bytes(image).reshape(-1, 3)

    with open(filename, 'w', encoding='ascii', newline='\n') as f:
        f.write(f"P3\n{width} {height}\n{MAX_CHANNEL}\n")
        np.savetxt(f, pixels, fmt='%d', delimiter=' ')


def save_image(image: np.ndarray, filename: PathLike) -> None:
    """Save image to file.

    Args:
        image: Float image of shape (height, width, 3)
        filename: Output filename (extension determines format)
    """
    if str(filename).lower().endswith('.ppm'):
        write_ppm(image, filename)
        return

    from PIL import Image as PILImage

    # Pillow needs real bytes, so this path clamps
    ldr = np.clip(to_bytes(image), 0, MAX_CHANNEL).astype(np.uint8)
    PILImage.fromarray(ldr).save(filename)
