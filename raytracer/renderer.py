"""
Renderer module - the per-pixel loop.

Implements:
- Scanline rendering of any (i, j) -> Color shader into a numpy image
- Optional multi-threaded row rendering with ordered output
- Progress reporting as scanlines remaining
"""

from __future__ import annotations
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Optional
import numpy as np

from .vec3 import Color

# shader(i, j): i counts columns from the left, j counts rows from the bottom
PixelShader = Callable[[int, int], Color]


@dataclass
class RenderSettings:
    """Configuration for the renderer."""
    width: int = 256
    height: int = 256
    num_threads: int = 1  # 0 = auto-detect

    def __post_init__(self):
        if self.width < 2 or self.height < 2:
            raise ValueError(
                f"Image must be at least 2x2 pixels, got {self.width}x{self.height}"
            )
        if self.num_threads == 0:
            self.num_threads = os.cpu_count() or 4


class Renderer:
    """Scanline renderer producing a float image, top row first."""

    def __init__(self, settings: Optional[RenderSettings] = None):
        """Create a renderer with the given settings.

        Args:
            settings: Render configuration (uses defaults if None)
        """
        self.settings = settings if settings else RenderSettings()
        self._progress_callback: Optional[Callable[[int], None]] = None

    def set_progress_callback(self, callback: Callable[[int], None]) -> None:
        """Set a callback function for progress updates.

        Args:
            callback: Function that takes the number of scanlines remaining
        """
        self._progress_callback = callback

    def render(self, shader: PixelShader) -> np.ndarray:
        """Render every pixel and return the image as a numpy array.

        Args:
            shader: Computes the color of pixel (i, j)

        Returns:
            Image as numpy array of shape (height, width, 3). Row 0 holds
            j = height - 1, so rows are in output (top to bottom) order.
        """
        width = self.settings.width
        height = self.settings.height
        image = np.zeros((height, width, 3), dtype=np.float64)

        def render_row(j: int) -> np.ndarray:
            row = np.empty((width, 3), dtype=np.float64)
            for i in range(width):
                row[i] = shader(i, j).to_array()
            return row

        scanlines = range(height - 1, -1, -1)

        if self.settings.num_threads > 1:
            with ThreadPoolExecutor(max_workers=self.settings.num_threads) as executor:
                self._collect(image, scanlines, executor.map(render_row, scanlines))
        else:
            self._collect(image, scanlines, map(render_row, scanlines))

        return image

    def _collect(self, image: np.ndarray, scanlines: range, rows) -> None:
        height = image.shape[0]
        for j, row in zip(scanlines, rows):
            if self._progress_callback:
                self._progress_callback(j)
            image[height - 1 - j] = row
