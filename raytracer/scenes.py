"""
Scene drivers.

Each driver renders one fixed scene and writes it as a PPM file in the
output directory. Scene parameters (camera, sphere, image size) are built
inside the render function on every call.
"""

from __future__ import annotations
from pathlib import Path
from typing import Callable, Dict, Optional
import numpy as np

from .vec3 import Point3, Color
from .camera import Camera
from .sphere import Sphere
from .shading import ray_color
from .renderer import Renderer, RenderSettings
from .image import PathLike, save_image

SWATCH_FILENAME = 'color_swatch.ppm'
BLUE_SKY_FILENAME = 'blue_sky.ppm'

ProgressCallback = Callable[[int], None]


def render_color_swatch(
    width: int = 256,
    height: int = 256,
    num_threads: int = 1,
    progress: Optional[ProgressCallback] = None
) -> np.ndarray:
    """Render the red/green gradient test pattern.

    Pixel (i, j) is (i / (width - 1), j / (height - 1), 0.25); no rays
    are involved.
    """
    renderer = Renderer(RenderSettings(width=width, height=height, num_threads=num_threads))
    if progress:
        renderer.set_progress_callback(progress)

    def shade(i: int, j: int) -> Color:
        return Color(i / (width - 1), j / (height - 1), 0.25)

    return renderer.render(shade)


def render_blue_sky(
    image_width: int = 400,
    aspect_ratio: float = 16.0 / 9.0,
    num_threads: int = 1,
    progress: Optional[ProgressCallback] = None
) -> np.ndarray:
    """Render the normal-shaded sphere against the sky gradient."""
    image_height = int(image_width / aspect_ratio)

    camera = Camera(aspect_ratio=aspect_ratio, viewport_height=2.0, focal_length=1.0)
    sphere = Sphere(Point3(0.0, 0.0, -1.0), 0.5)

    renderer = Renderer(
        RenderSettings(width=image_width, height=image_height, num_threads=num_threads)
    )
    if progress:
        renderer.set_progress_callback(progress)

    def shade(i: int, j: int) -> Color:
        u = i / (image_width - 1)
        v = j / (image_height - 1)
        return ray_color(camera.get_ray(u, v), sphere)

    return renderer.render(shade)


def color_swatch(output_dir: PathLike = '.', progress: Optional[ProgressCallback] = None) -> Path:
    """Render the color swatch and write it to color_swatch.ppm."""
    path = Path(output_dir) / SWATCH_FILENAME
    save_image(render_color_swatch(progress=progress), path)
    return path


def blue_sky(output_dir: PathLike = '.', progress: Optional[ProgressCallback] = None) -> Path:
    """Render the blue sky scene and write it to blue_sky.ppm."""
    path = Path(output_dir) / BLUE_SKY_FILENAME
    save_image(render_blue_sky(progress=progress), path)
    return path


# Command-line name -> driver
SCENES: Dict[str, Callable[..., Path]] = {
    'colorswatch': color_swatch,
    'bluesky': blue_sky,
}
