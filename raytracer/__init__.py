"""
raytracer - A minimal Python ray tracer

Casts one ray per pixel through a pinhole camera and shades it with:
- Surface-normal coloring for a single sphere
- A vertical sky gradient everywhere else
- Plain-text PPM (P3) output
"""

__version__ = "0.1.0"

from .vec3 import Vec3, Point3, Color, dot, cross, unit_vector
from .ray import Ray
from .sphere import Sphere, hit_sphere, NO_HIT
from .shading import ray_color, sky_color, normal_color
from .camera import Camera
from .renderer import Renderer, RenderSettings
from .image import to_bytes, format_color, write_ppm, save_image
from .scenes import (
    render_color_swatch, render_blue_sky, color_swatch, blue_sky, SCENES
)
