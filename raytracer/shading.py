"""
Per-ray shading.

A ray either hits the scene's single sphere, which is colored by its
surface normal, or falls through to a vertical sky gradient.
"""

from __future__ import annotations

from .vec3 import Vec3, Point3, Color
from .ray import Ray
from .sphere import Sphere

WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)

DEFAULT_SPHERE = Sphere(Point3(0.0, 0.0, -1.0), 0.5)


def normal_color(normal: Vec3) -> Color:
    """Map a unit normal from [-1, 1] per component into [0, 1]."""
    return (normal + WHITE) * 0.5


def sky_color(ray: Ray) -> Color:
    """Generate a sky gradient background.

    Blends from white at unit_direction.y = -1 to light blue at
    unit_direction.y = 1.
    """
    unit_direction = ray.direction.unit_vector()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t


def ray_color(ray: Ray, sphere: Sphere = DEFAULT_SPHERE) -> Color:
    """Compute the color seen along a ray.

    Args:
        ray: The ray to shade
        sphere: The sphere to test against (defaults to the unit-diameter
            sphere one unit in front of the camera)

    Returns:
        Normal-shaded color on a hit with t > 0, otherwise the sky color
    """
    t = sphere.hit(ray)
    if t > 0.0:
        return normal_color(sphere.outward_normal(ray.at(t)))
    return sky_color(ray)
