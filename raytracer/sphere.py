"""
Ray-sphere intersection.

Only the near root of the quadratic is considered; there is a single
sphere and no shadow or secondary rays, so the far root is never needed.
"""

from __future__ import annotations
from dataclasses import dataclass
import math
import numpy as np

from .vec3 import Vec3, Point3
from .ray import Ray

# Returned by hit_sphere when the ray misses
NO_HIT = -1.0


def hit_sphere(center: Point3, radius: float, ray: Ray) -> float:
    """Intersect a ray with a sphere using the half-b quadratic form.

    The equation (P-C)·(P-C) = r² where P = ray.at(t)
    expands to: t²(d·d) + 2t(d·(O-C)) + (O-C)·(O-C) - r² = 0.

    Returns:
        The near root t, or NO_HIT when the discriminant is negative.
        Callers must treat t <= 0 as no visible hit as well.
    """
    oc = ray.origin - center
    a = ray.direction.length_squared()
    half_b = oc.dot(ray.direction)
    c = oc.length_squared() - radius * radius
    discriminant = half_b * half_b - a * c

    if discriminant < 0:
        return NO_HIT
    # a zero-length direction gives nan instead of raising
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(-half_b - math.sqrt(discriminant)) / a)


@dataclass(frozen=True)
class Sphere:
    """A sphere defined by center and radius."""

    center: Point3
    radius: float

    def hit(self, ray: Ray) -> float:
        return hit_sphere(self.center, self.radius, ray)

    def outward_normal(self, point: Point3) -> Vec3:
        return (point - self.center).unit_vector()
