"""Tests for ray_color and its two branches."""

import math
import pytest

from raytracer.vec3 import Vec3, Point3, Color
from raytracer.ray import Ray
from raytracer.sphere import Sphere
from raytracer.shading import ray_color, sky_color, normal_color, WHITE, SKY_BLUE


class TestNormalShading:
    """Rays that hit the sphere are colored by their normal."""

    def test_straight_at_center(self):
        ray = Ray(Point3(0, 0, 0), Vec3(0, 0, -1))
        assert ray_color(ray) == Color(0.5, 0.5, 1.0)

    def test_normal_color_mapping(self):
        assert normal_color(Vec3(1, 0, 0)) == Color(1.0, 0.5, 0.5)
        assert normal_color(Vec3(0, -1, 0)) == Color(0.5, 0.0, 0.5)

    def test_hit_color_in_unit_range(self):
        ray = Ray(Point3(0, 0, 0), Vec3(0.2, -0.15, -1))
        color = ray_color(ray)
        for c in color:
            assert 0.0 <= c <= 1.0

    def test_custom_sphere(self):
        sphere = Sphere(Point3(0, 0, -5), 1.0)
        ray = Ray(Point3(0, 0, 0), Vec3(0, 0, -1))
        assert ray_color(ray, sphere) == Color(0.5, 0.5, 1.0)

    def test_sphere_behind_camera_not_visible(self):
        ray = Ray(Point3(0, 0, 0), Vec3(0, 0, 1))
        assert ray_color(ray) == sky_color(ray)


class TestSkyGradient:
    """Rays that miss the sphere get the sky gradient."""

    def test_zenith_is_sky_blue(self):
        ray = Ray(Point3(0, 0, 0), Vec3(0, 1, 0))
        assert ray_color(ray) == Color(0.5, 0.7, 1.0)

    def test_nadir_is_white(self):
        ray = Ray(Point3(0, 0, 0), Vec3(0, -1, 0))
        assert ray_color(ray) == Color(1.0, 1.0, 1.0)

    def test_horizon_is_midpoint(self):
        ray = Ray(Point3(0, 0, 0), Vec3(1, 0, 0))
        assert ray_color(ray) == (WHITE + SKY_BLUE) * 0.5

    def test_direction_length_does_not_matter(self):
        short = Ray(Point3(0, 0, 0), Vec3(1, 1, 0))
        long = Ray(Point3(0, 0, 0), Vec3(10, 10, 0))
        assert sky_color(short) == sky_color(long)

    def test_zero_direction_is_nan(self):
        ray = Ray(Point3(0, 0, 0), Vec3(0, 0, 0))
        color = ray_color(ray)
        assert all(math.isnan(c) for c in color)
