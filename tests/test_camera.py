"""Tests for Camera class."""

import pytest
from raytracer.vec3 import Vec3, Point3
from raytracer.camera import Camera


class TestCameraCreation:
    """Test Camera construction."""

    def test_default_camera(self):
        cam = Camera()
        assert cam.origin == Point3(0, 0, 0)
        assert cam.focal_length == 1.0

    def test_viewport_vectors(self):
        cam = Camera(aspect_ratio=16 / 9, viewport_height=2.0)
        assert cam.horizontal == Vec3(32 / 9, 0, 0)
        assert cam.vertical == Vec3(0, 2.0, 0)

    def test_lower_left_corner(self):
        cam = Camera(aspect_ratio=2.0, viewport_height=2.0, focal_length=1.0)
        assert cam.lower_left_corner == Point3(-2.0, -1.0, -1.0)

    def test_offset_origin(self):
        cam = Camera(aspect_ratio=1.0, origin=Point3(1, 2, 3))
        assert cam.lower_left_corner == Point3(0, 1, 2)


class TestCameraRays:
    """Test Camera.get_ray() method."""

    def test_center_ray(self):
        cam = Camera(aspect_ratio=1.0)
        ray = cam.get_ray(0.5, 0.5)
        assert ray.origin == Point3(0, 0, 0)
        assert ray.direction == Vec3(0, 0, -1)

    def test_corner_rays(self):
        cam = Camera(aspect_ratio=2.0, viewport_height=2.0)
        assert cam.get_ray(0, 0).direction == Vec3(-2, -1, -1)
        assert cam.get_ray(1, 1).direction == Vec3(2, 1, -1)

    def test_direction_not_normalized(self):
        cam = Camera(aspect_ratio=1.0)
        ray = cam.get_ray(0, 0)
        assert ray.direction.length() > 1.0

    def test_rays_start_at_origin(self):
        cam = Camera(origin=Point3(1, 2, 3))
        ray = cam.get_ray(0.25, 0.75)
        assert ray.origin == Point3(1, 2, 3)


class TestCameraRepr:
    """Test Camera string representation."""

    def test_repr(self):
        s = repr(Camera())
        assert "Camera" in s
        assert "origin" in s
