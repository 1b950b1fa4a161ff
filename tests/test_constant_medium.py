"""Tests for the homogeneous participating medium."""

import math

import pytest

from pathtracer.core.vector import Vector3, Point3
from pathtracer.core.ray import Ray
from pathtracer.geometry.box import Box
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.constant_medium import ConstantMedium
from pathtracer.materials.isotropic import Isotropic


class TestConstantMedium:
    """Free-flight sampling inside a closed boundary."""

    def test_dense_medium_scatters_at_entry(self, gray):
        medium = ConstantMedium(Box(Point3(0, 0, 0), Point3(1, 1, 1), gray), 1e6, Vector3(1, 1, 1))
        ray = Ray(Point3(0.5, 0.5, 5), Vector3(0, 0, -1))
        for _ in range(100):
            rec = medium.hit(ray, 0.001, math.inf)
            assert rec is not None
            assert 4.0 <= rec.t < 4.01
            assert isinstance(rec.material, Isotropic)
            assert rec.normal == Vector3(1, 0, 0)
            assert rec.front_face
            assert rec.u == 0.0 and rec.v == 0.0

    def test_thin_medium_lets_rays_through(self, gray):
        medium = ConstantMedium(Sphere(Point3(0, 0, 0), 1, gray), 1e-9, Vector3(1, 1, 1))
        ray = Ray(Point3(0, 0, 5), Vector3(0, 0, -1))
        assert all(medium.hit(ray, 0.001, math.inf) is None for _ in range(100))

    def test_missing_boundary_is_no_event(self, gray):
        medium = ConstantMedium(Sphere(Point3(0, 0, 0), 1, gray), 1e6, Vector3(1, 1, 1))
        assert medium.hit(Ray(Point3(0, 5, 5), Vector3(0, 0, -1)), 0.001, math.inf) is None

    def test_ray_starting_inside(self, gray):
        medium = ConstantMedium(Box(Point3(0, 0, 0), Point3(1, 1, 1), gray), 1e6, Vector3(1, 1, 1))
        ray = Ray(Point3(0.5, 0.5, 0.5), Vector3(0, 0, -1))
        rec = medium.hit(ray, 0.001, math.inf)
        assert rec is not None
        assert 0.001 <= rec.t <= 0.5

    def test_interval_ending_before_boundary(self, gray):
        medium = ConstantMedium(Box(Point3(0, 0, 0), Point3(1, 1, 1), gray), 1e6, Vector3(1, 1, 1))
        ray = Ray(Point3(0.5, 0.5, 5), Vector3(0, 0, -1))
        assert medium.hit(ray, 0.001, 3.0) is None

    def test_scaled_direction_gives_same_point(self, gray):
        """The sampled distance is in world units, so t scales with 1/|direction|."""
        medium = ConstantMedium(Box(Point3(0, 0, 0), Point3(1, 1, 1), gray), 1e6, Vector3(1, 1, 1))
        rec = medium.hit(Ray(Point3(0.5, 0.5, 5), Vector3(0, 0, -4)), 0.001, math.inf)
        assert rec.t == pytest.approx(1.0, abs=1e-3)
        assert rec.p.z == pytest.approx(1.0, abs=1e-2)

    def test_bounding_box_is_boundary_box(self, gray):
        boundary = Sphere(Point3(1, 1, 1), 2, gray)
        medium = ConstantMedium(boundary, 0.5, Vector3(1, 1, 1))
        assert medium.bounding_box(0, 1).minimum == boundary.bounding_box(0, 1).minimum

    def test_density_must_be_positive(self, gray):
        with pytest.raises(ValueError):
            ConstantMedium(Sphere(Point3(0, 0, 0), 1, gray), 0.0, Vector3(1, 1, 1))
