"""Tests for the recursive path-tracing integrator."""

import math
import random

import pytest

from pathtracer.core.vector import Vector3, Point3
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.lambertian import Lambertian
from pathtracer.renderer.integrator import ray_color
from pathtracer.scenes import cornell_box, cornell_smoke

SKY = Vector3(0.7, 0.8, 1.0)


class ZeroDensityLight(Hittable):
    """Light target that always samples straight down with zero density."""

    def hit(self, ray, t_min, t_max):
        return None

    def bounding_box(self, time0, time1):
        return None

    def pdf_value(self, origin, direction):
        return 0.0

    def random(self, origin):
        return Vector3(0, -1, 0)


def random_camera_ray(scene):
    return scene.camera.get_ray(random.random(), random.random())


@pytest.fixture(scope="module")
def cornell():
    random.seed(11)
    return cornell_box(1.0)


class TestDepthTermination:
    def test_depth_zero_is_black(self, cornell):
        for _ in range(20):
            color = ray_color(random_camera_ray(cornell), SKY, cornell.world, cornell.lights, 0)
            assert color == Vector3(0, 0, 0)

    def test_depth_zero_ignores_background(self):
        assert ray_color(Ray(Point3(0, 0, 0), Vector3(0, 1, 0)), SKY, HittableList(), None, 0) \
            == Vector3(0, 0, 0)


class TestRadiance:
    """Behavior of single bounces."""

    def test_miss_returns_background(self):
        world = HittableList([Sphere(Point3(0, 0, -5), 1, Lambertian(Vector3(0.5, 0.5, 0.5)))])
        color = ray_color(Ray(Point3(0, 0, 0), Vector3(0, 1, 0)), SKY, world, None, 5)
        assert color == SKY

    def test_light_returns_emission(self, cornell):
        """Looking straight up at the ceiling light sees its radiance."""
        ray = Ray(Point3(278, 500, 278), Vector3(0, 1, 0))
        color = ray_color(ray, Vector3(0, 0, 0), cornell.world, cornell.lights, 1)
        assert color == Vector3(15, 15, 15)

    def test_back_of_light_is_dark(self):
        light = Sphere(Point3(0, 0, 0), 1, DiffuseLight(Vector3(4, 4, 4)))
        world = HittableList([light])
        # From inside the sphere every hit is a back face
        color = ray_color(Ray(Point3(0, 0, 0), Vector3(1, 0, 0)), SKY, world, None, 3)
        assert color == Vector3(0, 0, 0)

    def test_lambertian_under_sky_is_lit(self):
        world = HittableList([Sphere(Point3(0, -1000, 0), 1000, Lambertian(Vector3(0.5, 0.5, 0.5)))])
        ray = Ray(Point3(0, 1, 0), Vector3(0, -1, 0))
        total = Vector3(0, 0, 0)
        n = 200
        for _ in range(n):
            total = total + ray_color(ray, SKY, world, HittableList(), 4)
        mean = total / n
        # Albedo 0.5 times a sky of 0.7 for nearly every path off a huge floor
        assert mean.x == pytest.approx(0.35, abs=0.03)


class TestEstimatorSafety:
    """The estimate stays finite and non-negative."""

    @pytest.mark.parametrize("builder", [cornell_box, cornell_smoke])
    def test_non_negative_and_finite(self, builder):
        scene = builder(1.0)
        for _ in range(150):
            color = ray_color(random_camera_ray(scene), scene.background, scene.world,
                              scene.lights, 6)
            assert color.x >= 0 and color.y >= 0 and color.z >= 0
            assert color.is_finite()

    def test_zero_density_sample_is_rejected(self):
        world = HittableList([Sphere(Point3(0, -1000, 0), 1000, Lambertian(Vector3(0.5, 0.5, 0.5)))])
        lights = HittableList([ZeroDensityLight()])
        ray = Ray(Point3(0, 1, 0), Vector3(0, -1, 0))
        for _ in range(100):
            color = ray_color(ray, SKY, world, lights, 3)
            assert color.is_finite()
            assert min(color.x, color.y, color.z) >= 0.0

    def test_missing_lights_sample_material_only(self):
        world = HittableList([Sphere(Point3(0, -1000, 0), 1000, Lambertian(Vector3(0.5, 0.5, 0.5)))])
        ray = Ray(Point3(0, 1, 0), Vector3(0, -1, 0))
        for lights in (None, HittableList()):
            color = ray_color(ray, SKY, world, lights, 3)
            assert color.is_finite()
            assert color.x > 0
