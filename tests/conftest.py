"""Pytest configuration for pathtracer tests.

Provides a seeded random generator for every test, since the surfaces,
materials and BVH builder all draw from the module-level ``random`` state,
plus small shared scenes.
"""

import random

import pytest

from pathtracer.core.vector import Vector3, Point3
from pathtracer.core.ray import Ray
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.box import Box
from pathtracer.geometry.rect import XYRect, XZRect
from pathtracer.geometry.transforms import Translate, RotateY
from pathtracer.materials.lambertian import Lambertian


@pytest.fixture(autouse=True)
def seeded_random():
    """Seed the global generator before each test so statistical checks are stable."""
    random.seed(20240613)
    yield


@pytest.fixture
def gray():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def mixed_objects(gray):
    """A few dozen spheres, boxes and rectangles scattered in a 20-unit cube."""
    objects = []
    for _ in range(30):
        center = Point3(random.uniform(-10, 10), random.uniform(-10, 10), random.uniform(-10, 10))
        objects.append(Sphere(center, random.uniform(0.2, 1.5), gray))
    for _ in range(8):
        p0 = Point3(random.uniform(-10, 8), random.uniform(-10, 8), random.uniform(-10, 8))
        size = Vector3(random.uniform(0.5, 2), random.uniform(0.5, 2), random.uniform(0.5, 2))
        objects.append(Box(p0, p0 + size, gray))
    objects.append(XYRect(-3, 3, -3, 3, -12, gray))
    objects.append(XZRect(-5, 5, -5, 5, 12, gray))
    objects.append(Translate(RotateY(Box(Point3(0, 0, 0), Point3(2, 3, 1), gray), 30),
                             Vector3(4, -2, 1)))
    return objects


def random_ray(spread=15.0):
    """Ray from a random point on a large shell aimed roughly at the origin."""
    origin = Vector3(random.uniform(-1, 1), random.uniform(-1, 1), random.uniform(-1, 1))
    origin = origin.normalize() * 40.0
    target = Vector3(random.uniform(-spread, spread), random.uniform(-spread, spread),
                     random.uniform(-spread, spread))
    return Ray(origin, target - origin)


@pytest.fixture
def ray_factory():
    return random_ray
