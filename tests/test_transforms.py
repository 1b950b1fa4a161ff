"""Unit tests for the Translate, RotateY and FlipFace decorators."""

import math

import pytest

from pathtracer.core.vector import Vector3, Point3
from pathtracer.core.ray import Ray
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.box import Box
from pathtracer.geometry.rect import XZRect
from pathtracer.geometry.world import HittableList
from pathtracer.geometry.transforms import Translate, RotateY, FlipFace


class TestTranslate:
    """Tests for Translate."""

    def test_moves_hit_point(self, gray):
        moved = Translate(Sphere(Point3(0, 0, 0), 1.0, gray), Vector3(0, 0, -3))
        rec = moved.hit(Ray(Point3(0, 0, 5), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec.t == pytest.approx(7.0)
        assert rec.p.z == pytest.approx(-2.0)
        assert rec.normal.z == pytest.approx(1.0)
        assert rec.front_face

    def test_round_trip_matches_untranslated(self, mixed_objects, ray_factory):
        """Translate(Translate(S, +v), -v) intersects exactly like S."""
        offset = Vector3(3.5, -1.25, 7.0)
        for obj in mixed_objects:
            round_trip = Translate(Translate(obj, offset), -offset)
            for _ in range(40):
                ray = ray_factory()
                expected = obj.hit(ray, 0.001, math.inf)
                actual = round_trip.hit(ray, 0.001, math.inf)
                if expected is None:
                    assert actual is None
                    continue
                assert actual is not None
                assert actual.t == pytest.approx(expected.t, rel=1e-9, abs=1e-9)
                assert actual.front_face == expected.front_face
                for axis in range(3):
                    assert actual.p[axis] == pytest.approx(expected.p[axis], abs=1e-9)
                    assert actual.normal[axis] == pytest.approx(expected.normal[axis], abs=1e-9)

    def test_bounding_box_is_shifted(self, gray):
        moved = Translate(Box(Point3(0, 0, 0), Point3(1, 1, 1), gray), Vector3(5, 0, -2))
        box = moved.bounding_box(0, 1)
        assert box.minimum == Vector3(5, 0, -2)
        assert box.maximum == Vector3(6, 1, -1)

    def test_light_sampling_goes_through_offset(self, gray):
        light = XZRect(-1, 1, -1, 1, 1, gray)
        moved = Translate(light, Vector3(10, 0, 0))
        origin = Point3(10, 0, 0)
        assert moved.pdf_value(origin, Vector3(0, 1, 0)) == pytest.approx(0.25)
        direction = moved.random(origin)
        assert direction.y == pytest.approx(1.0)


class TestRotateY:
    """Tests for RotateY."""

    def test_bounding_box_of_quarter_turn(self, gray):
        rotated = RotateY(Box(Point3(0, 0, 0), Point3(1, 1, 2), gray), 90)
        box = rotated.bounding_box(0, 1)
        assert box.minimum.x == pytest.approx(0.0, abs=1e-9)
        assert box.maximum.x == pytest.approx(2.0)
        assert box.minimum.z == pytest.approx(-1.0)
        assert box.maximum.z == pytest.approx(0.0, abs=1e-9)
        assert box.minimum.y == 0 and box.maximum.y == 1

    def test_hit_rotated_box(self, gray):
        rotated = RotateY(Box(Point3(0, 0, 0), Point3(1, 1, 2), gray), 90)
        rec = rotated.hit(Ray(Point3(1, 0.5, 5), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec is not None
        assert rec.t == pytest.approx(5.0)
        assert rec.p.z == pytest.approx(0.0, abs=1e-9)
        assert rec.normal.z == pytest.approx(1.0)

    def test_full_turn_is_identity(self, mixed_objects, ray_factory):
        for obj in mixed_objects[:10]:
            rotated = RotateY(obj, 360)
            for _ in range(20):
                ray = ray_factory()
                expected = obj.hit(ray, 0.001, math.inf)
                actual = rotated.hit(ray, 0.001, math.inf)
                if expected is None or actual is None:
                    continue
                assert actual.t == pytest.approx(expected.t, rel=1e-6)

    def test_unbounded_inner_has_no_box(self):
        assert RotateY(HittableList(), 30).bounding_box(0, 1) is None

    def test_light_sampling_is_rotated(self, gray):
        light = XZRect(-1, 1, -1, 1, 1, gray)
        rotated = RotateY(light, 45)
        assert rotated.pdf_value(Point3(0, 0, 0), Vector3(0, 1, 0)) == pytest.approx(0.25)
        for _ in range(20):
            direction = rotated.random(Point3(0, 0, 0))
            assert direction.y == pytest.approx(1.0)


class TestFlipFace:
    def test_only_front_face_changes(self, gray):
        rect = XZRect(-1, 1, -1, 1, 1, gray)
        ray = Ray(Point3(0, 0, 0), Vector3(0, 1, 0))
        plain = rect.hit(ray, 0.001, math.inf)
        flipped = FlipFace(rect).hit(ray, 0.001, math.inf)
        assert flipped.front_face == (not plain.front_face)
        assert flipped.normal == plain.normal
        assert flipped.t == plain.t

    def test_delegates_box_and_sampling(self, gray):
        rect = XZRect(-1, 1, -1, 1, 1, gray)
        flipped = FlipFace(rect)
        assert flipped.bounding_box(0, 0).maximum == rect.bounding_box(0, 0).maximum
        assert flipped.pdf_value(Point3(0, 0, 0), Vector3(0, 1, 0)) == pytest.approx(0.25)
