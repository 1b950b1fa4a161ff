"""Tests for the scene registry and the built-in scene builders."""

import random

import numpy as np
import pytest
from PIL import Image

from pathtracer.core.vector import Vector3, Point3
from pathtracer.core.ray import Ray
from pathtracer.geometry.bvh import FlatBVH
from pathtracer.scenes import (
    SCENES, Scene, UnknownSceneError, available_scenes, get_scene,
)

ALL_SCENES = [
    "random_scene", "two_checker_spheres", "two_perlin_spheres", "earth",
    "simple_light", "cornell_box", "cornell_smoke", "final_scene", "ground_sphere",
]


@pytest.fixture
def texture_file(tmp_path):
    path = tmp_path / "globe.png"
    data = np.zeros((4, 8, 3), dtype=np.uint8)
    data[:, :4] = [30, 60, 200]
    data[:, 4:] = [40, 160, 40]
    Image.fromarray(data).save(path)
    return str(path)


class TestRegistry:
    def test_every_scene_is_registered(self):
        assert set(ALL_SCENES) == set(SCENES)
        assert available_scenes() == sorted(ALL_SCENES)

    def test_textured_scenes_are_flagged(self):
        textured = {name for name, entry in SCENES.items() if entry.textured}
        assert textured == {"earth", "final_scene"}

    def test_unknown_scene(self):
        with pytest.raises(UnknownSceneError, match="no_such_scene"):
            get_scene("no_such_scene")

    def test_unknown_scene_is_a_key_error(self):
        with pytest.raises(KeyError):
            get_scene("")


class TestBuilders:
    @pytest.mark.parametrize("name", [n for n in ALL_SCENES if not SCENES[n].textured])
    def test_untextured_scenes_build(self, name):
        scene = get_scene(name, 1.5)
        assert isinstance(scene, Scene)
        assert isinstance(scene.world, FlatBVH)
        assert scene.camera.aspect_ratio == 1.5
        assert scene.world.bounding_box() is not None

    @pytest.mark.parametrize("name", ["earth", "final_scene"])
    def test_textured_scenes_need_the_image(self, name, tmp_path):
        with pytest.raises(FileNotFoundError):
            get_scene(name, texture_path=str(tmp_path / "missing.jpg"))

    @pytest.mark.parametrize("name", ["earth", "final_scene"])
    def test_textured_scenes_build(self, name, texture_file):
        scene = get_scene(name, texture_path=texture_file)
        assert isinstance(scene.world, FlatBVH)

    def test_same_seed_same_scene(self):
        random.seed(3)
        first = get_scene("random_scene")
        random.seed(3)
        second = get_scene("random_scene")
        assert len(first.world) == len(second.world)
        np.testing.assert_array_equal(first.world.bbox_min, second.world.bbox_min)


class TestCornellBox:
    """The Cornell scenes sample a single ceiling light facing down."""

    @pytest.mark.parametrize("name", ["cornell_box", "cornell_smoke"])
    def test_light_list(self, name):
        scene = get_scene(name)
        assert len(scene.lights) == 1
        assert scene.background == Vector3(0, 0, 0)

    def test_light_shines_into_the_room(self):
        scene = get_scene("cornell_box")
        ray = Ray(Point3(278, 500, 278), Vector3(0, 1, 0))
        rec = scene.world.hit(ray, 0.001, float("inf"))
        assert rec is not None
        assert rec.p.y == pytest.approx(554)
        assert rec.front_face
        assert rec.material.emitted(ray, rec, rec.u, rec.v, rec.p) == Vector3(15, 15, 15)

    def test_light_sampling_from_the_floor(self):
        scene = get_scene("cornell_box")
        origin = Point3(278, 1, 278)
        for _ in range(50):
            direction = scene.lights.random(origin)
            assert direction.y > 0
            assert scene.lights.pdf_value(origin, direction) > 0
