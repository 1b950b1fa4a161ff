# scenes.py
"""
Built-in scenes. Each builder takes the image aspect ratio and returns a
Scene whose world is already wrapped in a flattened BVH.
"""
import logging
import random
from typing import Callable, Dict, List, NamedTuple, Optional
from pathtracer import config
from pathtracer.core.vector import Vector3, Point3, Color
from pathtracer.core.utils import random_double, random_vector
from pathtracer.camera.camera import Camera
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.world import HittableList
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.moving_sphere import MovingSphere
from pathtracer.geometry.rect import XYRect, XZRect, YZRect
from pathtracer.geometry.box import Box
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.transforms import Translate, RotateY, FlipFace
from pathtracer.geometry.constant_medium import ConstantMedium
from pathtracer.materials.material import Empty
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.textures import NoiseTexture, ImageTexture
from pathtracer.materials.presets import (
    ColorPresets, DielectricPresets, LightPresets, MetalPresets, TexturePresets,
)

logger = logging.getLogger(__name__)

class Scene:
    """
    Everything the renderer needs: the world to intersect, the lights to
    importance-sample, the camera and the color returned for missed rays.
    """
    def __init__(self, world: Hittable, lights: Optional[Hittable], camera: Camera,
                 background: Color):
        self.world = world
        self.lights = lights
        self.camera = camera
        self.background = background

    def __repr__(self) -> str:
        return f"Scene(camera={self.camera!r}, background={self.background!r})"

class UnknownSceneError(KeyError):
    """Raised when a scene name is not in the registry."""

class SceneEntry(NamedTuple):
    builder: Callable[..., Scene]
    textured: bool

SCENES: Dict[str, SceneEntry] = {}

def register(name: str, textured: bool = False):
    """Adds a scene builder to the registry under name."""
    def decorator(builder):
        SCENES[name] = SceneEntry(builder, textured)
        return builder
    return decorator

def available_scenes() -> List[str]:
    return sorted(SCENES)

def get_scene(name: str, aspect_ratio: float = config.ASPECT_RATIO,
              texture_path: Optional[str] = None) -> Scene:
    """
    Builds the named scene. texture_path is used by the scenes that load an
    image texture and defaults to config.EARTH_TEXTURE.
    """
    try:
        entry = SCENES[name]
    except KeyError:
        raise UnknownSceneError(
            f"Unknown scene {name!r}; choose from {', '.join(available_scenes())}"
        ) from None
    logger.info("Building scene %r", name)
    if entry.textured:
        return entry.builder(aspect_ratio, texture_path or config.EARTH_TEXTURE)
    return entry.builder(aspect_ratio)

def _assemble(objects: HittableList, lights: Optional[Hittable], camera: Camera,
              background: Color) -> Scene:
    world = objects.build_flat_bvh(camera.time0, camera.time1)
    logger.info("Scene assembled: %d top-level objects, %d BVH nodes",
                len(objects), len(world))
    return Scene(world, lights, camera, background)

def _default_camera(lookfrom: Point3, lookat: Point3, vfov: float, aspect_ratio: float,
                    aperture: float = 0.0) -> Camera:
    return Camera(lookfrom, lookat, Vector3(0.0, 1.0, 0.0), vfov, aspect_ratio,
                  aperture=aperture, focus_dist=10.0, time0=0.0, time1=1.0)

def _cornell_walls(objects: HittableList):
    red = Lambertian(ColorPresets.RED)
    white = Lambertian(ColorPresets.WHITE)
    green = Lambertian(ColorPresets.GREEN)

    objects.add(YZRect(0, 555, 0, 555, 555, green))
    objects.add(YZRect(0, 555, 0, 555, 0, red))
    objects.add(XZRect(0, 555, 0, 555, 0, white))
    objects.add(XZRect(0, 555, 0, 555, 555, white))
    objects.add(XYRect(0, 555, 0, 555, 555, white))
    return white

def _cornell_light(objects: HittableList, intensity: float = 15.0) -> HittableList:
    # Flipped so the ceiling light faces down into the room
    objects.add(FlipFace(XZRect(213, 343, 227, 332, 554, LightPresets.ceiling_light(intensity))))
    return HittableList([XZRect(213, 343, 227, 332, 554, Empty())])

def _cornell_camera(aspect_ratio: float) -> Camera:
    return _default_camera(Point3(278, 278, -800), Point3(278, 278, 0), 40.0, aspect_ratio)

@register("random_scene")
def random_scene(aspect_ratio: float) -> Scene:
    """The cover scene: a checkered ground strewn with small random spheres."""
    objects = HittableList()
    objects.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(TexturePresets.checkerboard())))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = random.random()
            center = Point3(a + 0.9 * random.random(), 0.2, b + 0.9 * random.random())
            if (center - Point3(4, 0.2, 0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                # Diffuse spheres bounce during the shutter interval
                albedo = random_vector() * random_vector()
                center2 = center + Vector3(0, random_double(0, 0.5), 0)
                objects.add(MovingSphere(center, center2, 0.0, 1.0, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                albedo = random_vector(0.5, 1.0)
                fuzz = random_double(0, 0.5)
                objects.add(Sphere(center, 0.2, Metal(albedo, fuzz)))
            else:
                objects.add(Sphere(center, 0.2, DielectricPresets.glass()))

    objects.add(Sphere(Point3(0, 1, 0), 1.0, DielectricPresets.glass()))
    objects.add(Sphere(Point3(-4, 1, 0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    objects.add(Sphere(Point3(4, 1, 0), 1.0, Metal(Vector3(0.7, 0.6, 0.5), 0.0)))

    camera = _default_camera(Point3(13, 2, 3), Point3(0, 0, 0), 20.0, aspect_ratio, aperture=0.1)
    return _assemble(objects, HittableList(), camera, ColorPresets.SKY)

@register("two_checker_spheres")
def two_checker_spheres(aspect_ratio: float) -> Scene:
    objects = HittableList()
    checker = TexturePresets.checkerboard()
    objects.add(Sphere(Point3(0, -10, 0), 10, Lambertian(checker)))
    objects.add(Sphere(Point3(0, 10, 0), 10, Lambertian(checker)))

    camera = _default_camera(Point3(13, 2, 3), Point3(0, 0, 0), 20.0, aspect_ratio)
    return _assemble(objects, HittableList(), camera, ColorPresets.SKY)

@register("two_perlin_spheres")
def two_perlin_spheres(aspect_ratio: float) -> Scene:
    objects = HittableList()
    pertext = TexturePresets.marble(4.0)
    objects.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(pertext)))
    objects.add(Sphere(Point3(0, 2, 0), 2, Lambertian(pertext)))

    camera = _default_camera(Point3(13, 2, 3), Point3(0, 0, 0), 20.0, aspect_ratio)
    return _assemble(objects, HittableList(), camera, ColorPresets.SKY)

@register("earth", textured=True)
def earth(aspect_ratio: float, texture_path: str = config.EARTH_TEXTURE) -> Scene:
    """A single globe wrapped in an image texture."""
    objects = HittableList()
    objects.add(Sphere(Point3(0, 0, 0), 2, Lambertian(ImageTexture(texture_path))))

    camera = _default_camera(Point3(13, 2, 3), Point3(0, 0, 0), 20.0, aspect_ratio)
    return _assemble(objects, HittableList(), camera, ColorPresets.SKY)

@register("simple_light")
def simple_light(aspect_ratio: float) -> Scene:
    objects = HittableList()
    pertext = TexturePresets.marble(4.0)
    objects.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(pertext)))
    objects.add(Sphere(Point3(0, 2, 0), 2, Lambertian(pertext)))
    objects.add(XYRect(3, 5, 1, 3, -2, DiffuseLight(Vector3(4, 4, 4))))

    lights = HittableList([XYRect(3, 5, 1, 3, -2, Empty())])
    camera = _default_camera(Point3(26, 3, 6), Point3(0, 2, 0), 20.0, aspect_ratio)
    return _assemble(objects, lights, camera, ColorPresets.BLACK)

@register("cornell_box")
def cornell_box(aspect_ratio: float) -> Scene:
    """Cornell box with a rotated aluminum block and a glass sphere."""
    objects = HittableList()
    _cornell_walls(objects)
    lights = _cornell_light(objects)

    box1 = Box(Point3(0, 0, 0), Point3(165, 330, 165), MetalPresets.aluminum())
    objects.add(Translate(RotateY(box1, 15), Vector3(265, 0, 295)))
    objects.add(Sphere(Point3(190, 90, 190), 90, DielectricPresets.glass()))

    return _assemble(objects, lights, _cornell_camera(aspect_ratio), ColorPresets.BLACK)

@register("cornell_smoke")
def cornell_smoke(aspect_ratio: float) -> Scene:
    """Cornell box whose two blocks are replaced by black and white smoke."""
    objects = HittableList()
    white = _cornell_walls(objects)
    lights = _cornell_light(objects, intensity=7.0)

    box1 = Translate(RotateY(Box(Point3(0, 0, 0), Point3(165, 330, 165), white), 15),
                     Vector3(265, 0, 295))
    box2 = Translate(RotateY(Box(Point3(0, 0, 0), Point3(165, 165, 165), white), -18),
                     Vector3(130, 0, 65))
    objects.add(ConstantMedium(box1, 0.01, Vector3(0, 0, 0)))
    objects.add(ConstantMedium(box2, 0.01, Vector3(1, 1, 1)))

    return _assemble(objects, lights, _cornell_camera(aspect_ratio), ColorPresets.BLACK)

@register("final_scene", textured=True)
def final_scene(aspect_ratio: float, texture_path: str = config.EARTH_TEXTURE) -> Scene:
    """Every feature at once: boxes, motion blur, glass, fog, textures and instancing."""
    ground = Lambertian(ColorPresets.GROUND)
    boxes1 = []
    boxes_per_side = 20
    for i in range(boxes_per_side):
        for j in range(boxes_per_side):
            w = 100.0
            x0 = -1000.0 + i * w
            z0 = -1000.0 + j * w
            y1 = random_double(1, 101)
            boxes1.append(Box(Point3(x0, 0.0, z0), Point3(x0 + w, y1, z0 + w), ground))

    objects = HittableList()
    objects.add(BVHNode.from_list(boxes1, 0.0, 1.0))

    light = DiffuseLight(Vector3(7, 7, 7))
    objects.add(FlipFace(XZRect(123, 423, 147, 412, 554, light)))
    lights = HittableList([XZRect(123, 423, 147, 412, 554, Empty())])

    center1 = Point3(400, 400, 200)
    center2 = center1 + Vector3(30, 0, 0)
    objects.add(MovingSphere(center1, center2, 0.0, 1.0, 50, Lambertian(Vector3(0.7, 0.3, 0.1))))

    objects.add(Sphere(Point3(260, 150, 45), 50, Dielectric(1.5)))
    objects.add(Sphere(Point3(0, 150, 145), 50, Metal(Vector3(0.8, 0.8, 0.9), 1.0)))

    boundary = Sphere(Point3(360, 150, 145), 70, Dielectric(1.5))
    objects.add(boundary)
    objects.add(ConstantMedium(boundary, 0.2, Vector3(0.2, 0.4, 0.9)))
    mist = Sphere(Point3(0, 0, 0), 5000, Dielectric(1.5))
    objects.add(ConstantMedium(mist, 0.0001, Vector3(1, 1, 1)))

    objects.add(Sphere(Point3(400, 200, 400), 100, Lambertian(ImageTexture(texture_path))))
    objects.add(Sphere(Point3(220, 280, 300), 80, Lambertian(NoiseTexture(0.1))))

    white = Lambertian(ColorPresets.WHITE)
    boxes2 = [Sphere(random_vector(0, 165), 10, white) for _ in range(1000)]
    cluster = BVHNode.from_list(boxes2, 0.0, 1.0)
    objects.add(Translate(RotateY(cluster, 15), Vector3(-100, 270, 395)))

    camera = _default_camera(Point3(478, 278, -600), Point3(278, 278, 0), 40.0, aspect_ratio)
    return _assemble(objects, lights, camera, ColorPresets.BLACK)

@register("ground_sphere")
def ground_sphere(aspect_ratio: float) -> Scene:
    """
    A small diffuse sphere resting on a huge one, seen from far above
    against a sky background. The ground only fills the middle of the frame,
    so the image corners see nothing but sky.
    """
    objects = HittableList()
    objects.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(Vector3(0.5, 0.5, 0.5))))
    objects.add(Sphere(Point3(0, 1, 0), 1, Lambertian(Vector3(0.7, 0.3, 0.3))))

    camera = Camera(Point3(0, 3000, 0), Point3(0, 0, 0), Vector3(0, 0, -1), 60.0, aspect_ratio)
    return _assemble(objects, HittableList(), camera, ColorPresets.SKY)
