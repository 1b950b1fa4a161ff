# geometry/__init__.py
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.moving_sphere import MovingSphere
from pathtracer.geometry.rect import XYRect, XZRect, YZRect
from pathtracer.geometry.box import Box
from pathtracer.geometry.transforms import Translate, RotateY, FlipFace
from pathtracer.geometry.bvh import BVHNode, FlatBVH, BVHConstructionError, flatten_bvh
from pathtracer.geometry.world import HittableList

# ConstantMedium is imported from pathtracer.geometry.constant_medium; it
# depends on the materials package, which imports geometry.hittable.

__all__ = [
    "Hittable", "HitRecord", "Sphere", "MovingSphere",
    "XYRect", "XZRect", "YZRect", "Box",
    "Translate", "RotateY", "FlipFace",
    "BVHNode", "FlatBVH", "BVHConstructionError", "flatten_bvh",
    "HittableList",
]
