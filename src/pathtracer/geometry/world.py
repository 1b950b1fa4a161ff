# src/geometry/world.py
import random
from typing import Iterable, List, Optional
from pathtracer.core.vector import Vector3, Point3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.bvh import BVHNode, FlatBVH, flatten_bvh

class HittableList(Hittable):
    """
    A list of Hittable objects. hit() does a linear nearest-hit scan; call
    build_bvh() to get an accelerated structure over the same objects.

    As a light-sampling target the list is an equal-weight mixture of its
    members.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def build_bvh(self, time0: float = 0.0, time1: float = 0.0) -> BVHNode:
        """
        Builds a BVH over a copy of the objects; this list keeps its order.
        """
        return BVHNode.from_list(self.objects, time0, time1)

    def build_flat_bvh(self, time0: float = 0.0, time1: float = 0.0) -> FlatBVH:
        return flatten_bvh(self.build_bvh(time0, time1), time0, time1)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        if not self.objects:
            return None
        output_box = None
        for obj in self.objects:
            box = obj.bounding_box(time0, time1)
            if box is None:
                return None
            output_box = box if output_box is None else AABB.surrounding_box(output_box, box)
        return output_box

    def pdf_value(self, origin: Point3, direction: Vector3) -> float:
        if not self.objects:
            return 0.0
        weight = 1.0 / len(self.objects)
        return sum(weight * obj.pdf_value(origin, direction) for obj in self.objects)

    def random(self, origin: Point3) -> Vector3:
        if not self.objects:
            return Vector3(1.0, 0.0, 0.0)
        return random.choice(self.objects).random(origin)
