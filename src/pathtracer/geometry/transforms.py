# geometry/transforms.py
import math
from typing import Optional
from pathtracer.core.vector import Vector3, Point3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.core.utils import INFINITY, degrees_to_radians
from pathtracer.geometry.hittable import Hittable, HitRecord

class Translate(Hittable):
    """
    Moves the wrapped surface by offset. The ray is moved by -offset on the
    way in and the hit point by +offset on the way out.
    """
    def __init__(self, inner: Hittable, offset: Vector3):
        self.inner = inner
        self.offset = offset

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        moved_ray = Ray(ray.origin - self.offset, ray.direction, ray.time)
        rec = self.inner.hit(moved_ray, t_min, t_max)
        if rec is None:
            return None
        # Direction is unchanged, so normal and front_face carry over as-is.
        rec.p = rec.p + self.offset
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        box = self.inner.bounding_box(time0, time1)
        if box is None:
            return None
        return AABB(box.minimum + self.offset, box.maximum + self.offset)

    def pdf_value(self, origin: Point3, direction: Vector3) -> float:
        return self.inner.pdf_value(origin - self.offset, direction)

    def random(self, origin: Point3) -> Vector3:
        return self.inner.random(origin - self.offset)

class RotateY(Hittable):
    """
    Rotates the wrapped surface by angle degrees about the Y axis.

    The world-space bounding box is the envelope of the eight rotated
    corners of the inner box over the shutter interval [0, 1].
    """
    def __init__(self, inner: Hittable, angle: float):
        self.inner = inner
        radians = degrees_to_radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)
        self.bbox = self._rotated_box(inner.bounding_box(0.0, 1.0))

    def _rotated_box(self, box: Optional[AABB]) -> Optional[AABB]:
        if box is None:
            return None
        lo = [INFINITY, INFINITY, INFINITY]
        hi = [-INFINITY, -INFINITY, -INFINITY]
        for i in range(2):
            for j in range(2):
                for k in range(2):
                    x = i * box.maximum.x + (1 - i) * box.minimum.x
                    y = j * box.maximum.y + (1 - j) * box.minimum.y
                    z = k * box.maximum.z + (1 - k) * box.minimum.z
                    corner = self.to_world(Vector3(x, y, z))
                    for a in range(3):
                        lo[a] = min(lo[a], corner[a])
                        hi[a] = max(hi[a], corner[a])
        return AABB(Vector3(*lo), Vector3(*hi))

    def to_object(self, v: Vector3) -> Vector3:
        return Vector3(
            self.cos_theta * v.x - self.sin_theta * v.z,
            v.y,
            self.sin_theta * v.x + self.cos_theta * v.z
        )

    def to_world(self, v: Vector3) -> Vector3:
        return Vector3(
            self.cos_theta * v.x + self.sin_theta * v.z,
            v.y,
            -self.sin_theta * v.x + self.cos_theta * v.z
        )

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        rotated_ray = Ray(self.to_object(ray.origin), self.to_object(ray.direction), ray.time)
        rec = self.inner.hit(rotated_ray, t_min, t_max)
        if rec is None:
            return None
        # A rotation keeps the normal on the same side of the ray.
        rec.p = self.to_world(rec.p)
        rec.normal = self.to_world(rec.normal)
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.bbox

    def pdf_value(self, origin: Point3, direction: Vector3) -> float:
        return self.inner.pdf_value(self.to_object(origin), self.to_object(direction))

    def random(self, origin: Point3) -> Vector3:
        return self.to_world(self.inner.random(self.to_object(origin)))

class FlipFace(Hittable):
    """
    Inverts the front_face flag of the wrapped surface's hits, so a one-sided
    emitter shines from its other side.
    """
    def __init__(self, inner: Hittable):
        self.inner = inner

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        rec = self.inner.hit(ray, t_min, t_max)
        if rec is None:
            return None
        rec.front_face = not rec.front_face
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.inner.bounding_box(time0, time1)

    def pdf_value(self, origin: Point3, direction: Vector3) -> float:
        return self.inner.pdf_value(origin, direction)

    def random(self, origin: Point3) -> Vector3:
        return self.inner.random(origin)
