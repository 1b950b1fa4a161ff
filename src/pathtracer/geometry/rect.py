# geometry/rect.py
import random
from typing import Optional
from pathtracer.core.vector import Vector3, Point3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.core.utils import INFINITY
from pathtracer.geometry.hittable import Hittable, HitRecord

# Thickness given to the flat axis so BVH boxes never have zero extent.
RECT_PADDING = 0.0001

class AxisAlignedRect(Hittable):
    """
    Rectangle lying in a coordinate plane at constant k along k_axis,
    spanning [a0, a1] along a_axis and [b0, b1] along b_axis.

    Use the XYRect / XZRect / YZRect subclasses; this base only holds the
    axis bookkeeping shared by the three planes.
    """
    a_axis = 0
    b_axis = 1
    k_axis = 2

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material

    def _compose(self, a: float, b: float, k: float) -> Vector3:
        coords = [0.0, 0.0, 0.0]
        coords[self.a_axis] = a
        coords[self.b_axis] = b
        coords[self.k_axis] = k
        return Vector3(*coords)

    def outward_normal(self) -> Vector3:
        return self._compose(0.0, 0.0, 1.0)

    def area(self) -> float:
        return (self.a1 - self.a0) * (self.b1 - self.b0)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        dk = ray.direction[self.k_axis]
        if dk == 0.0:
            return None
        t = (self.k - ray.origin[self.k_axis]) / dk
        if t <= t_min or t >= t_max:
            return None
        a = ray.origin[self.a_axis] + t * ray.direction[self.a_axis]
        b = ray.origin[self.b_axis] + t * ray.direction[self.b_axis]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        rec = HitRecord()
        rec.t = t
        rec.p = ray.at(t)
        rec.u = (a - self.a0) / (self.a1 - self.a0)
        rec.v = (b - self.b0) / (self.b1 - self.b0)
        rec.set_face_normal(ray, self.outward_normal())
        rec.material = self.material
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        return AABB(
            self._compose(self.a0, self.b0, self.k - RECT_PADDING),
            self._compose(self.a1, self.b1, self.k + RECT_PADDING)
        )

    def pdf_value(self, origin: Point3, direction: Vector3) -> float:
        rec = self.hit(Ray(origin, direction), 0.001, INFINITY)
        if rec is None:
            return 0.0
        distance_squared = rec.t * rec.t * direction.length_squared()
        cosine = abs(direction.dot(rec.normal) / direction.length())
        if cosine == 0.0:
            return 0.0
        return distance_squared / (cosine * self.area())

    def random(self, origin: Point3) -> Vector3:
        random_point = self._compose(
            random.uniform(self.a0, self.a1),
            random.uniform(self.b0, self.b1),
            self.k
        )
        return random_point - origin

    def __repr__(self) -> str:
        return (f"{type(self).__name__}({self.a0}, {self.a1}, {self.b0}, {self.b1}, "
                f"k={self.k})")

class XYRect(AxisAlignedRect):
    """Rectangle in the plane z = k, normal +z."""
    a_axis, b_axis, k_axis = 0, 1, 2

    def __init__(self, x0: float, x1: float, y0: float, y1: float, k: float, material):
        super().__init__(x0, x1, y0, y1, k, material)

class XZRect(AxisAlignedRect):
    """Rectangle in the plane y = k, normal +y."""
    a_axis, b_axis, k_axis = 0, 2, 1

    def __init__(self, x0: float, x1: float, z0: float, z1: float, k: float, material):
        super().__init__(x0, x1, z0, z1, k, material)

class YZRect(AxisAlignedRect):
    """Rectangle in the plane x = k, normal +x."""
    a_axis, b_axis, k_axis = 1, 2, 0

    def __init__(self, y0: float, y1: float, z0: float, z1: float, k: float, material):
        super().__init__(y0, y1, z0, z1, k, material)
