# geometry/sphere.py
import math
from typing import Optional, Tuple
from pathtracer.core.vector import Vector3, Point3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.core.onb import ONB
from pathtracer.core.utils import INFINITY, random_to_sphere
from pathtracer.geometry.hittable import Hittable, HitRecord

def get_sphere_uv(p: Point3) -> Tuple[float, float]:
    """
    Maps a point on the unit sphere to (u, v) in [0, 1]^2.

    u is the angle around the Y axis starting from X = -1, v the angle from
    Y = -1 up to Y = +1.
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return phi / (2.0 * math.pi), theta / math.pi

def hit_sphere(center: Point3, radius: float, material, ray: Ray,
               t_min: float, t_max: float) -> Optional[HitRecord]:
    oc = ray.origin - center
    a = ray.direction.length_squared()
    half_b = oc.dot(ray.direction)
    c = oc.length_squared() - radius * radius
    discriminant = half_b * half_b - a * c

    if discriminant < 0:
        return None

    sqrt_disc = math.sqrt(discriminant)
    # Find the nearest root that lies in the acceptable range
    root = (-half_b - sqrt_disc) / a
    if root <= t_min or root >= t_max:
        root = (-half_b + sqrt_disc) / a
        if root <= t_min or root >= t_max:
            return None

    rec = HitRecord()
    rec.t = root
    rec.p = ray.at(rec.t)
    outward_normal = (rec.p - center) / radius
    rec.set_face_normal(ray, outward_normal)
    rec.u, rec.v = get_sphere_uv(outward_normal)
    rec.material = material
    return rec

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Point3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return hit_sphere(self.center, self.radius, self.material, ray, t_min, t_max)

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        # The bounding box of a sphere is center ± radius
        offset = Vector3(self.radius, self.radius, self.radius)
        return AABB(self.center - offset, self.center + offset)

    def pdf_value(self, origin: Point3, direction: Vector3) -> float:
        if self.hit(Ray(origin, direction), 0.001, INFINITY) is None:
            return 0.0
        cos_theta_max = math.sqrt(
            max(0.0, 1.0 - self.radius * self.radius / (self.center - origin).length_squared()))
        solid_angle = 2.0 * math.pi * (1.0 - cos_theta_max)
        if solid_angle <= 0.0:
            return 0.0
        return 1.0 / solid_angle

    def random(self, origin: Point3) -> Vector3:
        direction = self.center - origin
        uvw = ONB.build_from_w(direction)
        return uvw.local(random_to_sphere(self.radius, direction.length_squared()))

    def __repr__(self) -> str:
        return f"Sphere({self.center}, {self.radius})"
