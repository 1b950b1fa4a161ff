# geometry/constant_medium.py
import math
import random
from typing import Optional, Union
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.core.utils import INFINITY
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.materials.isotropic import Isotropic
from pathtracer.materials.textures import Texture

# Offset used to find the exit point past the entry point
EXIT_EPSILON = 0.0001

class ConstantMedium(Hittable):
    """
    Homogeneous participating medium (smoke, fog) filling a closed boundary.

    A ray travelling a distance d inside the boundary scatters with
    probability 1 - exp(-density * d); the scatter point is drawn from that
    exponential distribution. The boundary must be convex.
    """
    def __init__(self, boundary: Hittable, density: float, albedo: Union[Vector3, Texture]):
        if density <= 0:
            raise ValueError(f"Medium density must be positive, got {density}")
        self.boundary = boundary
        self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(albedo)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        rec1 = self.boundary.hit(ray, -INFINITY, INFINITY)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, rec1.t + EXIT_EPSILON, INFINITY)
        if rec2 is None:
            return None

        t_enter = max(rec1.t, t_min)
        t_exit = min(rec2.t, t_max)
        if t_enter >= t_exit:
            return None
        t_enter = max(t_enter, 0.0)

        ray_length = ray.direction.length()
        distance_inside_boundary = (t_exit - t_enter) * ray_length
        # 1 - random() lies in (0, 1], so the log is finite
        hit_distance = self.neg_inv_density * math.log(1.0 - random.random())
        if hit_distance > distance_inside_boundary:
            return None

        t = t_enter + hit_distance / ray_length
        # Normal and face are arbitrary; the isotropic phase function ignores them
        return HitRecord(p=ray.at(t), normal=Vector3(1.0, 0.0, 0.0), t=t,
                         front_face=True, material=self.phase_function, u=0.0, v=0.0)

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.boundary.bounding_box(time0, time1)
