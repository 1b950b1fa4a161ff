# materials/isotropic.py
from typing import Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import random_in_unit_sphere
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, ScatterRecord
from pathtracer.materials.textures import Texture, as_texture

class Isotropic(Material):
    """
    Phase function of a participating medium: scatters in a random
    direction. Treated as specular so the integrator follows it directly.
    """
    def __init__(self, albedo: Union[Vector3, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> ScatterRecord:
        scattered = Ray(rec.p, random_in_unit_sphere(), ray_in.time)
        attenuation = self.texture.value(rec.u, rec.v, rec.p)
        return ScatterRecord(attenuation, is_specular=True, specular_ray=scattered)
