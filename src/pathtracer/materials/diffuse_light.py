# materials/diffuse_light.py
from typing import Optional, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3, Color, Point3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, ScatterRecord
from pathtracer.materials.textures import Texture, as_texture

class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance with optional texture support.

    Light leaves only through the front face, so a light quad shines to one side.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        self.texture = as_texture(emit)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[ScatterRecord]:
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self, ray_in: Ray, rec: HitRecord, u: float, v: float, p: Point3) -> Color:
        """
        Return the emitted radiance at the hit.

        Args:
            ray_in (Ray): The incoming ray.
            rec (HitRecord): The hit record; only front-face hits emit.
            u (float): The horizontal texture coordinate.
            v (float): The vertical texture coordinate.
            p (Vector3): The hit point.

        Returns:
            Vector3: The emission color from the texture, or black from behind.
        """
        if not rec.front_face:
            return Vector3(0.0, 0.0, 0.0)
        return self.texture.value(u, v, p)
