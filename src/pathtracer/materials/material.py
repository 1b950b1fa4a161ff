# materials/material.py
from typing import Optional
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3, Color, Point3
from pathtracer.geometry.hittable import HitRecord

class ScatterRecord:
    """
    Result of a scatter event. Specular materials fill specular_ray and
    leave pdf empty; diffuse ones provide the pdf to sample from.
    """
    __slots__ = ("specular_ray", "is_specular", "attenuation", "pdf")

    def __init__(self, attenuation: Color, is_specular: bool = False,
                 specular_ray: Optional[Ray] = None, pdf=None):
        self.attenuation = attenuation
        self.is_specular = is_specular
        self.specular_ray = specular_ray
        self.pdf = pdf

    def __repr__(self) -> str:
        return (f"ScatterRecord(is_specular={self.is_specular}, "
                f"attenuation={self.attenuation})")

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Non-emissive materials inherit the black emitted() below.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[ScatterRecord]:
        """
        Returns a ScatterRecord, or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def scattering_pdf(self, ray_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        return 0.0

    def emitted(self, ray_in: Ray, rec: HitRecord, u: float, v: float, p: Point3) -> Color:
        return Vector3(0.0, 0.0, 0.0)

class Empty(Material):
    """
    Placeholder material for geometry that is only ever sampled, such as
    the light list handed to the integrator.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[ScatterRecord]:
        return None
