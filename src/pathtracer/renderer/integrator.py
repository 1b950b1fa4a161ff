# renderer/integrator.py
import math
from typing import Optional
from pathtracer.config import T_MIN
from pathtracer.core.vector import Vector3, Color
from pathtracer.core.ray import Ray
from pathtracer.core.utils import INFINITY
from pathtracer.geometry.hittable import Hittable
from pathtracer.pdf.hittable_pdf import HittablePdf
from pathtracer.pdf.mixture_pdf import MixturePdf

def _has_lights(lights: Optional[Hittable]) -> bool:
    if lights is None:
        return False
    if hasattr(lights, "__len__"):
        return len(lights) > 0
    return True

def ray_color(ray: Ray, background: Color, world: Hittable,
              lights: Optional[Hittable], depth: int) -> Color:
    """
    Returns the radiance carried back along ray.

    Emission is added at every hit. Specular scatters are followed directly;
    diffuse scatters sample a 50/50 mixture of the light list and the
    material's own pdf. depth counts the remaining bounces; at 0 the path
    contributes nothing.
    """
    if depth <= 0:
        return Vector3(0.0, 0.0, 0.0)  # Exceeded recursion depth

    rec = world.hit(ray, T_MIN, INFINITY)
    if rec is None:
        return background

    emitted = rec.material.emitted(ray, rec, rec.u, rec.v, rec.p)
    srec = rec.material.scatter(ray, rec)
    if srec is None:
        return emitted

    if srec.is_specular:
        return srec.attenuation * ray_color(srec.specular_ray, background, world, lights, depth - 1)

    if _has_lights(lights):
        pdf = MixturePdf(HittablePdf(lights, rec.p), srec.pdf)
    else:
        pdf = srec.pdf

    scattered = Ray(rec.p, pdf.generate(), ray.time)
    pdf_value = pdf.value(scattered.direction)
    # A zero density means the sample could not have been drawn
    if not (pdf_value > 0.0) or math.isinf(pdf_value):
        return emitted

    scattering_pdf = rec.material.scattering_pdf(ray, rec, scattered)
    incoming = ray_color(scattered, background, world, lights, depth - 1)
    return emitted + srec.attenuation * incoming * (scattering_pdf / pdf_value)
