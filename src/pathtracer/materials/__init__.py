# materials/__init__.py
from pathtracer.materials.material import Material, ScatterRecord, Empty
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.isotropic import Isotropic
from pathtracer.materials.textures import (
    Texture, SolidColor, CheckerTexture, NoiseTexture, ImageTexture, as_texture,
)
from pathtracer.materials.perlin import Perlin

__all__ = [
    "Material", "ScatterRecord", "Empty",
    "Lambertian", "Metal", "Dielectric", "DiffuseLight", "Isotropic",
    "Texture", "SolidColor", "CheckerTexture", "NoiseTexture", "ImageTexture",
    "as_texture", "Perlin",
]
