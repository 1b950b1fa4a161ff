# materials/presets.py
from pathtracer.core.vector import Vector3
from pathtracer.materials.metal import Metal
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.textures import CheckerTexture, NoiseTexture

class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def aluminum() -> Metal:
        return Metal(Vector3(0.8, 0.85, 0.88), fuzz=0.0)

class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

class LightPresets:
    @staticmethod
    def ceiling_light(intensity: float = 15.0) -> DiffuseLight:
        return DiffuseLight(Vector3(1.0, 1.0, 1.0) * intensity)

class ColorPresets:
    """Common color presets for materials."""

    RED = Vector3(0.65, 0.05, 0.05)
    GREEN = Vector3(0.12, 0.45, 0.15)
    WHITE = Vector3(0.73, 0.73, 0.73)
    GROUND = Vector3(0.48, 0.83, 0.53)
    CHECKER_DARK = Vector3(0.2, 0.3, 0.1)
    CHECKER_LIGHT = Vector3(0.9, 0.9, 0.9)
    SKY = Vector3(0.7, 0.8, 1.0)
    BLACK = Vector3(0.0, 0.0, 0.0)

class TexturePresets:
    """Predefined texture presets."""

    @staticmethod
    def checkerboard(color1: Vector3 = None, color2: Vector3 = None) -> CheckerTexture:
        """Create a checkerboard texture with default or custom colors."""
        if color1 is None:
            color1 = ColorPresets.CHECKER_DARK
        if color2 is None:
            color2 = ColorPresets.CHECKER_LIGHT
        return CheckerTexture(color1, color2)

    @staticmethod
    def marble(scale: float = 4.0) -> NoiseTexture:
        """Create a marble texture with the given stripe frequency."""
        return NoiseTexture(scale)
