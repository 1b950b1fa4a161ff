# materials/textures.py
import math
import os
import numpy as np
from PIL import Image
from pathtracer.core.vector import Vector3, Color, Point3
from pathtracer.core.utils import clamp
from pathtracer.materials.perlin import Perlin

class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Point3) -> Color:
        """Sample the texture at surface coordinates (u, v) and point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")

class SolidColor(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    @classmethod
    def rgb(cls, red: float, green: float, blue: float) -> "SolidColor":
        return cls(Vector3(red, green, blue))

    def value(self, u: float, v: float, p: Point3) -> Color:
        return self.color

def as_texture(color_or_texture) -> Texture:
    """
    Wraps a plain color in a SolidColor; textures pass through.
    """
    if isinstance(color_or_texture, Texture):
        return color_or_texture
    if isinstance(color_or_texture, Vector3):
        return SolidColor(color_or_texture)
    raise TypeError(f"Expected a Vector3 or Texture, got {type(color_or_texture).__name__}")

class CheckerTexture(Texture):
    """
    3D checker pattern: the sign of sin(10x)sin(10y)sin(10z) picks the odd
    or even texture.
    """
    def __init__(self, odd, even, frequency: float = 10.0):
        self.odd = as_texture(odd)
        self.even = as_texture(even)
        self.frequency = frequency

    def value(self, u: float, v: float, p: Point3) -> Color:
        f = self.frequency
        sines = math.sin(f * p.x) * math.sin(f * p.y) * math.sin(f * p.z)
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)

class NoiseTexture(Texture):
    """A marble-like procedural texture driven by Perlin turbulence."""
    def __init__(self, scale: float = 1.0, turbulence_depth: int = 7, noise: Perlin = None):
        self.noise = noise if noise is not None else Perlin()
        self.scale = scale
        self.turbulence_depth = turbulence_depth

    def value(self, u: float, v: float, p: Point3) -> Color:
        phase = self.scale * p.z + 10.0 * self.noise.turb(p, self.turbulence_depth)
        return Vector3(1.0, 1.0, 1.0) * (0.5 * (1.0 + math.sin(phase)))

class ImageTexture(Texture):
    """A texture from an image file."""
    def __init__(self, image_path: str):
        if not os.path.exists(image_path):
            raise FileNotFoundError(f"Texture file not found: {image_path}")
        with Image.open(image_path) as img:
            # Convert to RGB if necessary
            if img.mode != 'RGB':
                img = img.convert('RGB')
            self.data = np.asarray(img, dtype=np.float64) / 255.0  # Normalize to [0,1]
            self.width = img.width
            self.height = img.height
        self.image_path = image_path

    def value(self, u: float, v: float, p: Point3) -> Color:
        # Clamp to [0, 1] and flip v so v = 1 is the top row
        u = clamp(u, 0.0, 1.0)
        v = 1.0 - clamp(v, 0.0, 1.0)

        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color = self.data[y, x]
        return Vector3(float(color[0]), float(color[1]), float(color[2]))
