# pdf/pdf.py
from pathtracer.core.vector import Vector3

class Pdf:
    """
    A probability density over directions, with a matching sampler.

    value() must be the density, over solid angle, of the directions that
    generate() produces.
    """
    def value(self, direction: Vector3) -> float:
        raise NotImplementedError("value() must be implemented by subclasses.")

    def generate(self) -> Vector3:
        raise NotImplementedError("generate() must be implemented by subclasses.")
