# pdf/mixture_pdf.py
import random
from pathtracer.core.vector import Vector3
from pathtracer.pdf.pdf import Pdf

class MixturePdf(Pdf):
    """
    Fixed 50/50 mixture of two densities (two-strategy multiple importance
    sampling).
    """
    def __init__(self, p0: Pdf, p1: Pdf):
        self.p0 = p0
        self.p1 = p1

    def value(self, direction: Vector3) -> float:
        return 0.5 * self.p0.value(direction) + 0.5 * self.p1.value(direction)

    def generate(self) -> Vector3:
        if random.random() < 0.5:
            return self.p0.generate()
        return self.p1.generate()
