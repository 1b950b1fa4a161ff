# pdf/cosine_pdf.py
import math
from pathtracer.core.vector import Vector3
from pathtracer.core.onb import ONB
from pathtracer.core.utils import random_cosine_direction
from pathtracer.pdf.pdf import Pdf

class CosinePdf(Pdf):
    """
    Cosine-weighted hemisphere around w: density cos(theta) / pi.
    """
    def __init__(self, w: Vector3):
        self.uvw = ONB.build_from_w(w)

    def value(self, direction: Vector3) -> float:
        cosine = direction.normalize().dot(self.uvw.w)
        if cosine <= 0.0:
            return 0.0
        return cosine / math.pi

    def generate(self) -> Vector3:
        return self.uvw.local(random_cosine_direction())
