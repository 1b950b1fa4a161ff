# pdf/hittable_pdf.py
from pathtracer.core.vector import Vector3, Point3
from pathtracer.pdf.pdf import Pdf

class HittablePdf(Pdf):
    """
    Samples directions from origin toward a target surface, typically the
    scene's light list, using the surface's own pdf_value() and random().
    """
    def __init__(self, target, origin: Point3):
        self.target = target
        self.origin = origin

    def value(self, direction: Vector3) -> float:
        return self.target.pdf_value(self.origin, direction)

    def generate(self) -> Vector3:
        return self.target.random(self.origin)
