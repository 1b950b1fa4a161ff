# core/onb.py
from pathtracer.core.vector import Vector3

class ONB:
    """
    Orthonormal basis built around a single direction (the local z axis).
    """
    def __init__(self, u: Vector3, v: Vector3, w: Vector3):
        self.u = u
        self.v = v
        self.w = w

    @classmethod
    def build_from_w(cls, n: Vector3) -> "ONB":
        w = n.normalize()
        a = Vector3(0.0, 1.0, 0.0) if abs(w.x) > 0.9 else Vector3(1.0, 0.0, 0.0)
        v = w.cross(a).normalize()
        u = w.cross(v)
        return cls(u, v, w)

    def local(self, a: Vector3) -> Vector3:
        """
        Maps local coordinates (a.x, a.y, a.z) onto the basis.
        """
        return self.u * a.x + self.v * a.y + self.w * a.z
