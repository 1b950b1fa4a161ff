# core/__init__.py
from pathtracer.core.vector import Vector3, Point3, Color
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.core.onb import ONB

__all__ = ["Vector3", "Point3", "Color", "Ray", "AABB", "ONB"]
