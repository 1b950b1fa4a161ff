# camera/__init__.py
from pathtracer.camera.camera import Camera

__all__ = ["Camera"]
