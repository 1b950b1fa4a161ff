# renderer/__init__.py
from pathtracer.renderer.integrator import ray_color
from pathtracer.renderer.raytracer import Renderer, partition_rows, render_band
from pathtracer.renderer.tone_mapping import tone_map
from pathtracer.renderer.image_io import save_image

__all__ = ["ray_color", "Renderer", "partition_rows", "render_band", "tone_map", "save_image"]
