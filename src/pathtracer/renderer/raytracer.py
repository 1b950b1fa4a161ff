# renderer/raytracer.py
import logging
import os
import random
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import List, Optional, Tuple
import numpy as np
from tqdm import tqdm
from pathtracer.core.utils import reseed
from pathtracer.renderer.integrator import ray_color

logger = logging.getLogger(__name__)

# Scene handed to each worker process once, by the pool initializer
_worker_scene = None

def partition_rows(height: int, jobs: int) -> List[Tuple[int, int]]:
    """
    Splits rows [0, height) into at most `jobs` contiguous bands whose sizes
    differ by at most one. Returns (row_start, row_end) pairs, top to bottom.
    """
    jobs = max(1, min(jobs, height))
    base, extra = divmod(height, jobs)
    bands = []
    start = 0
    for i in range(jobs):
        end = start + base + (1 if i < extra else 0)
        bands.append((start, end))
        start = end
    return bands

def render_band(scene, width: int, height: int, samples_per_pixel: int, max_depth: int,
                row_start: int, row_end: int) -> np.ndarray:
    """
    Accumulates samples_per_pixel radiance samples for every pixel of rows
    [row_start, row_end). Row 0 is the top of the image. Returns the
    unnormalized sums as a (rows, width, 3) float64 array.
    """
    camera = scene.camera
    band = np.zeros((row_end - row_start, width, 3), dtype=np.float64)
    u_scale = 1.0 / max(width - 1, 1)
    v_scale = 1.0 / max(height - 1, 1)

    for y in range(row_start, row_end):
        row = band[y - row_start]
        for x in range(width):
            r = g = b = 0.0
            for _ in range(samples_per_pixel):
                u = (x + random.random()) * u_scale
                v = (height - y + random.random()) * v_scale
                color = ray_color(camera.get_ray(u, v), scene.background,
                                  scene.world, scene.lights, max_depth)
                r += color.x
                g += color.y
                b += color.z
            row[x, 0] = r
            row[x, 1] = g
            row[x, 2] = b
    return band

def _band_seed(seed: Optional[int], band_index: int) -> Optional[int]:
    if seed is None:
        return None
    return seed * 1_000_003 + band_index

def _init_worker(scene):
    global _worker_scene
    _worker_scene = scene
    reseed()

def _render_band_task(band_index: int, seed: Optional[int], width: int, height: int,
                      samples_per_pixel: int, max_depth: int,
                      row_start: int, row_end: int) -> Tuple[int, np.ndarray]:
    if seed is not None:
        reseed(_band_seed(seed, band_index))
    pixels = render_band(_worker_scene, width, height, samples_per_pixel, max_depth,
                         row_start, row_end)
    return row_start, pixels

class Renderer:
    """
    Offline renderer: splits the image into contiguous row bands and traces
    them either in this process or on a pool of worker processes.

    render() returns per-pixel radiance sums over samples_per_pixel samples;
    pass the result through tone_map() to get displayable pixels.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = 100,
                 max_depth: int = 50, workers: Optional[int] = None, jobs: int = 32,
                 seed: Optional[int] = None, progress: bool = True):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        if samples_per_pixel <= 0:
            raise ValueError(f"Samples per pixel must be positive, got {samples_per_pixel}")
        if max_depth < 0:
            raise ValueError(f"Max depth must not be negative, got {max_depth}")
        if jobs <= 0:
            raise ValueError(f"Job count must be positive, got {jobs}")
        if workers is not None and workers <= 0:
            raise ValueError(f"Worker count must be positive, got {workers}")
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.workers = workers if workers is not None else (os.cpu_count() or 1)
        self.jobs = jobs
        self.seed = seed
        self.progress = progress

    def render(self, scene) -> np.ndarray:
        bands = partition_rows(self.height, self.jobs)
        logger.info("Rendering %dx%d, %d spp, depth %d, %d bands on %d worker(s)",
                    self.width, self.height, self.samples_per_pixel, self.max_depth,
                    len(bands), self.workers)
        start = time.time()

        accumulated = np.zeros((self.height, self.width, 3), dtype=np.float64)
        with tqdm(total=self.height, desc="Rendering", unit="row",
                  disable=not self.progress) as bar:
            if self.workers <= 1:
                self._render_serial(scene, bands, accumulated, bar)
            else:
                self._render_parallel(scene, bands, accumulated, bar)

        elapsed = time.time() - start
        logger.info("Render finished in %.2fs (%.2fm)", elapsed, elapsed / 60)
        return accumulated

    def _render_serial(self, scene, bands, accumulated, bar):
        for band_index, (row_start, row_end) in enumerate(bands):
            if self.seed is not None:
                reseed(_band_seed(self.seed, band_index))
            accumulated[row_start:row_end] = render_band(
                scene, self.width, self.height, self.samples_per_pixel, self.max_depth,
                row_start, row_end)
            bar.update(row_end - row_start)

    def _render_parallel(self, scene, bands, accumulated, bar):
        with ProcessPoolExecutor(max_workers=self.workers, initializer=_init_worker,
                                 initargs=(scene,)) as executor:
            futures = [
                executor.submit(_render_band_task, band_index, self.seed, self.width,
                                self.height, self.samples_per_pixel, self.max_depth,
                                row_start, row_end)
                for band_index, (row_start, row_end) in enumerate(bands)
            ]
            # A failed band re-raises here and aborts the whole render
            for future in as_completed(futures):
                row_start, pixels = future.result()
                accumulated[row_start:row_start + pixels.shape[0]] = pixels
                bar.update(pixels.shape[0])
