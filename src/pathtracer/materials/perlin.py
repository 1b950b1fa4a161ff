# materials/perlin.py
import math
import random
import numpy as np
from numba import njit
from pathtracer.core.vector import Point3

POINT_COUNT = 256

@njit(cache=True)
def perlin_noise(ranvec, perm_x, perm_y, perm_z, x, y, z):
    """
    Gradient noise at (x, y, z): Hermite-smoothed trilinear blend of the
    random gradients at the eight surrounding lattice corners.
    """
    fx = math.floor(x)
    fy = math.floor(y)
    fz = math.floor(z)
    u = x - fx
    v = y - fy
    w = z - fz
    i = int(fx)
    j = int(fy)
    k = int(fz)

    uu = u * u * (3.0 - 2.0 * u)
    vv = v * v * (3.0 - 2.0 * v)
    ww = w * w * (3.0 - 2.0 * w)

    accum = 0.0
    for di in range(2):
        for dj in range(2):
            for dk in range(2):
                idx = (perm_x[(i + di) & 255]
                       ^ perm_y[(j + dj) & 255]
                       ^ perm_z[(k + dk) & 255])
                gx = ranvec[idx, 0]
                gy = ranvec[idx, 1]
                gz = ranvec[idx, 2]
                dot = gx * (u - di) + gy * (v - dj) + gz * (w - dk)
                accum += ((di * uu + (1 - di) * (1.0 - uu))
                          * (dj * vv + (1 - dj) * (1.0 - vv))
                          * (dk * ww + (1 - dk) * (1.0 - ww))
                          * dot)
    return accum

@njit(cache=True)
def perlin_turbulence(ranvec, perm_x, perm_y, perm_z, x, y, z, depth):
    """Sum of |depth| octaves of noise, each at double frequency and half weight."""
    accum = 0.0
    weight = 1.0
    for _ in range(depth):
        accum += weight * perlin_noise(ranvec, perm_x, perm_y, perm_z, x, y, z)
        weight *= 0.5
        x *= 2.0
        y *= 2.0
        z *= 2.0
    return abs(accum)

class Perlin:
    """
    Perlin gradient noise over 256 random vectors and three shuffled
    permutation tables. Tables are drawn from rng (numpy Generator); by
    default it is seeded from the module-level random generator.
    """
    def __init__(self, rng: np.random.Generator = None):
        rng = rng if rng is not None else np.random.default_rng(random.getrandbits(64))
        self.ranvec = rng.uniform(-1.0, 1.0, size=(POINT_COUNT, 3))
        self.perm_x = rng.permutation(POINT_COUNT).astype(np.int64)
        self.perm_y = rng.permutation(POINT_COUNT).astype(np.int64)
        self.perm_z = rng.permutation(POINT_COUNT).astype(np.int64)

    def noise(self, p: Point3) -> float:
        return float(perlin_noise(self.ranvec, self.perm_x, self.perm_y, self.perm_z,
                                  float(p.x), float(p.y), float(p.z)))

    def turb(self, p: Point3, depth: int = 7) -> float:
        return float(perlin_turbulence(self.ranvec, self.perm_x, self.perm_y, self.perm_z,
                                       float(p.x), float(p.y), float(p.z), int(depth)))
