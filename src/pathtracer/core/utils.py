# core/utils.py
import math
import random
from typing import Optional
from pathtracer.core.vector import Vector3

INFINITY = float("inf")

def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0

def clamp(x: float, lo: float, hi: float) -> float:
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x

def random_double(lo: float = 0.0, hi: float = 1.0) -> float:
    """
    Returns a uniform random float in [lo, hi).
    """
    return lo + (hi - lo) * random.random()

def random_vector(lo: float = 0.0, hi: float = 1.0) -> Vector3:
    return Vector3(random_double(lo, hi), random_double(lo, hi), random_double(lo, hi))

def random_in_unit_sphere() -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3(random.uniform(-1, 1),
                   random.uniform(-1, 1),
                   random.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p

def random_unit_vector() -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere().normalize()

def random_in_unit_disk() -> Vector3:
    """
    Returns a random point inside the unit disk in the z = 0 plane.
    """
    while True:
        p = Vector3(random.uniform(-1, 1), random.uniform(-1, 1), 0.0)
        if p.dot(p) < 1.0:
            return p

def random_cosine_direction() -> Vector3:
    """
    Samples a direction on the +z hemisphere with density cos(theta) / pi.
    """
    r1 = random.random()
    r2 = random.random()
    z = math.sqrt(1.0 - r2)
    phi = 2.0 * math.pi * r1
    x = math.cos(phi) * math.sqrt(r2)
    y = math.sin(phi) * math.sqrt(r2)
    return Vector3(x, y, z)

def random_to_sphere(radius: float, distance_squared: float) -> Vector3:
    """
    Samples a direction, around +z, uniformly inside the cone subtended by a
    sphere of the given radius seen from distance_squared away.
    """
    r1 = random.random()
    r2 = random.random()
    cos_theta_max = math.sqrt(max(0.0, 1.0 - radius * radius / distance_squared))
    z = 1.0 + r2 * (cos_theta_max - 1.0)
    phi = 2.0 * math.pi * r1
    sin_theta = math.sqrt(max(0.0, 1.0 - z * z))
    return Vector3(math.cos(phi) * sin_theta, math.sin(phi) * sin_theta, z)

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with normal n (Snell's law).
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel

def reseed(seed: Optional[int] = None) -> None:
    """
    Reseeds the module generator; None draws fresh OS entropy.
    """
    random.seed(seed)
