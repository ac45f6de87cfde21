# core/utils.py
import math
from random import Random

from pathtracer.core.numeric import safe_sqrt
from pathtracer.core.vector import Vector3

def random_in_unit_sphere(rng: Random) -> Vector3:
    """
    Returns a random point inside a unit sphere (rejection sampled from the
    enclosing cube).
    """
    while True:
        p = Vector3.random_range(rng, -1.0, 1.0)
        if p.length_squared() < 1.0:
            return p

def random_unit_vector(rng: Random) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).

    Samples an azimuth and a height directly, so no rejection loop is needed.
    """
    a = rng.uniform(0.0, 2.0 * math.pi)
    z = rng.uniform(-1.0, 1.0)
    r = safe_sqrt(1.0 - z * z)
    return Vector3(r * math.cos(a), r * math.sin(a), z)

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * (2.0 * v.dot(n))

def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with normal n (Snell's law).
    """
    cos_theta = (-uv).dot(n)
    r_out_parallel = (uv + n * cos_theta) * etai_over_etat
    r_out_perp = n * -safe_sqrt(1.0 - r_out_parallel.length_squared())
    return r_out_parallel + r_out_perp

def schlick(cosine: float, ref_idx: float) -> float:
    """
    Schlick's polynomial approximation of angle-dependent reflectance.
    """
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow(1.0 - cosine, 5)
