# materials/dielectric.py
from random import Random
from typing import Tuple
from pathtracer.core.color import Color
from pathtracer.core.numeric import safe_sqrt
from pathtracer.core.ray import Ray
from pathtracer.core.utils import reflect, refract, schlick
from pathtracer.core.vector import unit_vector
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material

class Dielectric(Material):
    """
    Clear dielectric (glass, water). Chooses between reflection and
    refraction per ray; never absorbs and never tints.
    """
    def __init__(self, ref_idx: float):
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: Random) -> Tuple[Ray, Color]:
        attenuation = Color(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        ni_over_nt = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = unit_vector(ray_in.direction)

        cos_theta = min((-unit_direction).dot(rec.normal), 1.0)
        sin_theta = safe_sqrt(1.0 - cos_theta * cos_theta)

        # Total internal reflection
        if ni_over_nt * sin_theta > 1.0:
            reflected = reflect(unit_direction, rec.normal)
            return Ray(rec.p, reflected, ray_in.time), attenuation

        reflect_prob = schlick(cos_theta, ni_over_nt)
        if rng.random() < reflect_prob:
            reflected = reflect(unit_direction, rec.normal)
            return Ray(rec.p, reflected, ray_in.time), attenuation

        refracted = refract(unit_direction, rec.normal, ni_over_nt)
        return Ray(rec.p, refracted, ray_in.time), attenuation

    def __repr__(self) -> str:
        return f"Dielectric({self.ref_idx})"
