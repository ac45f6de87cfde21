# materials/metal.py
from random import Random
from typing import Optional, Tuple
from pathtracer.core.color import Color
from pathtracer.core.ray import Ray
from pathtracer.core.utils import reflect, random_in_unit_sphere
from pathtracer.core.vector import unit_vector
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material

class Metal(Material):
    """
    Metal material: mirror reflection perturbed by a fuzz radius.
    """
    def __init__(self, albedo: Color, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = fuzz

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: Random) -> Optional[Tuple[Ray, Color]]:
        reflected = reflect(unit_vector(ray_in.direction), rec.normal)
        scattered = Ray(rec.p, reflected + random_in_unit_sphere(rng) * self.fuzz, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            return scattered, self.albedo

        return None  # Absorb the ray if fuzz pushed it below the surface

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"
