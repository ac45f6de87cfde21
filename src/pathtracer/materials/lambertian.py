# materials/lambertian.py

from random import Random
from typing import Tuple
from pathtracer.core.color import Color
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_unit_vector
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material

class Lambertian(Material):
    """
    Lambertian diffuse material.
    """

    def __init__(self, albedo: Color):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: Random) -> Tuple[Ray, Color]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Always scatters; returns (scattered_ray, albedo).
        """
        # Pick a random scatter direction by adding a random unit vector to the normal.
        scatter_direction = rec.normal + random_unit_vector(rng)
        scattered = Ray(rec.p, scatter_direction, ray_in.time)
        return scattered, self.albedo

    def __repr__(self) -> str:
        return f"Lambertian({self.albedo!r})"
