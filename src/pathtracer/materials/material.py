# materials/material.py
from random import Random
from typing import Optional, Tuple
from pathtracer.core.color import Color
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import HitRecord

class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    Materials hold no per-ray state, so a single instance can be shared by
    every entity that uses it.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng: Random) -> Optional[Tuple[Ray, Color]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        The scattered ray carries the same time as ray_in.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
