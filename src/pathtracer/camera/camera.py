# camera/camera.py
import math
from random import Random
from pathtracer.core.numeric import degrees_to_radians
from pathtracer.core.vector import Vector3, unit_vector
from pathtracer.core.ray import Ray

class Camera:
    """
    Thin-lens perspective camera with a shutter interval.

    Looks from look_from towards look_at with vup fixing the roll. vfov is
    the vertical field of view in degrees. Points at focus_dist are sharp;
    aperture is the lens diameter (0 gives a pinhole). Each ray gets a time
    drawn uniformly from [time0, time1) for motion blur.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 10.0, time0: float = 0.0, time1: float = 0.0):
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture
        self.focus_dist = focus_dist
        self.time0 = time0
        self.time1 = time1
        self.lens_radius = aperture / 2.0

        theta = degrees_to_radians(vfov)
        h = math.tan(theta / 2.0)
        viewport_height = 2.0 * h
        viewport_width = aspect_ratio * viewport_height

        # Orthonormal basis: w points back towards the viewer
        self.w = unit_vector(look_from - look_at)
        self.u = unit_vector(vup.cross(self.w))
        self.v = self.w.cross(self.u)

        self.origin = look_from
        self.horizontal = self.u * (focus_dist * viewport_width)
        self.vertical = self.v * (focus_dist * viewport_height)
        self.lower_left_corner = (self.origin -
                                  self.horizontal / 2.0 -
                                  self.vertical / 2.0 -
                                  self.w * focus_dist)

    def get_ray(self, s: float, t: float, rng: Random) -> Ray:
        """
        Ray through image-plane coordinates (s, t), where (0, 0) is the lower
        left corner and (1, 1) the upper right, from a random point on the lens.
        """
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y

        origin = self.origin + offset
        direction = (self.lower_left_corner +
                     self.horizontal * s +
                     self.vertical * t -
                     self.origin -
                     offset)
        return Ray(origin, direction, rng.uniform(self.time0, self.time1))

def random_in_unit_disk(rng: Random) -> Vector3:
    """Generate random point in unit disk for DOF."""
    while True:
        p = Vector3(
            rng.uniform(-1, 1),
            rng.uniform(-1, 1),
            0.0
        )
        if p.length_squared() < 1:
            return p
