# geometry/sphere.py
import math
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.numeric import safe_div
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord

class Sphere(Hittable):
    """
    Sphere defined by a center and radius. Passing center1 makes the center
    move linearly from center0 at time0 to center1 at time1; times outside
    that window extrapolate along the same line.
    """
    def __init__(self, center0: Vector3, radius: float, center1: Vector3 = None,
                 time0: float = 0.0, time1: float = 1.0):
        self.center0 = center0
        self.center1 = center1 if center1 is not None else center0
        self.radius = radius
        self.time0 = time0
        self.time1 = time1

    @property
    def is_moving(self) -> bool:
        return self.center1 != self.center0

    def center(self, time: float) -> Vector3:
        if not self.is_moving:
            return self.center0
        f = safe_div(time - self.time0, self.time1 - self.time0)
        return self.center0 + (self.center1 - self.center0) * f

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        center = self.center(ray.time)
        oc = ray.origin - center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        # Strict test: a tangent ray (discriminant exactly 0) is a miss.
        if not discriminant > 0.0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the open interval (t_min, t_max)
        root = safe_div(-half_b - sqrt_disc, a)
        if not t_min < root < t_max:
            root = safe_div(-half_b + sqrt_disc, a)
            if not t_min < root < t_max:
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        return rec

    def bounding_box(self, time0: float, time1: float) -> AABB:
        # Union of the boxes around the center at both ends of the interval
        offset = Vector3(self.radius, self.radius, self.radius)
        c0 = self.center(time0)
        c1 = self.center(time1)
        box0 = AABB(c0 - offset, c0 + offset)
        box1 = AABB(c1 - offset, c1 + offset)
        return AABB.surrounding_box(box0, box1)

    def __repr__(self) -> str:
        if self.is_moving:
            return (f"Sphere({self.center0!r} -> {self.center1!r}, r={self.radius}, "
                    f"t=[{self.time0}, {self.time1}])")
        return f"Sphere({self.center0!r}, r={self.radius})"
