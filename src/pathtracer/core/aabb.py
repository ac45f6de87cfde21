# core/aabb.py
from pathtracer.core.numeric import safe_div
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3

class AABB:
    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray: Ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, find intersection intervals.
        # A zero direction component yields a signed infinity for inv_d,
        # which still classifies the ray correctly against that slab.
        for a in range(3):
            inv_d = safe_div(1.0, ray.direction[a])
            t0 = (self.minimum[a] - ray.origin[a]) * inv_d
            t1 = (self.maximum[a] - ray.origin[a]) * inv_d
            if inv_d < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.minimum == other.minimum and self.maximum == other.maximum

    __hash__ = None

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)


def surrounding_box(box0: AABB, box1: AABB) -> AABB:
    return AABB.surrounding_box(box0, box1)
