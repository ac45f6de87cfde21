# core/vector.py
import math
from random import Random

from pathtracer.core.numeric import safe_div, safe_sqrt


class Vector3:
    """
    A simple 3D vector class supporting arithmetic, dot and cross products,
    and normalization.

    Binary operators always build a new vector. The augmented operators
    (+=, -=, *=, /=) and normalize() update the vector in place.
    """
    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = x
        self.y = y
        self.z = z

    @staticmethod
    def random_range(rng: Random, lo: float, hi: float) -> "Vector3":
        return Vector3(rng.uniform(lo, hi), rng.uniform(lo, hi), rng.uniform(lo, hi))

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, t):
        if isinstance(t, (int, float)):
            return Vector3(self.x * t, self.y * t, self.z * t)
        return NotImplemented

    def __rmul__(self, t: float) -> "Vector3":
        return self.__mul__(t)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(safe_div(self.x, t), safe_div(self.y, t), safe_div(self.z, t))

    def __iadd__(self, other: "Vector3") -> "Vector3":
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: "Vector3") -> "Vector3":
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __imul__(self, t: float) -> "Vector3":
        self.x *= t
        self.y *= t
        self.z *= t
        return self

    def __itruediv__(self, t: float) -> "Vector3":
        self.x = safe_div(self.x, t)
        self.y = safe_div(self.y, t)
        self.z = safe_div(self.z, t)
        return self

    def __getitem__(self, i: int) -> float:
        if i == 0:
            return self.x
        if i == 1:
            return self.y
        if i == 2:
            return self.z
        raise IndexError(f"Vector3 index out of range: {i}")

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    __hash__ = None

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return safe_sqrt(self.length_squared())

    def normalize(self) -> "Vector3":
        # Zero length is not special-cased: the components become NaN/inf.
        self /= self.length()
        return self

    def is_close(self, other: "Vector3", tol: float = 1e-9) -> bool:
        return (math.isclose(self.x, other.x, abs_tol=tol) and
                math.isclose(self.y, other.y, abs_tol=tol) and
                math.isclose(self.z, other.z, abs_tol=tol))

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


def dot(u: Vector3, v: Vector3) -> float:
    return u.dot(v)


def cross(u: Vector3, v: Vector3) -> Vector3:
    return u.cross(v)


def unit_vector(v: Vector3) -> Vector3:
    """
    Returns v scaled to unit length, leaving v untouched.
    """
    return v / v.length()
