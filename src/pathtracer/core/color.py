# core/color.py
from random import Random
from typing import Tuple

from pathtracer.config import GAMMA
from pathtracer.core.numeric import clamp, safe_div


class Color:
    """
    Linear RGB color. Shares the vector algebra needed for light transport
    (add, channel-wise multiply, scalar scaling) but has no geometric
    operations.
    """
    def __init__(self, r: float = 0.0, g: float = 0.0, b: float = 0.0):
        self.r = r
        self.g = g
        self.b = b

    @staticmethod
    def random_unit(rng: Random) -> "Color":
        return Color(rng.random(), rng.random(), rng.random())

    @staticmethod
    def random_range(rng: Random, lo: float, hi: float) -> "Color":
        return Color(rng.uniform(lo, hi), rng.uniform(lo, hi), rng.uniform(lo, hi))

    def __add__(self, other: "Color") -> "Color":
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __iadd__(self, other: "Color") -> "Color":
        self.r += other.r
        self.g += other.g
        self.b += other.b
        return self

    def __mul__(self, other):
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, (int, float)):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, other: float) -> "Color":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Color":
        return Color(safe_div(self.r, t), safe_div(self.g, t), safe_div(self.b, t))

    def __itruediv__(self, t: float) -> "Color":
        self.r = safe_div(self.r, t)
        self.g = safe_div(self.g, t)
        self.b = safe_div(self.b, t)
        return self

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.r == other.r and self.g == other.g and self.b == other.b

    __hash__ = None

    def to_rgb8(self) -> Tuple[int, int, int]:
        """
        Gamma-encode the linear color into the 0-255 triple written to the
        image: c ** (1/2.2), clamped to [0, 0.999], scaled by 256, truncated.
        """
        return encode_channel(self.r), encode_channel(self.g), encode_channel(self.b)

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"


def encode_channel(c: float) -> int:
    # Negative and NaN channels have no real gamma root; they encode as 0.
    if not c > 0.0:
        return 0
    c = c ** (1.0 / GAMMA)
    return int(256.0 * clamp(c, 0.0, 0.999))
