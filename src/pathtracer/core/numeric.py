# core/numeric.py
import math
import numpy as np


def safe_div(a: float, b: float) -> float:
    """
    Float division with IEEE-754 semantics: x/0 gives a signed infinity and
    0/0 gives NaN instead of raising ZeroDivisionError.
    """
    try:
        return a / b
    except ZeroDivisionError:
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.true_divide(a, b))


def safe_sqrt(x: float) -> float:
    """
    Square root that returns NaN for negative input instead of raising.
    """
    if x >= 0.0:
        return math.sqrt(x)
    return math.nan


def clamp(x: float, lo: float, hi: float) -> float:
    # NaN falls through both comparisons unchanged
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0
