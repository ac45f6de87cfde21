# renderer/tone_mapping.py
import numpy as np
from numba import njit

from pathtracer.config import GAMMA


@njit
def gamma_encode_kernel(linear_image, output_image, inv_gamma):
    height, width, channels = linear_image.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                v = linear_image[y, x, c]
                # Negative and NaN values have no gamma root; encode as 0
                if v > 0.0:
                    v = v ** inv_gamma
                    if v > 0.999:
                        v = 0.999
                    output_image[y, x, c] = int(256.0 * v)
                else:
                    output_image[y, x, c] = 0


def encode_framebuffer(linear_image: np.ndarray, gamma: float = GAMMA) -> np.ndarray:
    """
    Gamma-encode a (height, width, 3) linear framebuffer into 8-bit RGB.

    Per channel: c ** (1/gamma), clamped to [0, 0.999], scaled by 256 and
    truncated. Matches Color.to_rgb8 for every pixel.
    """
    linear = np.ascontiguousarray(linear_image, dtype=np.float64)
    if linear.ndim != 3 or linear.shape[2] != 3:
        raise ValueError(f"expected a (height, width, 3) framebuffer, got shape {linear.shape}")
    output = np.zeros(linear.shape, dtype=np.uint8)
    gamma_encode_kernel(linear, output, 1.0 / gamma)
    return output
