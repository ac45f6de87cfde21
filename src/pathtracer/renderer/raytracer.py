# renderer/raytracer.py
import logging
import random
from typing import Callable, List, Optional

import numpy as np

from pathtracer.camera.camera import Camera
from pathtracer.config import (MAX_DEPTH, SAMPLES_PER_PIXEL, SKY_BOTTOM, SKY_TOP,
                               T_MAX, T_MIN)
from pathtracer.core.color import Color
from pathtracer.core.ray import Ray
from pathtracer.core.vector import unit_vector
from pathtracer.errors import RenderConfigError
from pathtracer.geometry.world import World

logger = logging.getLogger(__name__)


def sky_color(ray: Ray) -> Color:
    """
    Background seen by rays that escape the scene: a vertical blend from
    white (straight down) to light blue (straight up).
    """
    unit_direction = unit_vector(ray.direction)
    t = 0.5 * (unit_direction.y + 1.0)
    return Color(*SKY_BOTTOM) * (1.0 - t) + Color(*SKY_TOP) * t


def ray_color(ray: Ray, world: World, depth: int, rng: random.Random) -> Color:
    """
    Radiance arriving along ray, following at most depth bounces.

    Equivalent to attenuation * ray_color(scattered, depth - 1) at every
    hit, unrolled into a loop that carries the product of attenuations.
    Absorption or running out of depth gives black; escaping gives sky.
    """
    throughput = Color(1.0, 1.0, 1.0)
    while depth > 0:
        hit = world.hit(ray, T_MIN, T_MAX)
        if hit is None:
            return throughput * sky_color(ray)

        result = hit.material.scatter(ray, hit.record, rng)
        if result is None:
            return Color(0.0, 0.0, 0.0)

        ray, attenuation = result
        throughput = throughput * attenuation
        depth -= 1

    return Color(0.0, 0.0, 0.0)


class Renderer:
    """
    Renders a World through a Camera into a linear float framebuffer.

    Rows are traced one at a time. Every row draws from its own random
    stream derived from the seed, so a fixed seed reproduces the image
    exactly and rows never share generator state.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = SAMPLES_PER_PIXEL,
                 max_depth: int = MAX_DEPTH, seed: Optional[int] = None):
        if width < 1 or height < 1:
            raise RenderConfigError(f"image size must be at least 1x1, got {width}x{height}")
        if samples_per_pixel < 1:
            raise RenderConfigError(f"samples_per_pixel must be >= 1, got {samples_per_pixel}")
        if max_depth < 0:
            raise RenderConfigError(f"max_depth must be >= 0, got {max_depth}")
        if seed is not None and seed < 0:
            raise RenderConfigError(f"seed must be non-negative, got {seed}")

        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.seed = seed
        # Fixed once so every call to scanline_rng agrees, even when seed is None
        self.entropy = np.random.SeedSequence(seed).entropy

    def scanline_rng(self, row: int) -> random.Random:
        """
        Fresh generator for framebuffer row `row` (0 is the top row).
        """
        child = np.random.SeedSequence(self.entropy, spawn_key=(row,))
        return random.Random(int(child.generate_state(1, dtype=np.uint64)[0]))

    def scanline_rngs(self) -> List[random.Random]:
        return [self.scanline_rng(row) for row in range(self.height)]

    def sample_pixel(self, world: World, camera: Camera, i: int, j: int,
                     rng: random.Random) -> Color:
        """
        Average of samples_per_pixel jittered estimates for pixel column i
        and image row j, where j counts up from the bottom of the image.
        """
        # A single column or row has no span to divide; treat it as 1.
        u_span = max(self.width - 1, 1)
        v_span = max(self.height - 1, 1)

        pixel_color = Color(0.0, 0.0, 0.0)
        for _ in range(self.samples_per_pixel):
            u = (i + rng.random()) / u_span
            v = (j + rng.random()) / v_span
            pixel_color += ray_color(camera.get_ray(u, v, rng), world, self.max_depth, rng)
        pixel_color /= self.samples_per_pixel
        return pixel_color

    def render(self, world: World, camera: Camera,
               progress: Optional[Callable[[int], None]] = None) -> np.ndarray:
        """
        Trace the full image. Returns a (height, width, 3) float64 array of
        linear colors with row 0 at the top of the image.

        progress, if given, is called with the number of rows still to go
        before each row is traced.
        """
        logger.info("Rendering %dx%d, %d samples/pixel, max depth %d, %d objects",
                    self.width, self.height, self.samples_per_pixel, self.max_depth, len(world))
        framebuffer = np.zeros((self.height, self.width, 3), dtype=np.float64)

        for row in range(self.height):
            j = self.height - 1 - row
            logger.info("Scanlines remaining: %d", j)
            if progress is not None:
                progress(j)

            rng = self.scanline_rng(row)
            for i in range(self.width):
                color = self.sample_pixel(world, camera, i, j, rng)
                framebuffer[row, i] = (color.r, color.g, color.b)

        logger.info("Done.")
        return framebuffer
