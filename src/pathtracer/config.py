# config.py
"""Render constants and quality presets."""
import math

# Intersection interval used by the integrator. T_MIN keeps scattered rays
# from re-hitting the surface they leave.
T_MIN = 0.001
T_MAX = math.inf

MAX_DEPTH = 50
SAMPLES_PER_PIXEL = 100

ASPECT_RATIO = 16.0 / 9.0
IMAGE_WIDTH = 400

GAMMA = 2.2

# Sky gradient, bottom (looking down) to top (looking up)
SKY_BOTTOM = (1.0, 1.0, 1.0)
SKY_TOP = (0.5, 0.7, 1.0)

QUALITY_LEVELS = {
    "preview": {"samples": 4, "bounces": 8},
    "balanced": {"samples": 32, "bounces": 25},
    "final": {"samples": SAMPLES_PER_PIXEL, "bounces": MAX_DEPTH},
}
DEFAULT_QUALITY = "final"

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
