"""Pytest configuration and shared fixtures."""

import random
import sys
from pathlib import Path

import pytest

# Allow running the suite from a checkout without installing the package
src_root = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_root))

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord


class ScriptedRng:
    """
    Stand-in for random.Random that replays fixed values, for tests that
    need a specific random draw.
    """
    def __init__(self, uniforms=(), randoms=()):
        self.uniforms = list(uniforms)
        self.randoms = list(randoms)

    def uniform(self, lo, hi):
        return self.uniforms.pop(0)

    def random(self):
        return self.randoms.pop(0)


@pytest.fixture
def rng():
    """Seeded generator so statistical tests are repeatable."""
    return random.Random(1234)


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def make_hit():
    """Build a geometry hit record at p with the given normal and side."""
    def _make(p=Vector3(0.0, 0.0, 0.0), normal=Vector3(0.0, 1.0, 0.0), t=1.0, front_face=True):
        return HitRecord(p=p, normal=normal, t=t, front_face=front_face)
    return _make


@pytest.fixture
def pinhole_camera():
    """Camera at the origin looking down -z with no lens blur and no shutter."""
    return Camera(
        look_from=Vector3(0.0, 0.0, 0.0),
        look_at=Vector3(0.0, 0.0, -1.0),
        vup=Vector3(0.0, 1.0, 0.0),
        vfov=90.0,
        aspect_ratio=1.0,
        aperture=0.0,
        focus_dist=1.0,
    )
