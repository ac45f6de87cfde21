"""Tests for camera ray generation."""

import math

import pytest

from pathtracer.camera.camera import Camera, random_in_unit_disk
from pathtracer.core.vector import Vector3, unit_vector


def make_camera(aperture=0.0, time0=0.0, time1=0.0, focus_dist=10.0):
    return Camera(
        look_from=Vector3(13.0, 2.0, 3.0),
        look_at=Vector3(0.0, 0.0, 0.0),
        vup=Vector3(0.0, 1.0, 0.0),
        vfov=20.0,
        aspect_ratio=16.0 / 9.0,
        aperture=aperture,
        focus_dist=focus_dist,
        time0=time0,
        time1=time1,
    )


class TestCamera:
    """Basis, projection, lens and shutter."""

    def test_basis_is_orthonormal(self):
        cam = make_camera()
        for axis in (cam.u, cam.v, cam.w):
            assert axis.length() == pytest.approx(1.0)
        assert cam.u.dot(cam.v) == pytest.approx(0.0, abs=1e-12)
        assert cam.u.dot(cam.w) == pytest.approx(0.0, abs=1e-12)
        assert cam.v.dot(cam.w) == pytest.approx(0.0, abs=1e-12)
        assert cam.w.is_close(unit_vector(Vector3(13.0, 2.0, 3.0)))

    def test_center_ray_points_at_target(self, pinhole_camera, rng):
        ray = pinhole_camera.get_ray(0.5, 0.5, rng)
        assert ray.origin == Vector3(0.0, 0.0, 0.0)
        assert unit_vector(ray.direction).is_close(Vector3(0.0, 0.0, -1.0))

    def test_corners_follow_field_of_view(self, pinhole_camera, rng):
        # 90 degree vertical fov, aspect 1, focus 1: viewport spans [-1, 1]
        lower_left = pinhole_camera.get_ray(0.0, 0.0, rng)
        upper_right = pinhole_camera.get_ray(1.0, 1.0, rng)
        assert lower_left.direction.is_close(Vector3(-1.0, -1.0, -1.0))
        assert upper_right.direction.is_close(Vector3(1.0, 1.0, -1.0))

    def test_viewport_scales_with_focus_distance(self, rng):
        cam = make_camera(focus_dist=5.0)
        h = math.tan(math.radians(20.0) / 2.0)
        assert cam.vertical.length() == pytest.approx(5.0 * 2.0 * h)
        assert cam.horizontal.length() == pytest.approx(5.0 * 2.0 * h * 16.0 / 9.0)
        assert cam.lower_left_corner.is_close(
            cam.origin - cam.horizontal / 2.0 - cam.vertical / 2.0 - cam.w * 5.0)

    def test_lens_offset_stays_within_aperture(self, rng):
        cam = make_camera(aperture=2.0)
        for _ in range(200):
            ray = cam.get_ray(0.3, 0.7, rng)
            offset = ray.origin - cam.origin
            assert offset.length() < 1.0
            assert offset.dot(cam.w) == pytest.approx(0.0, abs=1e-12)

    def test_rays_converge_on_focus_plane(self, rng):
        cam = make_camera(aperture=0.5)
        target = cam.lower_left_corner + cam.horizontal * 0.25 + cam.vertical * 0.6
        for _ in range(50):
            ray = cam.get_ray(0.25, 0.6, rng)
            assert ray.at(1.0).is_close(target, tol=1e-9)

    def test_time_drawn_from_shutter_interval(self, rng):
        cam = make_camera(time0=0.0, time1=1.0 / 60.0)
        times = [cam.get_ray(0.5, 0.5, rng).time for _ in range(500)]
        assert all(0.0 <= t <= 1.0 / 60.0 for t in times)
        assert max(times) - min(times) > 0.5 / 60.0

    def test_closed_shutter_gives_fixed_time(self, rng):
        cam = make_camera(time0=0.25, time1=0.25)
        assert {cam.get_ray(0.1, 0.9, rng).time for _ in range(10)} == {0.25}


def test_random_in_unit_disk(rng):
    for _ in range(200):
        p = random_in_unit_disk(rng)
        assert p.z == 0.0
        assert p.length_squared() < 1.0
