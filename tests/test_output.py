"""Tests for gamma encoding and image serialization."""

import io
import math

import numpy as np
import pytest
from PIL import Image

from pathtracer.core.color import Color
from pathtracer.renderer.image_output import save_image, save_png, write_ppm
from pathtracer.renderer.tone_mapping import encode_framebuffer


def test_encode_matches_color_to_rgb8():
    values = [0.0, 1e-6, 0.01, 0.18, 0.25, 0.5, 0.73, 0.999, 1.0, 4.0, -0.3, math.nan, math.inf]
    n = len(values)
    row = [[v, values[(k + 1) % n], values[(k + 2) % n]] for k, v in enumerate(values)]
    linear = np.array([row, row[::-1], row[3:] + row[:3]], dtype=np.float64)
    encoded = encode_framebuffer(linear)
    assert encoded.dtype == np.uint8
    for y in range(linear.shape[0]):
        for x in range(linear.shape[1]):
            r, g, b = linear[y, x]
            assert tuple(encoded[y, x]) == Color(r, g, b).to_rgb8()


def test_encode_known_values():
    linear = np.array([[[0.0, 0.5, 1.0]]])
    assert encode_framebuffer(linear).tolist() == [[[0, 186, 255]]]


def test_encode_rejects_wrong_shape():
    with pytest.raises(ValueError):
        encode_framebuffer(np.zeros((2, 2)))


def test_write_ppm_layout():
    rgb = np.array([
        [[255, 0, 0], [0, 255, 0], [0, 0, 255]],
        [[1, 2, 3], [4, 5, 6], [7, 8, 9]],
    ], dtype=np.uint8)
    out = io.StringIO()
    write_ppm(out, rgb)
    assert out.getvalue() == (
        "P3\n"
        "3 2\n"
        "255\n"
        "255 0 0\n0 255 0\n0 0 255\n"
        "1 2 3\n4 5 6\n7 8 9\n"
    )


def test_save_png_round_trip(tmp_path):
    rgb = np.arange(2 * 3 * 3, dtype=np.uint8).reshape(2, 3, 3)
    path = tmp_path / "out.png"
    save_png(str(path), rgb)
    with Image.open(path) as img:
        assert img.size == (3, 2)
        np.testing.assert_array_equal(np.asarray(img.convert("RGB")), rgb)


def test_save_image_picks_format_by_extension(tmp_path):
    rgb = np.zeros((1, 2, 3), dtype=np.uint8)
    ppm = tmp_path / "out.ppm"
    png = tmp_path / "out.PNG"
    save_image(str(ppm), rgb)
    save_image(str(png), rgb)
    assert ppm.read_text().splitlines()[:3] == ["P3", "2 1", "255"]
    assert png.read_bytes().startswith(b"\x89PNG")
