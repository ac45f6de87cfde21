# renderer/image_output.py
import os
from typing import TextIO

import numpy as np
from PIL import Image


def write_ppm(stream: TextIO, rgb: np.ndarray):
    """
    Write an 8-bit (height, width, 3) image as plain-text PPM (P3): a header
    of "P3", "width height" and "255", then one "R G B" line per pixel,
    rows top to bottom.
    """
    height, width = rgb.shape[0], rgb.shape[1]
    stream.write("P3\n")
    stream.write(f"{width} {height}\n")
    stream.write("255\n")
    for row in rgb:
        stream.write("".join(f"{r} {g} {b}\n" for r, g, b in row.tolist()))


def save_ppm(path: str, rgb: np.ndarray):
    with open(path, "w", encoding="ascii") as f:
        write_ppm(f, rgb)


def save_png(path: str, rgb: np.ndarray):
    Image.fromarray(np.asarray(rgb, dtype=np.uint8)).save(path, format="PNG")


def save_image(path: str, rgb: np.ndarray):
    """
    Save by file extension: .png through Pillow, anything else as P3 text.
    """
    ext = os.path.splitext(path)[1].lower()
    if ext == ".png":
        save_png(path, rgb)
    else:
        save_ppm(path, rgb)
