# main.py
import argparse
import logging
import math
import random
import sys
import time
from typing import List, Optional

from pathtracer.config import ASPECT_RATIO, DEFAULT_QUALITY, IMAGE_WIDTH, LOG_LEVEL, QUALITY_LEVELS
from pathtracer.errors import PathTracerError
from pathtracer.logger import setup_logging
from pathtracer.renderer.image_output import save_image, write_ppm
from pathtracer.renderer.raytracer import Renderer
from pathtracer.renderer.tone_mapping import encode_framebuffer
from pathtracer.scenes import SCENES, default_camera

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Monte Carlo path tracer for sphere scenes. Writes a P3 PPM image.")
    parser.add_argument("--width", type=int, default=IMAGE_WIDTH, help="Image width in pixels")
    parser.add_argument("--aspect-ratio", type=float, default=ASPECT_RATIO,
                        help="Width / height (default 16:9)")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default=DEFAULT_QUALITY,
                        help="Preset for samples per pixel and max bounces")
    parser.add_argument("--samples", type=int, default=None,
                        help="Samples per pixel (overrides --quality)")
    parser.add_argument("--max-depth", type=int, default=None,
                        help="Maximum bounces per path (overrides --quality)")
    parser.add_argument("--scene", choices=sorted(SCENES), default="random")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for scene layout and sampling; omit for a fresh image each run")
    parser.add_argument("-o", "--output", default="-",
                        help="Output path (.png or .ppm); '-' writes PPM to stdout")
    parser.add_argument("--log-level", default=LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def run(args: argparse.Namespace) -> None:
    quality = QUALITY_LEVELS[args.quality]
    samples = args.samples if args.samples is not None else quality["samples"]
    max_depth = args.max_depth if args.max_depth is not None else quality["bounces"]

    width = args.width
    height = int(width / args.aspect_ratio)

    world = SCENES[args.scene](random.Random(args.seed))
    camera = default_camera(args.aspect_ratio)
    renderer = Renderer(width, height, samples_per_pixel=samples, max_depth=max_depth,
                        seed=args.seed)

    start = time.perf_counter()
    framebuffer = renderer.render(world, camera)
    logger.info("Render finished in %.2fs", time.perf_counter() - start)

    rgb = encode_framebuffer(framebuffer)
    if args.output == "-":
        write_ppm(sys.stdout, rgb)
        sys.stdout.flush()
    else:
        save_image(args.output, rgb)
        logger.info("Saved %s", args.output)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not (math.isfinite(args.aspect_ratio) and args.aspect_ratio > 0):
        parser.error("--aspect-ratio must be a positive finite number")
    setup_logging(args.log_level)
    try:
        run(args)
    except PathTracerError as e:
        logger.error("%s", e)
        return 1
    except OSError as e:
        logger.error("Could not write %s: %s", args.output, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
