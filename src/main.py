# main.py
import sys
import random
import logging
import argparse
from typing import List, Optional

import config
from camera.camera import Camera
from core.errors import RaytracerError
from geometry.scenes import SCENES
from logging_config import setup_logging
from renderer.image_io import save_image, write_ppm
from renderer.raytracer import SHADERS, Renderer

logger = logging.getLogger(__name__)

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="raytracer", description="Offline Monte Carlo path tracer for sphere scenes.")
    source = p.add_mutually_exclusive_group()
    source.add_argument("--scene", help="JSON render configuration")
    source.add_argument("--preset", choices=sorted(SCENES), default="two_spheres",
                        help="built-in scene (ignored with --scene)")
    p.add_argument("--width", type=int, help="image width (default 200, or from --scene)")
    p.add_argument("--height", type=int, help="image height (default 100, or from --scene)")
    p.add_argument("--samples", type=int, help="samples per pixel (default 10, or from --scene)")
    p.add_argument("--tiles", type=int, default=config.TILES, help="row bands to split the image into")
    p.add_argument("--workers", type=int, default=config.WORKERS, help="worker processes")
    p.add_argument("--seed", type=int, default=config.SEED)
    p.add_argument("--max-depth", type=int, default=config.MAX_DEPTH)
    p.add_argument("--shading", choices=sorted(SHADERS), default="path")
    p.add_argument("--output", "-o", help="output file (.ppm, .png, ...); PPM on stdout if omitted")
    p.add_argument("--log-level", default=config.LOG_LEVEL)
    p.add_argument("--log-file")
    return p.parse_args(argv)

def build_job(args: argparse.Namespace):
    """Returns (width, height, samples, camera, world) for the chosen scene source."""
    if args.scene:
        cfg = config.load_render_config(args.scene)
        width = args.width or cfg.width
        height = args.height or cfg.height
        samples = args.samples or cfg.samples_per_pixel
        # Size overrides reshape the viewport unless the file pins an aspect.
        return width, height, samples, cfg.camera_for(width, height), cfg.world

    width = args.width or 200
    height = args.height or 100
    samples = args.samples or 10
    builder, camera_settings = SCENES[args.preset]
    # Scene layout draws from its own stream so it does not shift with image size.
    world = builder(random.Random(args.seed))
    camera = Camera(aspect_ratio=width / height, **camera_settings)
    return width, height, samples, camera, world

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(level=args.log_level, log_file=args.log_file)
    try:
        width, height, samples, camera, world = build_job(args)
        renderer = Renderer(width, height, samples, tiles=args.tiles, workers=args.workers,
                            seed=args.seed, max_depth=args.max_depth, shading=args.shading)
        pixels = renderer.render(camera, world)
    except RaytracerError as e:
        logger.error("%s", e)
        return 1

    if args.output:
        save_image(pixels, args.output)
    else:
        write_ppm(pixels, sys.stdout)
    return 0

if __name__ == "__main__":
    sys.exit(main())
