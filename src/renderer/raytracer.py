# renderer/raytracer.py
import time
import random
import logging
from concurrent.futures import ProcessPoolExecutor
from typing import List, NamedTuple, Tuple
import numpy as np
from camera.camera import Camera
from core.errors import ConfigurationError
from geometry.hittable import Hittable
from .integrator import MAX_DEPTH, trace, trace_normals
from .tone_mapping import gamma_quantize

logger = logging.getLogger(__name__)

SHADERS = {
    "path": trace,
    "normals": trace_normals,
}

class RowJob(NamedTuple):
    """Everything one task needs to render a band of image rows."""
    camera: Camera
    world: Hittable
    width: int
    height: int
    samples: int
    row_start: int
    row_stop: int
    seed: int
    max_depth: int
    shading: str

def split_rows(height: int, tiles: int) -> List[Tuple[int, int]]:
    """
    Splits image rows [0, height) into contiguous, disjoint bands, top first.
    Earlier bands take the remainder rows.
    """
    tiles = max(1, min(tiles, height))
    base, extra = divmod(height, tiles)
    ranges = []
    start = 0
    for i in range(tiles):
        stop = start + base + (1 if i < extra else 0)
        ranges.append((start, stop))
        start = stop
    return ranges

def row_rng(seed: int, row: int) -> random.Random:
    """Random source for one image row; independent of how rows are grouped into tasks."""
    return random.Random(seed * 1_000_003 + row)

def render_rows(job: RowJob) -> np.ndarray:
    """
    Sums job.samples radiance estimates for every pixel of a band of rows.
    Row 0 is the top of the image. Returns a (rows, width, 3) float array.
    """
    shade = SHADERS[job.shading]
    camera, world = job.camera, job.world
    band = np.zeros((job.row_stop - job.row_start, job.width, 3), dtype=np.float64)
    for i, row in enumerate(range(job.row_start, job.row_stop)):
        rng = row_rng(job.seed, row)
        # Viewport t grows upward while image rows grow downward.
        y = job.height - 1 - row
        for x in range(job.width):
            r = g = b = 0.0
            for _ in range(job.samples):
                s = (x + rng.random()) / job.width
                t = (y + rng.random()) / job.height
                ray = camera.get_ray(s, t, rng)
                color = shade(ray, world, 0, rng, job.max_depth)
                r += color.x
                g += color.y
                b += color.z
            band[i, x, 0] = r
            band[i, x, 1] = g
            band[i, x, 2] = b
    return band

class Renderer:
    """
    Offline path-tracing renderer.

    The image is split into `tiles` row bands rendered as independent tasks
    over the shared, read-only camera and world. With workers > 1 the bands
    run in a process pool; results are always gathered in top-to-bottom order.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int, tiles: int = 2,
                 workers: int = 2, seed: int = 0, max_depth: int = MAX_DEPTH, shading: str = "path"):
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"image size must be positive, got {width}x{height}")
        if samples_per_pixel <= 0:
            raise ConfigurationError(f"samples per pixel must be positive, got {samples_per_pixel}")
        if tiles < 1:
            raise ConfigurationError(f"need at least one tile, got {tiles}")
        if workers < 1:
            raise ConfigurationError(f"need at least one worker, got {workers}")
        if max_depth < 0:
            raise ConfigurationError(f"max depth must be non-negative, got {max_depth}")
        if shading not in SHADERS:
            raise ConfigurationError(f"unknown shading {shading!r}; choose from {sorted(SHADERS)}")
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.tiles = tiles
        self.workers = workers
        self.seed = seed
        self.max_depth = max_depth
        self.shading = shading

    def jobs(self, camera: Camera, world: Hittable) -> List[RowJob]:
        return [
            RowJob(camera, world, self.width, self.height, self.samples_per_pixel,
                   start, stop, self.seed, self.max_depth, self.shading)
            for start, stop in split_rows(self.height, self.tiles)
        ]

    def render_linear(self, camera: Camera, world: Hittable) -> np.ndarray:
        """Returns the (height, width, 3) array of summed, unscaled radiance."""
        jobs = self.jobs(camera, world)
        logger.info("rendering %dx%d, %d spp, %d bands on %d worker(s)",
                    self.width, self.height, self.samples_per_pixel, len(jobs), self.workers)
        start = time.perf_counter()
        if self.workers == 1:
            bands = [render_rows(job) for job in jobs]
        else:
            with ProcessPoolExecutor(max_workers=min(self.workers, len(jobs))) as executor:
                # map() yields in submission order, whichever band finishes first.
                bands = list(executor.map(render_rows, jobs))
        for job, band in zip(jobs, bands):
            logger.debug("rows %d-%d done", job.row_start, job.row_stop - 1)
        logger.info("rendered in %.2fs", time.perf_counter() - start)
        return np.concatenate(bands, axis=0)

    def render(self, camera: Camera, world: Hittable) -> np.ndarray:
        """Renders to a (height, width, 3) uint8 array, top row first."""
        return gamma_quantize(self.render_linear(camera, world), self.samples_per_pixel)
