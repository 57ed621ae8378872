# renderer/image_io.py
import os
import logging
from typing import TextIO
import numpy as np

# Keep pygame from printing its banner into a PPM written to stdout.
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

logger = logging.getLogger(__name__)

def format_ppm(pixels: np.ndarray) -> str:
    """Formats a (height, width, 3) image as ASCII PPM (P3), one pixel per line."""
    height, width, _ = pixels.shape
    lines = [f"P3\n{width} {height}\n255\n"]
    for row in pixels:
        for r, g, b in row:
            lines.append(f"{int(r)} {int(g)} {int(b)}\n")
    return "".join(lines)

def write_ppm(pixels: np.ndarray, stream: TextIO) -> None:
    stream.write(format_ppm(pixels))

def save_png(pixels: np.ndarray, path: str) -> None:
    # surfarray is indexed [x, y], image arrays [row, column].
    surface = pygame.surfarray.make_surface(np.ascontiguousarray(pixels.transpose(1, 0, 2)))
    pygame.image.save(surface, path)

def save_image(pixels: np.ndarray, path: str) -> None:
    """Writes pixels to path, as PPM for a .ppm suffix and through pygame otherwise."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    if path.lower().endswith(".ppm"):
        with open(path, "w", encoding="ascii") as f:
            write_ppm(pixels, f)
    else:
        save_png(pixels, path)
    logger.info("wrote %s", path)
