# renderer/raytracer.py
import logging
import time
from typing import Callable, Optional

import numpy as np

from whitted.camera.camera import Camera
from whitted.config import DEFAULT_MAX_DEPTH
from whitted.geometry.world import World
from whitted.renderer.canvas import Canvas

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


class Renderer:
    """
    CPU Whitted renderer: one primary ray per pixel, traced through
    World.color_at with a fixed recursion budget.

    The world is only read, so disjoint row ranges produced by render_rows
    can be computed independently and stitched into a canvas.
    """
    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        self.max_depth = max_depth

    def render_rows(self, camera: Camera, world: World, start: int, stop: int) -> np.ndarray:
        """
        Render rows [start, stop) of the image. Returns an array of shape
        (stop - start, camera.hsize, 3).
        """
        if not 0 <= start <= stop <= camera.vsize:
            raise ValueError(f"row range [{start}, {stop}) outside 0..{camera.vsize}")
        block = np.zeros((stop - start, camera.hsize, 3), dtype=np.float64)
        for row, y in enumerate(range(start, stop)):
            for x in range(camera.hsize):
                color = world.color_at(camera.ray_for_pixel(x, y), self.max_depth)
                block[row, x] = (color.red, color.green, color.blue)
        return block

    def render(self, camera: Camera, world: World,
               progress: Optional[ProgressCallback] = None,
               should_stop: Optional[Callable[[], bool]] = None) -> Canvas:
        """
        Render the full image.

        Args:
            progress: called as progress(rows_done, total_rows) after each row
            should_stop: polled between rows; when it returns True rendering
                stops and the partial canvas is returned

        Returns:
            The canvas, with unrendered rows left black if stopped early
        """
        canvas = Canvas(camera.hsize, camera.vsize)
        logger.info("Rendering %dx%d, max depth %d, %d objects, %d lights",
                    camera.hsize, camera.vsize, self.max_depth,
                    len(world.objects), len(world.lights))
        start_time = time.perf_counter()

        for y in range(camera.vsize):
            if should_stop is not None and should_stop():
                logger.warning("Render stopped after %d of %d rows", y, camera.vsize)
                break
            canvas.pixels[y:y + 1] = self.render_rows(camera, world, y, y + 1)
            logger.debug("Row %d/%d done", y + 1, camera.vsize)
            if progress is not None:
                progress(y + 1, camera.vsize)
        else:
            logger.info("Render finished in %.2fs", time.perf_counter() - start_time)

        return canvas


def render(camera: Camera, world: World, max_depth: int = DEFAULT_MAX_DEPTH) -> Canvas:
    """Render `world` as seen by `camera` into a new canvas."""
    return Renderer(max_depth).render(camera, world)
