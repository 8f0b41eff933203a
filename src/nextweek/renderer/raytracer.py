# renderer/raytracer.py
import logging
import os
import random
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Optional
import numpy as np
from tqdm import tqdm
from nextweek.camera.camera import Camera
from nextweek.core.vector import Color
from nextweek.core import utils
from nextweek.geometry.hittable import Hittable
from nextweek.renderer.integrator import MAX_DEPTH, Background, ray_color
from nextweek.renderer.tone_mapping import tone_map

logger = logging.getLogger(__name__)

@dataclass
class RenderSettings:
    """
    Image size and sampling parameters for one render.

    seed=None draws a fresh base seed from the OS; a fixed seed makes the
    output bit-identical between runs, whatever the number of workers.
    """
    width: int
    height: int
    samples: int = 100
    max_depth: int = MAX_DEPTH
    workers: Optional[int] = None
    seed: Optional[int] = None
    progress: bool = False

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"image size must be positive, got {self.width}x{self.height}")
        if self.samples <= 0:
            raise ValueError(f"samples must be positive, got {self.samples}")
        if self.workers is not None and self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")

class _RenderJob:
    """
    Everything a row task needs. Built once, before any task starts, and
    only read afterwards.
    """
    def __init__(self, world: Hittable, camera: Camera, background: Background,
                 settings: RenderSettings, base_seed: int):
        self.world = world
        self.camera = camera
        self.background = background
        self.settings = settings
        self.base_seed = base_seed

    def pixel_color(self, i: int, j: int) -> Color:
        settings = self.settings
        gen = utils.rng()
        col = Color(0.0, 0.0, 0.0)
        for _ in range(settings.samples):
            u = (i + gen.random()) / settings.width
            v = (j + gen.random()) / settings.height
            ray = self.camera.get_ray(u, v)
            col = col + ray_color(ray, self.background, self.world, settings.max_depth)
        return col / settings.samples

    def render_row(self, row: int) -> np.ndarray:
        """RGBA pixels of image row `row` (row 0 is the top of the image)."""
        settings = self.settings
        # Each row owns its random stream, so scheduling cannot change the output.
        utils.seed_task(f"{self.base_seed}:{row}")
        j = settings.height - 1 - row
        linear = np.empty((settings.width, 3), dtype=np.float64)
        for i in range(settings.width):
            linear[i] = tuple(self.pixel_color(i, j))
        return tone_map(linear)

_worker_job: Optional[_RenderJob] = None

def _init_worker(job: _RenderJob):
    global _worker_job
    _worker_job = job

def _render_row_in_worker(row: int) -> np.ndarray:
    return _worker_job.render_row(row)

class Renderer:
    """
    CPU path tracer driver. Pixel rows are independent tasks spread over a
    process pool; each writes a disjoint slice of the output buffer.
    """
    def __init__(self, settings: RenderSettings):
        self.settings = settings

    def _job(self, world: Hittable, camera: Camera, background: Background) -> _RenderJob:
        base_seed = self.settings.seed
        if base_seed is None:
            base_seed = random.SystemRandom().getrandbits(63)
        return _RenderJob(world, camera, background, self.settings, base_seed)

    def pixel_color(self, world: Hittable, camera: Camera, background: Background,
                    i: int, j: int) -> Color:
        """
        Average linear radiance of pixel column i, row j counted from the
        bottom of the image. Draws from the current task's generator.
        """
        return self._job(world, camera, background).pixel_color(i, j)

    def render(self, world: Hittable, camera: Camera, background: Background) -> np.ndarray:
        """
        Render the image and return it as a (height, width, 4) uint8 RGBA
        array with row 0 at the top. `world` and `camera` must be fully
        built; they are shared read-only by every task.
        """
        settings = self.settings
        job = self._job(world, camera, background)
        workers = settings.workers or os.cpu_count() or 1
        workers = min(workers, settings.height)
        logger.info("Rendering %dx%d, %d samples per pixel, max depth %d, %d worker(s)",
                    settings.width, settings.height, settings.samples,
                    settings.max_depth, workers)

        image = np.zeros((settings.height, settings.width, 4), dtype=np.uint8)
        rows = range(settings.height)
        start = time.perf_counter()
        if workers == 1:
            self._collect(image, map(job.render_row, rows))
        else:
            with ProcessPoolExecutor(max_workers=workers,
                                     initializer=_init_worker,
                                     initargs=(job,)) as executor:
                self._collect(image, executor.map(_render_row_in_worker, rows))
        logger.info("Rendered in %.2fs", time.perf_counter() - start)
        return image

    def _collect(self, image: np.ndarray, results) -> None:
        results = tqdm(results, total=self.settings.height, unit="row",
                       disable=not self.settings.progress)
        for row, pixels in enumerate(results):
            image[row] = pixels
