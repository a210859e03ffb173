# renderer/render.py
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Callable, List, Optional

import numpy as np

from pathtracer.camera.camera import Camera
from pathtracer.config import RenderSettings
from pathtracer.core.vector import Color
from pathtracer.geometry.scene import Scene
from pathtracer.renderer.integrator import ray_color
from pathtracer.renderer.tone_mapping import gamma_correct, to_rgb8

ProgressCallback = Callable[[int, int], None]


def render_row(scene: Scene, camera: Camera, settings: RenderSettings,
               j: int, rng: np.random.Generator) -> np.ndarray:
    """
    Average linear color of every pixel in scanline j, where j = 0 is the
    bottom of the image. Returns a (width, 3) float array.
    """
    width = settings.image_width
    height = settings.image_height
    samples = settings.samples_per_pixel
    row = np.zeros((width, 3), dtype=np.float64)
    for i in range(width):
        pixel = Color(0.0, 0.0, 0.0)
        for _ in range(samples):
            u = (i + rng.uniform(-0.5, 0.5)) / width
            v = (j + rng.uniform(-0.5, 0.5)) / height
            ray = camera.get_ray(u, v, rng)
            pixel = pixel + ray_color(ray, scene, settings.max_depth, rng,
                                      settings.t_min, settings.t_max)
        row[i] = tuple(pixel / samples)
    return row


def render_band(scene: Scene, camera: Camera, settings: RenderSettings,
                start: int, stop: int, seed: np.random.SeedSequence) -> np.ndarray:
    """
    Render image rows [start, stop) counted from the top with their own
    random stream. Runs in worker processes.
    """
    rng = np.random.default_rng(seed)
    height = settings.image_height
    return np.stack([
        render_row(scene, camera, settings, height - 1 - r, rng)
        for r in range(start, stop)
    ])


def split_rows(height: int, bands: int) -> List[range]:
    """Split [0, height) into at most `bands` contiguous non-empty ranges."""
    bands = max(1, min(bands, height))
    edges = np.linspace(0, height, bands + 1).astype(int)
    return [range(lo, hi) for lo, hi in zip(edges[:-1], edges[1:]) if hi > lo]


class Renderer:
    """
    Drives the integrator over the pixel grid: jittered samples per pixel,
    averaged, gamma corrected and converted to 8-bit. The scene and camera
    are only read, so bands of rows can render in separate processes.
    """
    def __init__(self, scene: Scene, camera: Camera, settings: RenderSettings):
        self.scene = scene
        self.camera = camera
        self.settings = settings.validate()

    def _bands(self):
        settings = self.settings
        rows = split_rows(settings.image_height, settings.workers * 4)
        seeds = np.random.SeedSequence(settings.seed).spawn(len(rows))
        return list(zip(rows, seeds))

    def render_linear(self, progress: Optional[ProgressCallback] = None) -> np.ndarray:
        """
        Averaged linear radiance as a (height, width, 3) float array, row 0
        at the top of the image.
        """
        settings = self.settings
        height = settings.image_height
        image = np.zeros((height, settings.image_width, 3), dtype=np.float64)
        bands = self._bands()
        done = 0

        if settings.workers == 1:
            for rows, seed in bands:
                rng = np.random.default_rng(seed)
                for r in rows:
                    image[r] = render_row(self.scene, self.camera, settings, height - 1 - r, rng)
                    done += 1
                    if progress is not None:
                        progress(done, height)
            return image

        with ProcessPoolExecutor(max_workers=settings.workers) as pool:
            futures = {
                pool.submit(render_band, self.scene, self.camera, settings,
                            rows.start, rows.stop, seed): rows
                for rows, seed in bands
            }
            for future in as_completed(futures):
                rows = futures[future]
                image[rows.start:rows.stop] = future.result()
                done += len(rows)
                if progress is not None:
                    progress(done, height)
        return image

    def render(self, progress: Optional[ProgressCallback] = None) -> np.ndarray:
        """
        Final 8-bit RGB image of shape (height, width, 3).
        """
        return to_rgb8(gamma_correct(self.render_linear(progress)))
