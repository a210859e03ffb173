# materials/metal.py
import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_sphere
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material


class Metal(Material):
    """
    Metal material with mirror reflection perturbed by a fuzz factor in [0, 1].
    """
    def __init__(self, albedo, fuzz: float):
        super().__init__(albedo)
        self.fuzz = min(max(fuzz, 0.0), 1.0)

    def scatter(self, rec: HitRecord, rng: np.random.Generator) -> Ray:
        reflected = rec.ray.direction.normalize().reflect(rec.normal)
        # A fuzzed direction may point into the surface; it is kept as is.
        return Ray(rec.point, reflected + random_in_unit_sphere(rng) * self.fuzz)
