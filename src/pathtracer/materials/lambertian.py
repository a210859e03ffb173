# materials/lambertian.py
import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_unit_vector
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material


class Lambertian(Material):
    """
    Lambertian diffuse material. Accepts a solid color or a texture.
    """
    def scatter(self, rec: HitRecord, rng: np.random.Generator) -> Ray:
        # Pick a random scatter direction by adding a random vector to the normal.
        scatter_direction = rec.normal.normalize() + random_unit_vector(rng)

        # If scatter_direction is degenerate, just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        return Ray(rec.point, scatter_direction)
