# materials/dielectric.py
import math

import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.utils import schlick
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material


class Dielectric(Material):
    """
    Clear material (glass, water) that reflects or refracts, choosing between
    the two with Schlick's reflectance.
    """
    def __init__(self, ref_idx: float, albedo=None):
        # Glass doesn't absorb light unless tinted.
        super().__init__(albedo if albedo is not None else Vector3(1.0, 1.0, 1.0))
        self.ref_idx = ref_idx

    def scatter(self, rec: HitRecord, rng: np.random.Generator) -> Ray:
        # Determine if we're entering or exiting the material
        refraction_ratio = 1.0 / self.ref_idx if rec.is_front else self.ref_idx

        unit_direction = rec.ray.direction.normalize()
        cos_theta = min((-unit_direction).dot(rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        cannot_refract = refraction_ratio * sin_theta > 1.0
        if cannot_refract or schlick(cos_theta, refraction_ratio) > rng.random():
            direction = unit_direction.reflect(rec.normal)
        else:
            direction = unit_direction.refract(rec.normal, refraction_ratio)

        return Ray(rec.point, direction)
