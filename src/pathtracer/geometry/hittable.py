# geometry/hittable.py
from typing import TYPE_CHECKING, Optional

import numpy as np

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.uv import UV
from pathtracer.core.vector import Color, Point3, Vector3

if TYPE_CHECKING:
    from pathtracer.materials.material import Material


class HitRecord:
    """
    Records details of a ray-object intersection. Lives only as long as the
    query that produced it.
    """
    __slots__ = ("ray", "distance", "point", "normal", "is_front", "material", "uv")

    def __init__(self, ray: Ray, distance: float, point: Point3,
                 material: "Material" = None, uv: Optional[UV] = None):
        self.ray = ray                # The incoming ray
        self.distance = distance      # Ray parameter at intersection
        self.point = point            # Intersection point
        self.normal = None            # Surface normal, facing the incoming ray
        self.is_front = True          # Whether the hit was on the outside
        self.material = material
        self.uv = uv if uv is not None else UV(0.0, 0.0)

    def set_face_normal(self, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.is_front = self.ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.is_front else -outward_normal

    def scatter(self, rng: np.random.Generator) -> Ray:
        """
        Samples one outgoing ray from the hit point according to the material.
        """
        return self.material.scatter(self, rng)

    def albedo(self) -> Color:
        return self.material.albedo_at(self.uv, self.point)


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self) -> AABB:
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")
