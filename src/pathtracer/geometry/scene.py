# geometry/scene.py
from typing import Iterable, List, Optional, Sequence

import numpy as np

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.utils import make_rng
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.hittable import Hittable, HitRecord


class Scene:
    """
    Everything that can be seen in a render: the primitives and the bounding
    volume hierarchy over them. The hierarchy is rebuilt from scratch on
    every push, so it always matches the current primitive set. Once built,
    a scene is only read during rendering and can be shared freely.
    """
    def __init__(self, initial: Hittable, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else make_rng()
        self._objects: List[Hittable] = [initial]
        self.bvh_root: BVHNode = self._build()

    @classmethod
    def from_objects(cls, objects: Iterable[Hittable],
                     rng: Optional[np.random.Generator] = None) -> "Scene":
        """
        Builds a scene from a non-empty iterable of hittables, rebuilding the
        hierarchy once rather than once per object.
        """
        objects = list(objects)
        if not objects:
            raise ValueError("a scene needs at least one object")
        scene = cls(objects[0], rng)
        scene._objects.extend(objects[1:])
        scene.bvh_root = scene._build()
        return scene

    def _build(self) -> BVHNode:
        return BVHNode(self._objects, 0, len(self._objects), self.rng)

    def push(self, obj: Hittable):
        self._objects.append(obj)
        self.bvh_root = self._build()

    @property
    def objects(self) -> Sequence[Hittable]:
        return tuple(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def bounding_box(self) -> AABB:
        return self.bvh_root.bounding_box()

    def nearest_hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """
        Returns the closest intersection of the ray within [t_min, t_max],
        or None if nothing is hit.
        """
        return self.bvh_root.hit(ray, t_min, t_max)


def linear_nearest_hit(objects: Iterable[Hittable], ray: Ray,
                       t_min: float, t_max: float) -> Optional[HitRecord]:
    """
    Brute-force nearest hit over every object, without any acceleration.
    A debugging utility: it must agree with Scene.nearest_hit for any ray
    and interval, so a mismatch points at the hierarchy.
    """
    hit_record = None
    closest_so_far = t_max
    for obj in objects:
        rec = obj.hit(ray, t_min, closest_so_far)
        if rec is not None:
            closest_so_far = rec.distance
            hit_record = rec
    return hit_record
