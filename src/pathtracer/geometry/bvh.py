# geometry/bvh.py
from functools import cmp_to_key
from typing import List, Optional

import numpy as np

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord

_AXES = ("x", "y", "z")


def box_compare(a: Hittable, b: Hittable, axis: int) -> int:
    """
    Orders two hittables along an axis: a sorts first when its box starts
    lower, later when its box ends higher, otherwise the two are equal.
    This is not a total order for overlapping boxes.
    """
    name = _AXES[axis]
    box_a = a.bounding_box()
    box_b = b.bounding_box()
    if getattr(box_a.minimum, name) < getattr(box_b.minimum, name):
        return -1
    if getattr(box_a.maximum, name) > getattr(box_b.maximum, name):
        return 1
    return 0


class BVHNode(Hittable):
    """
    A node of a binary bounding volume hierarchy. A leaf holds a single
    object in both left and right; an inner node holds two subtrees and the
    box surrounding them. Objects are shared with the caller's list, never
    copied.
    """
    def __init__(self, objects: List[Hittable], start: int, end: int,
                 rng: np.random.Generator):
        object_span = end - start
        # Split along a random axis; no surface area heuristic.
        axis = int(rng.integers(3))
        key = cmp_to_key(lambda a, b: box_compare(a, b, axis))

        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            if key(objects[start]) < key(objects[start + 1]):
                self.left = objects[start]
                self.right = objects[start + 1]
            else:
                self.left = objects[start + 1]
                self.right = objects[start]
        else:
            objects[start:end] = sorted(objects[start:end], key=key)
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, rng)
            self.right = BVHNode(objects, mid, end, rng)

        self.box = AABB.surrounding_box(self.left.bounding_box(),
                                        self.right.bounding_box())

    @property
    def is_leaf(self) -> bool:
        return self.left is self.right and not isinstance(self.left, BVHNode)

    def bounding_box(self) -> AABB:
        return self.box

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)
        if self.is_leaf:
            return hit_left

        # Both subtrees are searched over the full interval; the closer
        # result wins.
        hit_right = self.right.hit(ray, t_min, t_max)

        if hit_left is not None and hit_right is not None:
            return hit_left if hit_left.distance <= hit_right.distance else hit_right
        return hit_left if hit_left is not None else hit_right


def count_nodes(node: Hittable) -> int:
    """Number of BVH nodes in the tree rooted at node."""
    if not isinstance(node, BVHNode):
        return 0
    if node.is_leaf:
        return 1
    return 1 + count_nodes(node.left) + count_nodes(node.right)


def tree_depth(node: Hittable) -> int:
    """Length of the longest root-to-leaf path, counted in nodes."""
    if not isinstance(node, BVHNode):
        return 0
    if node.is_leaf:
        return 1
    return 1 + max(tree_depth(node.left), tree_depth(node.right))
