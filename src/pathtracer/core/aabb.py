# core/aabb.py
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Point3, Vector3

_AXES = ("x", "y", "z")


class AABB:
    """
    Axis-aligned bounding box given by its minimum and maximum corners.
    """
    __slots__ = ("minimum", "maximum")

    def __init__(self, minimum: Point3, maximum: Point3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray: Ray, t_min: float, t_max: float) -> bool:
        # Slab method: shrink [t_min, t_max] by the entry/exit interval of
        # each axis and reject as soon as it is empty.
        for a in _AXES:
            direction = getattr(ray.direction, a)
            origin = getattr(ray.origin, a)
            lo = getattr(self.minimum, a)
            hi = getattr(self.maximum, a)
            if direction == 0.0:
                # Parallel to the slab: the interval is (-inf, inf) or empty.
                if origin < lo or origin > hi:
                    return False
                continue
            t0 = (lo - origin) / direction
            t1 = (hi - origin) / direction
            if t1 < t0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max < t_min:
                return False
        return True

    def contains(self, other: "AABB") -> bool:
        return all(
            getattr(self.minimum, a) <= getattr(other.minimum, a)
            and getattr(other.maximum, a) <= getattr(self.maximum, a)
            for a in _AXES
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.minimum == other.minimum and self.maximum == other.maximum

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)
