# core/uv.py
import math

from pathtracer.core.vector import Vector3


class UV:
    """
    Represents a 2D texture coordinate.
    """
    __slots__ = ("u", "v")

    def __init__(self, u: float, v: float):
        self.u = u
        self.v = v

    def __repr__(self) -> str:
        return f"UV({self.u}, {self.v})"


def sphere_uv(outward_normal: Vector3) -> UV:
    """
    Spherical texture coordinates for a point on a unit sphere, given by its
    outward normal. u wraps around the y axis starting at -x, v runs from the
    bottom pole (0) to the top pole (1).
    """
    theta = math.acos(max(-1.0, min(1.0, -outward_normal.y)))
    phi = math.atan2(-outward_normal.z, outward_normal.x) + math.pi
    return UV(phi / (2 * math.pi), theta / math.pi)
