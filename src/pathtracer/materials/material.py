# materials/material.py
from typing import TYPE_CHECKING

import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.uv import UV
from pathtracer.core.vector import Color, Point3
from pathtracer.materials.textures import SolidTexture, Texture

if TYPE_CHECKING:
    from pathtracer.geometry.hittable import HitRecord


def as_texture(albedo) -> Texture:
    """Wraps a plain color in a SolidTexture; textures pass through."""
    if isinstance(albedo, Texture):
        return albedo
    return SolidTexture(albedo)


class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Every material owns a texture that gives its color at a surface point.
    """
    def __init__(self, albedo):
        self.texture = as_texture(albedo)

    def scatter(self, rec: "HitRecord", rng: np.random.Generator) -> Ray:
        """
        Samples the outgoing ray leaving the hit point.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def albedo_at(self, uv: UV, point: Point3) -> Color:
        """
        Get the color from the texture at the given UV coordinates and point.
        """
        return self.texture.sample(uv, point)
