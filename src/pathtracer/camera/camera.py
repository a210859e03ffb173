# camera/camera.py
import math

import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_disk
from pathtracer.core.vector import Point3, Vector3


class Camera:
    def __init__(self, look_from: Point3, look_at: Point3, up: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0, focus_dist: float = 1.0):
        self.position = look_from
        self.look_at = look_at
        self.up_hint = up
        self.vfov = vfov  # Vertical field of view in degrees
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        theta = math.radians(self.vfov)
        viewport_height = 2.0 * math.tan(theta / 2)
        viewport_width = self.aspect_ratio * viewport_height

        # Orthonormal basis: w points backwards, away from the target.
        self.w = (self.position - self.look_at).normalize()
        self.right = self.up_hint.cross(self.w).normalize()
        self.up = self.w.cross(self.right)

        # Scale by focus distance
        self.horizontal = self.right * viewport_width * self.focus_dist
        self.vertical = self.up * viewport_height * self.focus_dist

        self.lower_left_corner = (self.position -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * self.focus_dist)

    def get_ray(self, u: float, v: float, rng: np.random.Generator) -> Ray:
        """
        Generates the ray through normalized image coordinates (u, v), with
        (0, 0) the lower left corner. A non-zero aperture jitters the origin
        across the lens for depth of field.
        """
        if self.aperture <= 0:
            direction = (self.lower_left_corner +
                         self.horizontal * u +
                         self.vertical * v -
                         self.position)
            return Ray(self.position, direction)

        # Generate random point on lens
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.right * rd.x + self.up * rd.y

        ray_origin = self.position + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * u +
                         self.vertical * v -
                         ray_origin)

        return Ray(ray_origin, ray_direction)
