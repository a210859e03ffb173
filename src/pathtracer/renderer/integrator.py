# renderer/integrator.py
import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.geometry.scene import Scene

# Ray interval for scene queries; the lower bound keeps scattered rays from
# re-hitting the surface they leave.
T_MIN = 0.001
T_MAX = 1000.0

BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)


def background(ray: Ray) -> Color:
    """
    Vertical sky gradient: white at the horizon blending to blue straight up.
    """
    t = 0.5 * (1.0 + ray.direction.normalize().y)
    return WHITE * (1.0 - t) + SKY_BLUE * t


def ray_color(ray: Ray, scene: Scene, depth: int, rng: np.random.Generator,
              t_min: float = T_MIN, t_max: float = T_MAX) -> Color:
    """
    Color carried back along a ray. Each hit scatters one new ray and
    attenuates what it returns by the surface albedo; a miss returns the sky.
    Recursion stops with black once the bounce budget is spent.
    """
    if depth <= 0:
        return BLACK

    hit = scene.nearest_hit(ray, t_min, t_max)
    if hit is None:
        return background(ray)

    incoming = ray_color(hit.scatter(rng), scene, depth - 1, rng, t_min, t_max)
    return hit.albedo() * incoming
