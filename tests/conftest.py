"""Pytest configuration for path tracer tests.

Provides a seeded random source, a scripted random source for forcing
specific samples, and the small two-sphere scene used across modules.
"""

import numpy as np
import pytest

from pathtracer.core.vector import Color, Point3
from pathtracer.geometry.scene import Scene
from pathtracer.geometry.sphere import Sphere
from pathtracer.materials.lambertian import Lambertian


class ScriptedRNG:
    """Stand-in for numpy's Generator that replays fixed values.

    ``uniform`` and ``random`` pop from their own queues; ``integers`` always
    returns the configured axis.
    """

    def __init__(self, uniforms=(), randoms=(), axis=0):
        self.uniforms = list(uniforms)
        self.randoms = list(randoms)
        self.axis = axis

    def uniform(self, low=0.0, high=1.0):
        return self.uniforms.pop(0)

    def random(self):
        return self.randoms.pop(0)

    def integers(self, n):
        return self.axis


@pytest.fixture
def rng():
    """A seeded numpy Generator, fresh per test."""
    return np.random.default_rng(42)


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRNG instances."""
    return ScriptedRNG


@pytest.fixture
def two_sphere_scene(rng):
    """A large ground sphere and a small sphere one unit in front of the origin."""
    ground = Sphere(Point3(0, -100.5, -1), 100, Lambertian(Color(0.5, 0.5, 0.5)))
    front = Sphere(Point3(0, 0, -1), 0.5, Lambertian(Color(0.5, 0.5, 0.5)))
    scene = Scene(ground, rng)
    scene.push(front)
    return scene
