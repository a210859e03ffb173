# materials/textures.py
import math
from typing import Optional

import numpy as np

from pathtracer.core.uv import UV
from pathtracer.core.vector import Color, Point3


class Texture:
    """Base class for all textures."""
    def sample(self, uv: UV, point: Optional[Point3] = None) -> Color:
        """Sample the texture at given UV coordinates."""
        raise NotImplementedError("sample() must be implemented by texture subclasses.")


class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def sample(self, uv: UV, point: Optional[Point3] = None) -> Color:
        return self.color


class CheckerTexture(Texture):
    """
    A checker pattern alternating between two textures. Larger scale values
    give larger squares.
    """
    def __init__(self, even: Texture, odd: Texture, scale: float = 1.0):
        self.even = even
        self.odd = odd
        self.scale = scale

    def sample(self, uv: UV, point: Optional[Point3] = None) -> Color:
        frequency = (1.0 / self.scale) * 20.0 * math.pi
        a = math.sin(uv.u * frequency)
        b = math.sin(uv.v * frequency)
        if (a < 0.0 < b) or (b < 0.0 < a):
            return self.even.sample(uv, point)
        return self.odd.sample(uv, point)


# Gradient directions for 2D noise.
_GRADIENTS = ((1.0, 1.0), (-1.0, 1.0), (1.0, -1.0), (-1.0, -1.0),
              (1.0, 0.0), (-1.0, 0.0), (0.0, 1.0), (0.0, -1.0))


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(t: float, a: float, b: float) -> float:
    return a + t * (b - a)


class Perlin:
    """
    2D gradient noise over a permutation table drawn from the given random
    source. Values lie roughly in [-1, 1] and are 0 at integer lattice points.
    """
    def __init__(self, rng: np.random.Generator):
        self.p = rng.permutation(256).tolist() * 2

    def _grad(self, h: int, x: float, y: float) -> float:
        gx, gy = _GRADIENTS[h & 7]
        return gx * x + gy * y

    def noise(self, x: float, y: float) -> float:
        x0 = math.floor(x)
        y0 = math.floor(y)
        xi = x0 & 255
        yi = y0 & 255
        xf = x - x0
        yf = y - y0
        u = _fade(xf)
        v = _fade(yf)

        p = self.p
        aa = p[p[xi] + yi]
        ab = p[p[xi] + yi + 1]
        ba = p[p[xi + 1] + yi]
        bb = p[p[xi + 1] + yi + 1]

        x1 = _lerp(u, self._grad(aa, xf, yf), self._grad(ba, xf - 1, yf))
        x2 = _lerp(u, self._grad(ab, xf, yf - 1), self._grad(bb, xf - 1, yf - 1))
        return _lerp(v, x1, x2)

    def fractal(self, x: float, y: float, octaves: int = 1, turbulence: bool = False) -> float:
        """
        Sum of octaves of noise, each at twice the frequency and half the
        amplitude of the last. With turbulence the absolute value of every
        octave is summed, giving sharp creases instead of smooth blobs.
        """
        total = 0.0
        freq = 1.0
        amp = 1.0
        for _ in range(octaves):
            n = self.noise(x * freq, y * freq)
            total += (abs(n) if turbulence else n) * amp
            freq *= 2.0
            amp *= 0.5
        return total


class NoiseTexture(Texture):
    """A color modulated by Perlin noise, between 0.2 and 1.0 of its value."""
    def __init__(self, perlin: Perlin, scale: float, color: Color,
                 octaves: int = 1, turbulence: bool = False):
        if octaves < 1:
            raise ValueError(f"octaves must be at least 1, got {octaves}")
        self.perlin = perlin
        self.scale = scale
        self.color = color
        self.octaves = octaves
        self.turbulence = turbulence

    def sample(self, uv: UV, point: Optional[Point3] = None) -> Color:
        n = self.perlin.fractal(uv.u * self.scale, uv.v * self.scale,
                                self.octaves, self.turbulence)
        n = max(-1.0, min(1.0, n))
        return self.color * ((n + 1.5) / 2.5)
