# materials/presets.py
import numpy as np

from pathtracer.core.vector import Color
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.textures import CheckerTexture, NoiseTexture, Perlin, SolidTexture


class ColorPresets:
    """Common color presets for materials."""

    WHITE = Color(1.0, 1.0, 1.0)
    BLACK = Color(0.0, 0.0, 0.0)
    GREY = Color(0.5, 0.5, 0.5)

    RED = Color(1.0, 0.0, 0.0)
    GREEN = Color(0.0, 1.0, 0.0)
    BLUE = Color(0.0, 0.0, 1.0)
    YELLOW = Color(1.0, 1.0, 0.0)
    CYAN = Color(0.0, 1.0, 1.0)
    PINK = Color(1.0, 0.0, 1.0)

    DARK_RED = Color(0.5, 0.0, 0.0)
    DARK_GREEN = Color(0.0, 0.5, 0.0)
    DARK_BLUE = Color(0.0, 0.0, 0.5)

    LIGHT_RED = Color(1.0, 0.5, 0.5)
    LIGHT_GREEN = Color(0.5, 1.0, 0.5)
    LIGHT_BLUE = Color(0.5, 0.5, 1.0)

    @staticmethod
    def matte(color: Color) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)


class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def mirror() -> Metal:
        return Metal(Color(0.9, 0.9, 0.9), fuzz=0.0)

    @staticmethod
    def gold() -> Metal:
        return Metal(Color(1.0, 0.78, 0.34), fuzz=0.1)

    @staticmethod
    def silver() -> Metal:
        return Metal(Color(0.95, 0.93, 0.88), fuzz=0.05)

    @staticmethod
    def brushed_metal() -> Metal:
        return Metal(Color(0.8, 0.8, 0.8), fuzz=0.3)


class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def water() -> Dielectric:
        return Dielectric(1.33)

    @staticmethod
    def diamond() -> Dielectric:
        return Dielectric(2.42)


class TexturePresets:
    """Predefined texture presets."""

    @staticmethod
    def checkerboard(color1: Color = None, color2: Color = None, scale: float = 1.0) -> CheckerTexture:
        """Create a checkerboard texture with default or custom colors."""
        if color1 is None:
            color1 = Color(0.2, 0.3, 0.1)
        if color2 is None:
            color2 = Color(0.9, 0.9, 0.9)
        return CheckerTexture(SolidTexture(color1), SolidTexture(color2), scale)

    @staticmethod
    def noise(rng: np.random.Generator, color: Color, scale: float = 10.0,
              octaves: int = 1, turbulence: bool = False) -> NoiseTexture:
        """Create a Perlin noise texture tinting the given color."""
        return NoiseTexture(Perlin(rng), scale, color, octaves, turbulence)
