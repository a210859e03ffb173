# config.py
from dataclasses import dataclass, replace
from typing import Optional

from pathtracer.renderer.integrator import T_MAX, T_MIN

QUALITY_LEVELS = {
    "preview": {"samples": 8, "bounces": 8, "scale": 0.1},
    "balanced": {"samples": 50, "bounces": 50, "scale": 0.5},
    "final": {"samples": 200, "bounces": 100, "scale": 1.0},
}

DEFAULT_IMAGE_HEIGHT = 1080
DEFAULT_ASPECT_RATIO = 16.0 / 9.0


@dataclass(frozen=True)
class RenderSettings:
    """Parameters of a render.

    Attributes:
        image_height: Output height in pixels.
        aspect_ratio: Width divided by height.
        samples_per_pixel: Jittered camera rays averaged per pixel.
        max_depth: Bounce budget per camera ray.
        t_min: Lower bound of every scene query.
        t_max: Upper bound of every scene query.
        seed: Seed for the random source; None draws fresh entropy.
        workers: Number of processes rendering bands of rows.
    """

    image_height: int = DEFAULT_IMAGE_HEIGHT
    aspect_ratio: float = DEFAULT_ASPECT_RATIO
    samples_per_pixel: int = 200
    max_depth: int = 100
    t_min: float = T_MIN
    t_max: float = T_MAX
    seed: Optional[int] = None
    workers: int = 1

    @property
    def image_width(self) -> int:
        return int(self.image_height * self.aspect_ratio)

    @classmethod
    def from_quality(cls, name: str, **overrides) -> "RenderSettings":
        """Build settings from a named preset, then apply overrides.

        Raises:
            ValueError: If the preset name is unknown or the result is invalid.
        """
        if name not in QUALITY_LEVELS:
            raise ValueError(
                f"Unknown quality level {name!r}; expected one of {sorted(QUALITY_LEVELS)}"
            )
        quality = QUALITY_LEVELS[name]
        settings = cls(
            image_height=max(1, int(DEFAULT_IMAGE_HEIGHT * quality["scale"])),
            samples_per_pixel=quality["samples"],
            max_depth=quality["bounces"],
        )
        overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(settings, **overrides).validate()

    def validate(self) -> "RenderSettings":
        """Check value ranges, returning self so calls can be chained.

        Raises:
            ValueError: On the first invalid field.
        """
        if self.image_height <= 0:
            raise ValueError(f"image_height must be positive, got {self.image_height}")
        if self.aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.image_width <= 0:
            raise ValueError("image is less than one pixel wide")
        if self.samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        if not self.t_min < self.t_max:
            raise ValueError(f"t_min ({self.t_min}) must be below t_max ({self.t_max})")
        if self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")
        return self
