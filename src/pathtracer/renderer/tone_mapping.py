# renderer/tone_mapping.py
import numpy as np


def gamma_correct(accumulated: np.ndarray, gamma: float = 2.0) -> np.ndarray:
    """
    Apply gamma correction to a linear image. The default gamma of 2 is a
    square root.
    """
    linear = np.clip(accumulated, 0.0, None)
    if gamma == 2.0:
        return np.sqrt(linear)
    return linear ** (1.0 / gamma)


def to_rgb8(image: np.ndarray) -> np.ndarray:
    """
    Scale [0, 1] channels to 8-bit, truncating and clamping to [0, 255].
    """
    return np.clip(image * 255.0, 0, 255).astype(np.uint8)
