# renderer/output.py
from pathlib import Path
from typing import TextIO, Union

import numpy as np
from PIL import Image as PILImage

IMAGE_FORMATS = (".ppm", ".png")


def write_ppm(image: np.ndarray, stream: TextIO) -> None:
    """Write an 8-bit RGB image as plain-text PPM.

    Args:
        image: Array of shape (height, width, 3), row 0 at the top.
        stream: Text stream to write to.
    """
    height, width, _ = image.shape
    stream.write(f"P3\n{width} {height}\n255\n")
    for r, g, b in image.reshape(-1, 3):
        stream.write(f"{int(r)} {int(g)} {int(b)}\n")


def save_png(image: np.ndarray, filepath: Union[str, Path]) -> None:
    """Save an 8-bit RGB image as a PNG file."""
    PILImage.fromarray(np.ascontiguousarray(image, dtype=np.uint8)).save(filepath)


def check_format(filepath: Union[str, Path]) -> None:
    """Raise ValueError unless the path has a supported image suffix."""
    suffix = Path(filepath).suffix.lower()
    if suffix not in IMAGE_FORMATS:
        raise ValueError(
            f"Unsupported image format {suffix or '(none)'!r}; use one of {', '.join(IMAGE_FORMATS)}"
        )


def save_image(image: np.ndarray, filepath: Union[str, Path]) -> Path:
    """Save an image, choosing the format from the file suffix.

    Returns:
        The path written.

    Raises:
        ValueError: If the suffix is not ``.ppm`` or ``.png``.
    """
    path = Path(filepath)
    check_format(path)
    if path.suffix.lower() == ".ppm":
        with path.open("w") as f:
            write_ppm(image, f)
    else:
        save_png(image, path)
    return path
