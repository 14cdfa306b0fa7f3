"""
Whole-image color tint.
"""

import re
from typing import Tuple
import logging

import numpy as np

from ...exceptions import InvalidColorEncoding, InvalidTintParameter
from .conversion import convert_to_rgb

logger = logging.getLogger(__name__)

_HEX_PATTERN = re.compile(r'^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')


def parse_hex_color(value: str) -> Tuple[int, int, int]:
    """
    Parse a hex color string.

    Accepts "#RRGGBB", "RRGGBB" and the short "#RGB" form.

    Raises:
        InvalidColorEncoding: if the string is not a hex color
    """
    if not isinstance(value, str):
        raise InvalidColorEncoding(f"Color must be a string, got {type(value).__name__}")

    match = _HEX_PATTERN.match(value.strip())
    if not match:
        raise InvalidColorEncoding(f"Invalid hex color: {value!r}")

    digits = match.group(1)
    if len(digits) == 3:
        digits = ''.join(ch * 2 for ch in digits)
    return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))


def apply_tint(image: np.ndarray, color: Tuple[int, int, int],
               intensity: float = 0.5) -> np.ndarray:
    """
    Blend every pixel toward a color.

    Args:
        image: Grayscale or RGB uint8 image
        color: Target (r, g, b)
        intensity: 0 leaves the image unchanged, 1 replaces it with the color

    Returns:
        New RGB uint8 image
    """
    if not 0.0 <= intensity <= 1.0:
        raise InvalidTintParameter(f"Tint intensity {intensity} out of range [0, 1]")

    rgb = convert_to_rgb(image)
    target = np.asarray(color, dtype=np.float32).reshape(1, 1, 3)
    blended = target * intensity + rgb.astype(np.float32) * (1.0 - intensity)

    logger.debug(f"Applied tint {color} at intensity {intensity:.2f}")
    return np.clip(np.rint(blended), 0, 255).astype(np.uint8)
