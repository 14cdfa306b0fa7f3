"""
Blend a target sky color into an image through a sky mask.
"""

import numpy as np
from typing import Optional, Tuple
import logging

from ...exceptions import InvalidDimensions
from .models import CompositingConfig
from .segmenter import sky_boundary
from ..color.conversion import convert_to_rgb

logger = logging.getLogger(__name__)


def transition_field(mask: np.ndarray, transition_width: int = 5) -> np.ndarray:
    """
    Compute per-pixel blend factors for a sky mask.

    Sky pixels get 1.0. Below each column's lowest sky row the factor fades
    linearly to 0 over `transition_width` rows.

    Returns:
        float32 array of shape (H, W) with values in [0, 1]
    """
    if transition_width < 1:
        raise ValueError(f"Transition width must be positive, got {transition_width}")

    mask = np.asarray(mask, dtype=bool)
    rows = np.arange(mask.shape[0], dtype=np.float32)[:, np.newaxis]
    distance = rows - sky_boundary(mask)[np.newaxis, :].astype(np.float32)

    field = np.clip(1.0 - distance / transition_width, 0.0, 1.0).astype(np.float32)
    field[mask] = 1.0
    return field


class SkyCompositor:
    """Recolors the sky region with a soft transition at its lower edge."""

    def __init__(self, config: Optional[CompositingConfig] = None):
        self.config = config or CompositingConfig()

    def composite(self, image: np.ndarray, mask: np.ndarray,
                  color: Tuple[int, int, int]) -> np.ndarray:
        """
        Blend a color into the masked region of an image.

        Args:
            image: RGB or grayscale uint8 image
            mask: Boolean sky mask with the image's height and width
            color: Target (r, g, b)

        Returns:
            New RGB uint8 image
        """
        rgb = convert_to_rgb(image)
        mask = np.asarray(mask, dtype=bool)
        if mask.shape != rgb.shape[:2]:
            raise InvalidDimensions(
                f"Mask shape {mask.shape} does not match image shape {rgb.shape[:2]}"
            )

        factor = transition_field(mask, self.config.transition_width)[:, :, np.newaxis]
        target = np.asarray(color, dtype=np.float32).reshape(1, 1, 3)

        blended = target * factor + rgb.astype(np.float32) * (1.0 - factor)
        result = np.clip(np.rint(blended), 0, 255).astype(np.uint8)

        logger.debug(f"Composited sky color {tuple(color)} over "
                     f"{np.count_nonzero(factor)} pixels")
        return result


def composite(image: np.ndarray, mask: np.ndarray, color: Tuple[int, int, int],
              config: Optional[CompositingConfig] = None) -> np.ndarray:
    """Blend a color into the masked sky region of an image."""
    return SkyCompositor(config).composite(image, mask, color)
