"""
Sky segmentation by seeded region growing with boundary smoothing.
"""

import numpy as np
from typing import Optional
from scipy.ndimage import binary_propagation, generate_binary_structure
import logging

from .models import SegmentationConfig, SegmentationStrategy
from ..color.conversion import validate_image, to_grayscale

logger = logging.getLogger(__name__)


class SkySegmenter:
    """
    Classifies sky pixels in an image.

    Two strategies produce the same kind of mask:
    - Region growing: seeds bright pixels on the top row and grows down and
      sideways through similar neighbors.
    - Probabilistic: scores pixels by blue dominance, brightness and height,
      then links weak pixels to strong ones with hysteresis.

    Both finish with a median-smoothed boundary, so each column of the mask
    is a single run of sky from row 0 down to the boundary.
    """

    def __init__(self, config: Optional[SegmentationConfig] = None):
        """Initialize segmenter with configuration."""
        self.config = config or SegmentationConfig()

    def segment(self, image: np.ndarray) -> np.ndarray:
        """
        Segment the sky region of an image.

        Args:
            image: Grayscale (H, W) or RGB (H, W, 3) uint8 image

        Returns:
            Boolean mask of shape (H, W), True where the pixel is sky
        """
        image = validate_image(image)

        if self.config.strategy == SegmentationStrategy.PROBABILISTIC:
            raw_mask = self._hysteresis_mask(image)
        else:
            raw_mask = self._grow_region(to_grayscale(image))

        if not raw_mask.any():
            logger.debug("No sky seeds found, returning empty mask")
            return raw_mask

        mask = smooth_sky_boundary(raw_mask, self.config.smoothing_window)
        logger.debug(f"Sky segmentation ({self.config.strategy.value}): "
                     f"{raw_mask.sum()} grown pixels, {mask.sum()} after smoothing")
        return mask

    def _grow_region(self, gray: np.ndarray) -> np.ndarray:
        """Grow the sky region from bright pixels on the top row."""
        height, width = gray.shape
        values = gray.ravel().tolist()
        marked = bytearray(height * width)

        seed_threshold = self.config.seed_threshold
        grow_threshold = self.config.grow_threshold
        similarity = self.config.similarity_threshold

        stack = [x for x in range(width) if values[x] > seed_threshold]
        for index in stack:
            marked[index] = 1

        # Down, right, left; sky never grows upward
        while stack:
            index = stack.pop()
            current = values[index]
            y, x = divmod(index, width)

            neighbors = []
            if y + 1 < height:
                neighbors.append(index + width)
            if x + 1 < width:
                neighbors.append(index + 1)
            if x > 0:
                neighbors.append(index - 1)

            for neighbor in neighbors:
                if marked[neighbor]:
                    continue
                value = values[neighbor]
                if value > grow_threshold and abs(value - current) < similarity:
                    marked[neighbor] = 1
                    stack.append(neighbor)

        return np.frombuffer(marked, dtype=np.uint8).reshape(height, width).astype(bool)

    def _sky_score(self, image: np.ndarray) -> np.ndarray:
        """Per-pixel likelihood of being sky, in [0, 1]."""
        height, width = image.shape[:2]
        brightness = to_grayscale(image).astype(np.float32) / 255.0

        if image.ndim == 3:
            rgb = image.astype(np.float32) / 255.0
            r, g, b = rgb[:, :, 0], rgb[:, :, 1], rgb[:, :, 2]
            blue_dominance = np.clip(0.5 + (b - (r + g) / 2.0), 0, 1)
        else:
            blue_dominance = np.full((height, width), 0.5, dtype=np.float32)

        if height > 1:
            rows = 1.0 - np.arange(height, dtype=np.float32) / (height - 1)
        else:
            rows = np.ones(1, dtype=np.float32)
        position = np.broadcast_to(rows[:, np.newaxis], (height, width))

        return (self.config.blue_weight * blue_dominance +
                self.config.brightness_weight * brightness +
                self.config.position_weight * position)

    def _hysteresis_mask(self, image: np.ndarray) -> np.ndarray:
        """Keep strong sky pixels and the weak pixels connected to them."""
        score = self._sky_score(image)
        strong = score > self.config.high_threshold
        weak = score > self.config.low_threshold

        structure = generate_binary_structure(2, 1)
        return binary_propagation(strong, structure=structure, mask=weak)


def sky_boundary(mask: np.ndarray) -> np.ndarray:
    """
    Find the lowest sky row in each column.

    Columns without sky report 0.
    """
    mask = np.asarray(mask, dtype=bool)
    height = mask.shape[0]
    has_sky = mask.any(axis=0)
    lowest = height - 1 - np.argmax(mask[::-1, :], axis=0)
    return np.where(has_sky, lowest, 0).astype(np.intp)


def median_smooth(values: np.ndarray, window: int = 7) -> np.ndarray:
    """Centered running median with the window clamped at the array edges."""
    values = np.asarray(values)
    half = window // 2
    size = len(values)
    smoothed = np.empty_like(values)

    for i in range(size):
        segment = np.sort(values[max(0, i - half):min(size, i + half + 1)])
        smoothed[i] = segment[len(segment) // 2]

    return smoothed


def smooth_sky_boundary(mask: np.ndarray, window: int = 7) -> np.ndarray:
    """
    Rebuild a mask as a per-column sky cap under a median-smoothed boundary.

    Args:
        mask: Boolean (H, W) sky mask
        window: Number of columns in the median window

    Returns:
        New boolean mask where row y of column x is sky iff y <= boundary[x]
    """
    mask = np.asarray(mask, dtype=bool)
    smoothed = median_smooth(sky_boundary(mask), window)
    rows = np.arange(mask.shape[0])[:, np.newaxis]
    return rows <= smoothed[np.newaxis, :]


def segment_sky(image: np.ndarray, config: Optional[SegmentationConfig] = None) -> np.ndarray:
    """Segment the sky region of an image with the given configuration."""
    return SkySegmenter(config).segment(image)
