"""
Stochastic noise synthesis for RGB images.
"""

import numpy as np
from typing import Optional
import logging

from .models import NoiseSpec, NoiseType
from ..color.conversion import convert_to_rgb

logger = logging.getLogger(__name__)

SALT = np.array([255, 255, 255], dtype=np.uint8)
PEPPER = np.array([0, 0, 0], dtype=np.uint8)


class NoiseSynthesizer:
    """
    Injects per-pixel noise into images.

    Supports:
    - Gaussian noise, sampled independently per channel
    - Salt-and-pepper noise, one draw per pixel
    - Poisson (shot) noise with the channel value as rate

    Every pixel is perturbed independently and every channel is clamped to
    0-255. Without an explicit generator each call draws from a fresh,
    unseeded one.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None):
        """
        Initialize synthesizer.

        Args:
            rng: Generator to draw from. When None, a new unseeded generator
                 is created for every call.
        """
        self.rng = rng

    def apply(self, image: np.ndarray, spec: NoiseSpec) -> np.ndarray:
        """
        Apply a noise model to an image.

        Args:
            image: RGB or grayscale uint8 image
            spec: Noise model and parameters

        Returns:
            New RGB uint8 image with the same height and width
        """
        rgb = convert_to_rgb(image)
        rng = self.rng if self.rng is not None else np.random.default_rng()

        if spec.type == NoiseType.GAUSSIAN:
            result = self._gaussian(rgb, spec.mean, spec.stddev, rng)
        elif spec.type == NoiseType.SALT_PEPPER:
            result = self._salt_and_pepper(rgb, spec.density, rng)
        elif spec.type == NoiseType.POISSON:
            result = self._poisson(rgb, rng)
        else:
            raise ValueError(f"Unsupported noise type: {spec.type}")

        logger.debug(f"Applied {spec.type.value} noise to {rgb.shape[1]}x{rgb.shape[0]} image")
        return result

    def _gaussian(self, image: np.ndarray, mean: float, stddev: float,
                  rng: np.random.Generator) -> np.ndarray:
        """Add normally distributed noise to every channel."""
        noise = rng.normal(mean, stddev, size=image.shape)
        noisy = image.astype(np.float64) + noise
        return np.clip(noisy, 0, 255).astype(np.uint8)

    def _salt_and_pepper(self, image: np.ndarray, density: float,
                         rng: np.random.Generator) -> np.ndarray:
        """Replace a fraction of pixels with pure white or pure black."""
        draws = rng.random(image.shape[:2])
        salt = draws < density / 2.0
        pepper = ~salt & (draws < density)

        result = image.copy()
        result[salt] = SALT
        result[pepper] = PEPPER
        return result

    def _poisson(self, image: np.ndarray, rng: np.random.Generator) -> np.ndarray:
        """Resample every channel from a Poisson with the channel value as rate."""
        # Zero rate would always return zero
        rates = np.maximum(image.astype(np.float64), 1.0)
        samples = rng.poisson(rates)
        return np.clip(samples, 0, 255).astype(np.uint8)


def apply_noise(image: np.ndarray, spec: NoiseSpec,
                rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """Apply a noise model to an image."""
    return NoiseSynthesizer(rng).apply(image, spec)
