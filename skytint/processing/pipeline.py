"""
SkyTint processing pipeline

Composes the processing stages into a single pass over a frame:
grayscale (optional) -> sky segmentation -> sky color -> compositing ->
tint (optional) -> noise (optional).
"""

import json
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Any, Optional, Tuple
import logging

import numpy as np

from .color import (
    sky_color_for_time, sky_color_for_datetime, convert_to_rgb, to_grayscale,
    validate_image, parse_hex_color, apply_tint
)
from .sky import SegmentationConfig, CompositingConfig, SkySegmenter, SkyCompositor
from .noise import NoiseSpec, NoiseSynthesizer
from ..exceptions import InvalidTintParameter

logger = logging.getLogger(__name__)


@dataclass
class ProcessingRecipe:
    """
    Per-run processing switches.

    Stores every stage's parameters so a run can be repeated or serialized
    to JSON alongside its output.
    """
    # Grayscale
    grayscale: bool = False

    # Sky recoloring
    color_sky: bool = False
    hour: Optional[int] = None  # None reads the clock at processing time
    segmentation: SegmentationConfig = field(default_factory=SegmentationConfig)

    # Tint
    tint_color: Optional[str] = None  # Hex string, e.g. "#ffaa00"
    tint_intensity: float = 0.5

    # Noise
    noise: Optional[NoiseSpec] = None

    def __post_init__(self):
        if self.hour is not None and not 0 <= self.hour <= 23:
            raise ValueError(f"Hour must be in 0-23, got {self.hour}")
        if not 0.0 <= self.tint_intensity <= 1.0:
            raise InvalidTintParameter(
                f"Tint intensity {self.tint_intensity} out of range [0, 1]"
            )
        if self.tint_color is not None:
            # Fail on a bad color before any image is touched
            parse_hex_color(self.tint_color)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'grayscale': self.grayscale,
            'color_sky': self.color_sky,
            'hour': self.hour,
            'segmentation': self.segmentation.to_dict(),
            'tint_color': self.tint_color,
            'tint_intensity': self.tint_intensity,
            'noise': self.noise.to_dict() if self.noise else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProcessingRecipe':
        """Create from dictionary (JSON deserialization)."""
        return cls(
            grayscale=data.get('grayscale', False),
            color_sky=data.get('color_sky', False),
            hour=data.get('hour'),
            segmentation=SegmentationConfig.from_dict(data.get('segmentation') or {}),
            tint_color=data.get('tint_color'),
            tint_intensity=data.get('tint_intensity', 0.5),
            noise=NoiseSpec.from_dict(data.get('noise')),
        )

    def to_json(self) -> str:
        """Serialize recipe to JSON"""
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_json(cls, json_str: str) -> 'ProcessingRecipe':
        """Deserialize recipe from JSON"""
        return cls.from_dict(json.loads(json_str))


class SkyTintPipeline:
    """Runs a processing recipe over a frame."""

    def __init__(self, compositing: Optional[CompositingConfig] = None):
        """
        Initialize pipeline

        Args:
            compositing: Transition settings for the sky blend
        """
        self.compositing = compositing or CompositingConfig()

    def process(self, image: np.ndarray, recipe: ProcessingRecipe,
                rng: Optional[np.random.Generator] = None,
                now: Optional[datetime] = None) -> np.ndarray:
        """
        Process a frame according to a recipe.

        Args:
            image: Grayscale or RGB uint8 image
            recipe: Stage switches and parameters
            rng: Generator for the noise stage; unseeded when None
            now: Timestamp used for the sky color when the recipe has no hour

        Returns:
            New RGB uint8 image with the input's height and width
        """
        start_time = time.time()
        result = convert_to_rgb(validate_image(image))
        height, width = result.shape[:2]

        if recipe.grayscale:
            result = convert_to_rgb(to_grayscale(result))
            logger.debug("Converted frame to grayscale")

        if recipe.color_sky:
            sky_color = self._sky_color(recipe, now)
            mask = SkySegmenter(recipe.segmentation).segment(result)
            result = SkyCompositor(self.compositing).composite(result, mask, sky_color)
            logger.debug(f"Sky covers {mask.mean() * 100:.1f}% of frame")

        if recipe.tint_color:
            result = apply_tint(result, parse_hex_color(recipe.tint_color),
                                recipe.tint_intensity)

        if recipe.noise is not None:
            result = NoiseSynthesizer(rng).apply(result, recipe.noise)

        logger.info(f"Processed {width}x{height} frame in {time.time() - start_time:.2f}s")
        return result

    def _sky_color(self, recipe: ProcessingRecipe,
                   now: Optional[datetime]) -> Tuple[int, int, int]:
        """Pick the sky color for the recipe's hour or the current time."""
        if recipe.hour is not None:
            return sky_color_for_time(recipe.hour)
        return sky_color_for_datetime(now)
