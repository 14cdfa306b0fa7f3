"""
SkyTint: time-of-day sky recoloring and noise synthesis for still frames

Segments the sky in a frame, recolors it with a hue chosen from the hour of
the day, and optionally injects statistical noise.
"""

__version__ = "0.1.0"

from .config import load_config
from .exceptions import (
    SkyTintError,
    InvalidDimensions,
    InvalidNoiseParameter,
    InvalidColorEncoding,
)
from .processing.color import sky_color_for_time, convert_to_rgb
from .processing.sky import segment_sky, composite
from .processing.noise import NoiseSpec, NoiseType, apply_noise
from .processing import SkyTintPipeline, ProcessingRecipe

__all__ = [
    "load_config",
    "SkyTintError",
    "InvalidDimensions",
    "InvalidNoiseParameter",
    "InvalidColorEncoding",
    "sky_color_for_time",
    "convert_to_rgb",
    "segment_sky",
    "composite",
    "NoiseSpec",
    "NoiseType",
    "apply_noise",
    "SkyTintPipeline",
    "ProcessingRecipe",
]
