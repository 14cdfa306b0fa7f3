"""
Sky module for SkyTint

Segments the sky region of a frame and recolors it with a soft transition.
"""

from .models import SegmentationConfig, SegmentationStrategy, CompositingConfig
from .segmenter import (
    SkySegmenter,
    segment_sky,
    sky_boundary,
    median_smooth,
    smooth_sky_boundary,
)
from .compositor import SkyCompositor, composite, transition_field

__all__ = [
    'SegmentationConfig',
    'SegmentationStrategy',
    'CompositingConfig',
    'SkySegmenter',
    'segment_sky',
    'sky_boundary',
    'median_smooth',
    'smooth_sky_boundary',
    'SkyCompositor',
    'composite',
    'transition_field',
]
