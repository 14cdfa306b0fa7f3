"""
Data models for sky segmentation and compositing.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any
from enum import Enum


class SegmentationStrategy(Enum):
    """Available sky segmentation strategies."""
    REGION_GROWING = "region_growing"    # Seeded growth from the top row
    PROBABILISTIC = "probabilistic"      # Scored pixels with hysteresis


@dataclass
class SegmentationConfig:
    """
    Parameters for sky segmentation.

    Intensity thresholds are on the 0-255 grayscale range, hysteresis
    thresholds on the 0-1 sky score.
    """
    strategy: SegmentationStrategy = SegmentationStrategy.REGION_GROWING

    # Region growing
    seed_threshold: int = 120        # Row-0 pixels brighter than this seed growth
    grow_threshold: int = 100        # Neighbors must be brighter than this
    similarity_threshold: int = 15   # Max intensity step between neighbors (exclusive)

    # Boundary smoothing
    smoothing_window: int = 7        # Columns in the median window

    # Probabilistic scoring
    high_threshold: float = 0.6
    low_threshold: float = 0.4
    blue_weight: float = 0.4
    brightness_weight: float = 0.3
    position_weight: float = 0.3

    def __post_init__(self):
        if isinstance(self.strategy, str):
            self.strategy = SegmentationStrategy(self.strategy)
        if self.smoothing_window < 1 or self.smoothing_window % 2 == 0:
            raise ValueError(f"Smoothing window must be a positive odd number, got {self.smoothing_window}")
        if not 0.0 <= self.low_threshold <= self.high_threshold <= 1.0:
            raise ValueError(
                f"Hysteresis thresholds must satisfy 0 <= low <= high <= 1, "
                f"got low={self.low_threshold}, high={self.high_threshold}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        result = asdict(self)
        result['strategy'] = self.strategy.value
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SegmentationConfig':
        """Create from dictionary, ignoring unknown keys."""
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> 'SegmentationConfig':
        """Build from the 'segmentation' section of a loaded config."""
        return cls.from_dict(config.get('segmentation') or {})


@dataclass
class CompositingConfig:
    """Parameters for blending the sky color into the image."""
    transition_width: int = 5   # Rows below the boundary that fade out

    def __post_init__(self):
        if self.transition_width < 1:
            raise ValueError(f"Transition width must be positive, got {self.transition_width}")

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> 'CompositingConfig':
        section = config.get('compositing') or {}
        return cls(transition_width=section.get('transition_width', 5))
