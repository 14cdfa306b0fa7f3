"""
Time-of-day sky color schedule for SkyTint

Maps the hour of the day to the muted, slightly desaturated sky hue used
when recoloring the segmented sky region.
"""

from datetime import datetime
from typing import Optional, Tuple
import logging

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]

NIGHT_COLOR: RGB = (40, 45, 70)          # Muted dark blue
TWILIGHT_BASE: RGB = (70, 80, 120)       # Blue-grey before the glow
TWILIGHT_GLOW: RGB = (205, 140, 110)     # Warm amber
MORNING_COLOR: RGB = (170, 190, 215)     # Soft light blue
MIDDAY_COLOR: RGB = (180, 200, 220)      # Muted sky blue


def _interpolate(intensity: float) -> RGB:
    """Blend from the twilight base toward the amber glow."""
    return tuple(
        int(glow * intensity + base * (1.0 - intensity))
        for glow, base in zip(TWILIGHT_GLOW, TWILIGHT_BASE)
    )


def sky_color_for_time(hour: int) -> RGB:
    """
    Get the target sky color for an hour of the day.

    Hour bands are inclusive. Only dawn (5-6) and dusk (18-21) interpolate;
    any hour outside the named bands falls back to the midday color.

    Args:
        hour: Hour of day in local time (0-23)

    Returns:
        (r, g, b) tuple in 0-255
    """
    if 22 <= hour <= 23 or 0 <= hour <= 4:
        return NIGHT_COLOR

    if 5 <= hour <= 6:
        # Dawn: glow increases
        return _interpolate((hour - 5) / 2.0)

    if 18 <= hour <= 21:
        # Dusk: glow fades out
        return _interpolate((22 - hour) / 4.0)

    if 7 <= hour <= 9:
        return MORNING_COLOR

    return MIDDAY_COLOR


def sky_color_for_datetime(when: Optional[datetime] = None) -> RGB:
    """Get the sky color for a timestamp, defaulting to the local clock."""
    if when is None:
        when = datetime.now()
    color = sky_color_for_time(when.hour)
    logger.debug(f"Sky color for {when:%H:%M}: {color}")
    return color
