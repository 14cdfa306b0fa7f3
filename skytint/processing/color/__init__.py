"""
Color modules for SkyTint

Includes the time-of-day sky color schedule, channel conversions and tinting.
"""

from .schedule import sky_color_for_time, sky_color_for_datetime
from .conversion import convert_to_rgb, to_grayscale, validate_image
from .tint import parse_hex_color, apply_tint

__all__ = [
    "sky_color_for_time",
    "sky_color_for_datetime",
    "convert_to_rgb",
    "to_grayscale",
    "validate_image",
    "parse_hex_color",
    "apply_tint",
]
