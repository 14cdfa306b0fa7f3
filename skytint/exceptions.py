"""
Exception types raised by the SkyTint processing core.
"""


class SkyTintError(Exception):
    """Base exception for SkyTint operations."""
    pass


class InvalidDimensions(SkyTintError, ValueError):
    """Raised when an image or mask has an unusable shape."""
    pass


class InvalidNoiseParameter(SkyTintError, ValueError):
    """Raised when a noise model is configured with out-of-range values."""
    pass


class InvalidColorEncoding(SkyTintError, ValueError):
    """Raised when a color string cannot be parsed."""
    pass


class InvalidTintParameter(SkyTintError, ValueError):
    """Raised when a tint intensity is outside [0, 1]."""
    pass


class ImageLoadError(SkyTintError):
    """Raised when an image file cannot be read."""
    pass


class ImageSaveError(SkyTintError):
    """Raised when an image file cannot be written."""
    pass
