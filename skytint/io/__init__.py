"""
Image file I/O for SkyTint.
"""

from .images import load_image, save_image, is_image_file

__all__ = ['load_image', 'save_image', 'is_image_file']
