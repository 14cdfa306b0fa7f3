"""
Channel conversions and image validation shared by the processing stages.
"""

import numpy as np
import cv2

from ...exceptions import InvalidDimensions

# Rec. 709 luma weights, as a 1x3 transform over RGB channels
LUMA_WEIGHTS = np.array([[0.2126, 0.7152, 0.0722]], dtype=np.float32)


def validate_image(image: np.ndarray) -> np.ndarray:
    """
    Check that an array is a usable 8-bit grayscale or RGB image.

    Args:
        image: (H, W) or (H, W, 3) array

    Returns:
        The image as a uint8 array (not copied when already uint8)

    Raises:
        InvalidDimensions: if the image is empty or has an unsupported shape
    """
    image = np.asarray(image)
    if image.ndim not in (2, 3) or (image.ndim == 3 and image.shape[2] != 3):
        raise InvalidDimensions(f"Unsupported image shape {image.shape}")
    if image.shape[0] == 0 or image.shape[1] == 0:
        raise InvalidDimensions(f"Image has zero size: {image.shape[1]}x{image.shape[0]}")

    if image.dtype != np.uint8:
        if np.issubdtype(image.dtype, np.floating) and image.max() <= 1.0:
            image = image * 255.0
        image = np.clip(np.rint(image), 0, 255).astype(np.uint8)
    return image


def convert_to_rgb(image: np.ndarray) -> np.ndarray:
    """Expand a grayscale image to three identical channels."""
    image = validate_image(image)
    if image.ndim == 3:
        return image.copy()
    return np.repeat(image[:, :, np.newaxis], 3, axis=2)


def to_grayscale(image: np.ndarray) -> np.ndarray:
    """Convert an RGB image to single-channel Rec. 709 luma."""
    image = validate_image(image)
    if image.ndim == 2:
        return image.copy()
    gray = cv2.transform(np.ascontiguousarray(image), LUMA_WEIGHTS)
    return gray.reshape(image.shape[:2])
