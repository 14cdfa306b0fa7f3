"""
Image file reading and writing for SkyTint
Decodes files into uint8 numpy arrays and encodes results back to disk
"""

from pathlib import Path
from typing import Union
import logging

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..exceptions import ImageLoadError, ImageSaveError
from ..processing.color.conversion import validate_image

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = {'.jpg', '.jpeg', '.png', '.bmp', '.tif', '.tiff', '.webp'}


def load_image(file_path: Union[str, Path], mode: str = "RGB") -> np.ndarray:
    """
    Load an image file as a uint8 array

    Args:
        file_path: Path to image file
        mode: Pillow mode to convert to ("RGB" or "L")

    Returns:
        (H, W, 3) array for RGB, (H, W) array for L

    Raises:
        ImageLoadError: if the file is missing or not a decodable image
    """
    file_path = Path(file_path)
    try:
        with Image.open(file_path) as img:
            array = np.array(img.convert(mode), dtype=np.uint8)
    except (OSError, UnidentifiedImageError) as e:
        raise ImageLoadError(f"Cannot read image {file_path}: {e}") from e

    logger.debug(f"Loaded {file_path.name}: {array.shape[1]}x{array.shape[0]} {mode}")
    return array


def save_image(image: np.ndarray, file_path: Union[str, Path], quality: int = 95) -> Path:
    """
    Save a uint8 array to an image file

    The format follows the file extension. JPEG output uses `quality`.

    Returns:
        The path written

    Raises:
        ImageSaveError: if the format is unknown or the file cannot be written
    """
    file_path = Path(file_path)
    image = validate_image(image)
    pil_image = Image.fromarray(image)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        if file_path.suffix.lower() in ('.jpg', '.jpeg'):
            pil_image.save(file_path, quality=quality)
        else:
            pil_image.save(file_path)
    except (ValueError, OSError) as e:
        raise ImageSaveError(f"Cannot write image {file_path}: {e}") from e

    logger.debug(f"Saved {file_path}")
    return file_path


def is_image_file(file_path: Union[str, Path]) -> bool:
    """Check whether a path has a supported image extension"""
    return Path(file_path).suffix.lower() in IMAGE_EXTENSIONS
