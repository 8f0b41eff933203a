# materials/texture_loader.py
import logging
import os
from typing import Optional
from PIL import Image, UnidentifiedImageError
import numpy as np

logger = logging.getLogger(__name__)

def load_texture_image(image_path: str) -> Optional[np.ndarray]:
    """
    Load an image file as an RGBA texture, with automatic format conversion.

    Args:
        image_path: Path to the image file

    Returns:
        (height, width, 4) uint8 array, or None when the file is missing or
        cannot be decoded. Callers fall back to a sentinel color.
    """
    if not os.path.exists(image_path):
        logger.warning("Texture file not found: %s", image_path)
        return None

    try:
        with Image.open(image_path) as img:
            if img.mode != 'RGBA':
                img = img.convert('RGBA')
            return np.asarray(img, dtype=np.uint8).copy()
    except (OSError, UnidentifiedImageError) as e:
        logger.warning("Error loading texture %s: %s", image_path, e)
        return None
