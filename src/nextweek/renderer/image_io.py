# renderer/image_io.py
import logging
import os
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

def save_image(pixels: np.ndarray, path: str) -> None:
    """
    Write an (height, width, 4) uint8 RGBA buffer to `path`. The format is
    chosen from the file extension; formats without alpha get RGB.
    """
    image = Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))
    if os.path.splitext(path)[1].lower() in (".ppm", ".jpg", ".jpeg", ".bmp"):
        image = image.convert("RGB")
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    image.save(path)
    logger.info("Saved %dx%d image to %s", pixels.shape[1], pixels.shape[0], path)
