# renderer/tone_mapping.py
import math
from typing import Tuple
import numpy as np
from nextweek.core.vector import Color

def to_rgba(color: Color) -> Tuple[int, int, int, int]:
    """
    Gamma-2 correct a linear color and quantize it to opaque 8-bit RGBA.

    Channels are clamped to 0.999 before scaling so 1.0 maps to 255, not 256.
    """
    return (_channel(color.x), _channel(color.y), _channel(color.z), 255)

def _channel(value: float) -> int:
    value = math.sqrt(value) if value > 0.0 else 0.0
    return int(min(value, 0.999) * 256)

def tone_map(linear: np.ndarray) -> np.ndarray:
    """
    Vectorized to_rgba over a (..., 3) array of linear colors.
    """
    mapped = np.sqrt(np.clip(linear, 0.0, None))
    mapped = (np.clip(mapped, 0.0, 0.999) * 256).astype(np.uint8)
    alpha = np.full(mapped.shape[:-1] + (1,), 255, dtype=np.uint8)
    return np.concatenate([mapped, alpha], axis=-1)
