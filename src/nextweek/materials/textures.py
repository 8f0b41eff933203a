# materials/textures.py
import math
from typing import Optional, Union
import numpy as np
from nextweek.core.vector import Color, Vector3
from nextweek.materials.perlin import Perlin
from nextweek.materials.texture_loader import load_texture_image

# Returned by ImageTexture when its image could not be loaded.
MISSING_TEXTURE_COLOR = Color(0.0, 1.0, 1.0)

class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Vector3) -> Color:
        """Sample the texture at surface coordinates (u, v) and point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Color:
        return self.color

def as_texture(albedo: Union[Color, Texture]) -> Texture:
    """Wrap a plain color in a SolidTexture; textures pass through."""
    if isinstance(albedo, Color):
        return SolidTexture(albedo)
    return albedo

class CheckerTexture(Texture):
    """
    A 3D checker pattern: the sign of sin(s*x) * sin(s*y) * sin(s*z)
    picks between the two textures.
    """
    def __init__(self, odd: Union[Color, Texture], even: Union[Color, Texture], scale: float = 10.0):
        self.odd = as_texture(odd)
        self.even = as_texture(even)
        self.scale = scale

    def value(self, u: float, v: float, p: Vector3) -> Color:
        s = self.scale
        sines = math.sin(s * p.x) * math.sin(s * p.y) * math.sin(s * p.z)
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)

class NoiseTexture(Texture):
    """Marble-like grey pattern: a sine along Z phase-shifted by turbulence."""
    def __init__(self, scale: float = 1.0, perlin: Optional[Perlin] = None):
        self.scale = scale
        self.noise = perlin if perlin is not None else Perlin()

    def value(self, u: float, v: float, p: Vector3) -> Color:
        return Color(1.0, 1.0, 1.0) * (
            0.5 * (1.0 + math.sin(self.scale * p.z + 10.0 * self.noise.turbulence(p))))

class ImageTexture(Texture):
    """A texture from an image file, sampled at the nearest pixel."""
    def __init__(self, image_path: str):
        self.image_path = image_path
        pixels = load_texture_image(image_path)
        if pixels is None:
            self.data = None
            self.width = 0
            self.height = 0
        else:
            # Drop alpha and normalize to [0,1]
            self.data = pixels[:, :, :3].astype(np.float64) / 255.0
            self.height, self.width = self.data.shape[:2]

    def value(self, u: float, v: float, p: Vector3) -> Color:
        if self.data is None:
            return MISSING_TEXTURE_COLOR

        u = min(max(u, 0.0), 1.0)
        # Flip V to image coordinates
        v = 1.0 - min(max(v, 0.0), 1.0)

        # The coordinates should be < 1.0, clamp the integer mapping anyway
        i = min(int(u * self.width), self.width - 1)
        j = min(int(v * self.height), self.height - 1)

        r, g, b = self.data[j, i]
        return Color(float(r), float(g), float(b))
