# materials/diffuse_light.py
from typing import Optional, Tuple, Union
from nextweek.core.ray import Ray
from nextweek.core.vector import Color, Vector3
from nextweek.geometry.hittable import HitRecord
from nextweek.materials.material import Material
from nextweek.materials.textures import Texture, as_texture

class DiffuseLight(Material):
    """
    Area light. Both faces emit the texture's color and every path that
    reaches it ends there.
    """
    def __init__(self, emit: Union[Color, Texture]):
        self.texture = as_texture(emit)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Tuple[Ray, Color]]:
        return None

    def emitted(self, u: float, v: float, p: Vector3) -> Color:
        """
        Args:
            u (float): Surface coordinate across the light.
            v (float): Surface coordinate along the light.
            p (Vector3): World-space point on the light.

        Returns:
            Color: Radiance leaving the surface, which may exceed 1.
        """
        return self.texture.value(u, v, p)
