# materials/isotropic.py
from typing import Tuple, Union
from nextweek.core.ray import Ray
from nextweek.core.vector import Color
from nextweek.core.utils import random_in_unit_sphere
from nextweek.geometry.hittable import HitRecord
from nextweek.materials.material import Material
from nextweek.materials.textures import Texture, as_texture

class Isotropic(Material):
    """
    Phase function of a participating medium: scatters uniformly in any
    direction, not only the hemisphere around the normal.
    """
    def __init__(self, albedo: Union[Color, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Tuple[Ray, Color]:
        scattered = Ray(rec.p, random_in_unit_sphere(), ray_in.time)
        return scattered, self.texture.value(rec.u, rec.v, rec.p)
