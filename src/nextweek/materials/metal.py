# materials/metal.py
from typing import Optional, Tuple, Union
from nextweek.core.ray import Ray
from nextweek.core.vector import Color
from nextweek.core.utils import reflect, random_in_unit_sphere
from nextweek.geometry.hittable import HitRecord
from nextweek.materials.material import Material
from nextweek.materials.textures import Texture, as_texture

class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.
    """
    def __init__(self, albedo: Union[Color, Texture], fuzz: float = 0.0):
        self.texture = as_texture(albedo)
        self.fuzz = min(max(fuzz, 0.0), 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Tuple[Ray, Color]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        scattered = Ray(rec.p, reflected + random_in_unit_sphere() * self.fuzz, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            return scattered, self.texture.value(rec.u, rec.v, rec.p)

        return None  # Absorb the ray if it does not scatter forward
