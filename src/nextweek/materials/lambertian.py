# materials/lambertian.py
from typing import Tuple, Union
from nextweek.core.ray import Ray
from nextweek.core.vector import Color
from nextweek.core.utils import random_in_unit_sphere
from nextweek.geometry.hittable import HitRecord
from nextweek.materials.material import Material
from nextweek.materials.textures import Texture, as_texture

class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Color, Texture]):
        # Store either a solid color or a texture.
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Tuple[Ray, Color]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Returns (scattered_ray, attenuation).
        """
        # Pick a random scatter direction by adding a random point in the
        # unit sphere to the normal.
        scatter_direction = rec.normal + random_in_unit_sphere()

        # If scatter_direction is degenerate, just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        scattered = Ray(rec.p, scatter_direction, ray_in.time)
        attenuation = self.texture.value(rec.u, rec.v, rec.p)
        return scattered, attenuation
