# materials/dielectric.py
import math
from typing import Tuple
from nextweek.core.ray import Ray
from nextweek.core.vector import Color
from nextweek.core.utils import reflect, refract, schlick, rng
from nextweek.geometry.hittable import HitRecord
from nextweek.materials.material import Material

class Dielectric(Material):
    """
    Clear refractive material (glass, water). Never absorbs.
    """
    def __init__(self, ref_idx: float):
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Tuple[Ray, Color]:
        attenuation = Color(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        ni_over_nt = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()

        # Calculate cosine using the angle between incoming ray and normal
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        # Total internal reflection, or a Fresnel-weighted reflection
        if ni_over_nt * sin_theta > 1.0 or schlick(cos_theta, ni_over_nt) > rng().random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ni_over_nt)
            if direction is None:
                direction = reflect(unit_direction, rec.normal)

        return Ray(rec.p, direction, ray_in.time), attenuation
