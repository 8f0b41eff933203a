# materials/material.py
from typing import Optional, Tuple
from nextweek.core.ray import Ray
from nextweek.core.vector import Color, Vector3
from nextweek.geometry.hittable import HitRecord

BLACK = Color(0.0, 0.0, 0.0)

class Material:
    """
    Surface response to an incoming ray. scatter() is required; only light
    sources override emitted().
    """
    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Tuple[Ray, Color]]:
        """
        Returns (scattered_ray, attenuation), or None when the ray is absorbed.
        """
        raise NotImplementedError(f"{type(self).__name__} does not implement scatter()")

    def emitted(self, u: float, v: float, p: Vector3) -> Color:
        return BLACK
