# geometry/medium.py
import math
from typing import Optional, Union
from nextweek.core.vector import Color, Vector3
from nextweek.core.ray import Ray
from nextweek.core.aabb import AABB
from nextweek.core.utils import rng
from nextweek.geometry.hittable import Hittable, HitRecord
from nextweek.materials.isotropic import Isotropic
from nextweek.materials.textures import Texture

class ConstantMedium(Hittable):
    """
    Volume of constant density (smoke, fog) filling a boundary shape.

    A ray crossing the medium scatters after an exponentially distributed
    distance. Only the first two intersections with the boundary are used,
    so the boundary must be convex.
    """
    def __init__(self, boundary: Hittable, density: float, albedo: Union[Color, Texture]):
        self.boundary = boundary
        self.density = density
        self.neg_inv_density = -1.0 / density if density > 0 else 0.0
        self.phase_function = Isotropic(albedo)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.density <= 0:
            return None

        rec1 = self.boundary.hit(ray, -math.inf, math.inf)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, rec1.t + 0.0001, math.inf)
        if rec2 is None:
            return None

        t_enter = max(rec1.t, t_min)
        t_exit = min(rec2.t, t_max)
        if t_enter >= t_exit:
            return None
        t_enter = max(t_enter, 0.0)

        ray_length = ray.direction.length()
        distance_inside_boundary = (t_exit - t_enter) * ray_length
        # 1 - random() lies in (0, 1], keeping log() finite.
        hit_distance = self.neg_inv_density * math.log(1.0 - rng().random())
        if hit_distance > distance_inside_boundary:
            return None

        rec = HitRecord()
        rec.t = t_enter + hit_distance / ray_length
        rec.p = ray.at(rec.t)
        rec.normal = Vector3(1.0, 0.0, 0.0)  # arbitrary
        rec.front_face = True
        rec.material = self.phase_function
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.boundary.bounding_box(time0, time1)
