# geometry/transform.py
import logging
import math
from typing import Optional
from nextweek.core.vector import Vector3
from nextweek.core.ray import Ray
from nextweek.core.aabb import AABB
from nextweek.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

class Translate(Hittable):
    """
    Moves the wrapped object by `offset`. Rays are moved into object space
    instead of moving the geometry.
    """
    def __init__(self, obj: Hittable, offset: Vector3):
        self.obj = obj
        self.offset = offset

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        moved = Ray(ray.origin - self.offset, ray.direction, ray.time)
        rec = self.obj.hit(moved, t_min, t_max)
        if rec is None:
            return None
        rec.p = rec.p + self.offset
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        box = self.obj.bounding_box(time0, time1)
        if box is None:
            return None
        return AABB(box.minimum + self.offset, box.maximum + self.offset)

class RotateY(Hittable):
    """
    Rotates the wrapped object by `degrees` around the Y axis.

    The bounding box is the axis-aligned box around the eight rotated
    corners of the child's box over the time interval [0, 1]. It is looser
    than the tightest box but always encloses the object.
    """
    def __init__(self, obj: Hittable, degrees: float):
        self.obj = obj
        radians = math.radians(degrees)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)
        self.box = self._rotated_box(obj.bounding_box(0.0, 1.0))

    def _rotated_box(self, box: Optional[AABB]) -> Optional[AABB]:
        if box is None:
            logger.warning("RotateY: %r has no bounding box", self.obj)
            return None
        lo = [math.inf, math.inf, math.inf]
        hi = [-math.inf, -math.inf, -math.inf]
        for i in (0, 1):
            for j in (0, 1):
                for k in (0, 1):
                    x = box.maximum.x if i else box.minimum.x
                    y = box.maximum.y if j else box.minimum.y
                    z = box.maximum.z if k else box.minimum.z
                    corner = (self.cos_theta * x + self.sin_theta * z,
                              y,
                              -self.sin_theta * x + self.cos_theta * z)
                    for c in range(3):
                        lo[c] = min(lo[c], corner[c])
                        hi[c] = max(hi[c], corner[c])
        return AABB(Vector3(*lo), Vector3(*hi))

    def _to_object(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x - self.sin_theta * v.z,
                       v.y,
                       self.sin_theta * v.x + self.cos_theta * v.z)

    def _to_world(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x + self.sin_theta * v.z,
                       v.y,
                       -self.sin_theta * v.x + self.cos_theta * v.z)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        rotated = Ray(self._to_object(ray.origin), self._to_object(ray.direction), ray.time)
        rec = self.obj.hit(rotated, t_min, t_max)
        if rec is None:
            return None
        # Rotation preserves the angle between normal and ray, so the
        # child's front_face still holds.
        rec.p = self._to_world(rec.p)
        rec.normal = self._to_world(rec.normal)
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.box
