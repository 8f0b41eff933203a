# geometry/box.py
from typing import Optional
from nextweek.core.vector import Vector3
from nextweek.core.ray import Ray
from nextweek.core.aabb import AABB
from nextweek.geometry.hittable import Hittable, HitRecord
from nextweek.geometry.rect import XYRect, XZRect, YZRect
from nextweek.geometry.world import HittableList

class Box(Hittable):
    """
    Axis-aligned box built from six rectangles sharing one material.
    """
    def __init__(self, p0: Vector3, p1: Vector3, material):
        self.box_min = p0
        self.box_max = p1
        self.sides = HittableList()
        self.sides.add(XYRect(p0.x, p1.x, p0.y, p1.y, p1.z, material))
        self.sides.add(XYRect(p0.x, p1.x, p0.y, p1.y, p0.z, material))
        self.sides.add(XZRect(p0.x, p1.x, p0.z, p1.z, p1.y, material))
        self.sides.add(XZRect(p0.x, p1.x, p0.z, p1.z, p0.y, material))
        self.sides.add(YZRect(p0.y, p1.y, p0.z, p1.z, p1.x, material))
        self.sides.add(YZRect(p0.y, p1.y, p0.z, p1.z, p0.x, material))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self.sides.hit(ray, t_min, t_max)

    def bounding_box(self, time0: float, time1: float) -> AABB:
        return AABB(self.box_min, self.box_max)
