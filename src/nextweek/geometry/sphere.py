# geometry/sphere.py
import math
from typing import Optional, Tuple
from nextweek.core.vector import Vector3
from nextweek.core.ray import Ray
from nextweek.geometry.hittable import Hittable, HitRecord
from nextweek.core.aabb import AABB

def get_sphere_uv(p: Vector3) -> Tuple[float, float]:
    """
    Maps a point on the unit sphere to (u, v) texture coordinates.

    u is the angle around the Y axis from X=-1, v the angle from Y=-1 to
    Y=+1, both normalized to [0, 1].
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return phi / (2 * math.pi), theta / math.pi

def _solve(ray: Ray, center: Vector3, radius: float, t_min: float, t_max: float) -> Optional[float]:
    oc = ray.origin - center
    a = ray.direction.dot(ray.direction)
    half_b = oc.dot(ray.direction)
    c = oc.dot(oc) - radius * radius
    discriminant = half_b * half_b - a * c

    if discriminant < 0:
        return None

    sqrt_disc = math.sqrt(discriminant)
    # Find the nearest root that lies in the acceptable range
    root = (-half_b - sqrt_disc) / a
    if root < t_min or root > t_max:
        root = (-half_b + sqrt_disc) / a
        if root < t_min or root > t_max:
            return None
    return root

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    A negative radius keeps the same surface but flips the normal inward,
    which is how a hollow glass ball is made from two concentric spheres.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        root = _solve(ray, self.center, self.radius, t_min, t_max)
        if root is None:
            return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - self.center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.u, rec.v = get_sphere_uv(outward_normal)
        rec.material = self.material
        return rec

    def bounding_box(self, time0: float, time1: float) -> AABB:
        # The bounding box of a sphere is center ± radius
        offset = Vector3.repeat(abs(self.radius))
        return AABB(self.center - offset, self.center + offset)

class MovingSphere(Hittable):
    """
    A sphere whose center moves linearly from center0 at time0 to center1
    at time1.
    """
    def __init__(self, center0: Vector3, center1: Vector3,
                 time0: float, time1: float, radius: float, material):
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.material = material

    def center(self, time: float) -> Vector3:
        if self.time1 == self.time0:
            return self.center0
        return self.center0 + (self.center1 - self.center0) * (
            (time - self.time0) / (self.time1 - self.time0))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        center = self.center(ray.time)
        root = _solve(ray, center, self.radius, t_min, t_max)
        if root is None:
            return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.u, rec.v = get_sphere_uv(outward_normal)
        rec.material = self.material
        return rec

    def bounding_box(self, time0: float, time1: float) -> AABB:
        # Linear motion: the boxes at both ends bound the whole sweep.
        offset = Vector3.repeat(abs(self.radius))
        c0 = self.center(time0)
        c1 = self.center(time1)
        return AABB.surrounding_box(AABB(c0 - offset, c0 + offset),
                                    AABB(c1 - offset, c1 + offset))
