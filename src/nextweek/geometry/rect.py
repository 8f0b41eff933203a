# geometry/rect.py
from typing import Optional
from nextweek.core.vector import Vector3
from nextweek.core.ray import Ray
from nextweek.core.aabb import AABB
from nextweek.geometry.hittable import Hittable, HitRecord

# Half thickness given to the flat axis of a rectangle's bounding box.
PADDING = 0.0001

class Plane:
    """
    Names the two in-plane axes (a, b) and the constant axis k of an
    axis-aligned rectangle.
    """
    __slots__ = ("name", "a", "b", "k")

    def __init__(self, name: str, a: int, b: int, k: int):
        self.name = name
        self.a = a
        self.b = b
        self.k = k

    def point(self, a: float, b: float, k: float) -> Vector3:
        coords = [0.0, 0.0, 0.0]
        coords[self.a] = a
        coords[self.b] = b
        coords[self.k] = k
        return Vector3(*coords)

    def __reduce__(self):
        return (_plane_by_name, (self.name,))

    def __repr__(self) -> str:
        return self.name

XY = Plane("XY", 0, 1, 2)
XZ = Plane("XZ", 0, 2, 1)
YZ = Plane("YZ", 1, 2, 0)

def _plane_by_name(name: str) -> Plane:
    return {"XY": XY, "XZ": XZ, "YZ": YZ}[name]

class AARect(Hittable):
    """
    Rectangle lying in the plane `k` on the constant axis of `plane`,
    spanning [a0, a1] x [b0, b1] on the two in-plane axes.
    """
    def __init__(self, plane: Plane, a0: float, a1: float,
                 b0: float, b1: float, k: float, material):
        self.plane = plane
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material
        self.normal = plane.point(0.0, 0.0, 1.0)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        plane = self.plane
        origin = ray.origin
        direction = ray.direction
        dk = direction[plane.k]
        if dk == 0.0:
            # Parallel to the plane.
            return None
        t = (self.k - origin[plane.k]) / dk
        if t < t_min or t > t_max:
            return None
        a = origin[plane.a] + t * direction[plane.a]
        b = origin[plane.b] + t * direction[plane.b]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        rec = HitRecord()
        rec.u = (a - self.a0) / (self.a1 - self.a0)
        rec.v = (b - self.b0) / (self.b1 - self.b0)
        rec.t = t
        rec.set_face_normal(ray, self.normal)
        rec.material = self.material
        rec.p = ray.at(t)
        return rec

    def bounding_box(self, time0: float, time1: float) -> AABB:
        return AABB(self.plane.point(self.a0, self.b0, self.k - PADDING),
                    self.plane.point(self.a1, self.b1, self.k + PADDING))

def XYRect(x0: float, x1: float, y0: float, y1: float, k: float, material) -> AARect:
    return AARect(XY, x0, x1, y0, y1, k, material)

def XZRect(x0: float, x1: float, z0: float, z1: float, k: float, material) -> AARect:
    return AARect(XZ, x0, x1, z0, z1, k, material)

def YZRect(y0: float, y1: float, z0: float, z1: float, k: float, material) -> AARect:
    return AARect(YZ, y0, y1, z0, z1, k, material)
