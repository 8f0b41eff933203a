# geometry/hittable.py
from typing import Optional
from nextweek.core.aabb import AABB
from nextweek.core.vector import Vector3
from nextweek.core.ray import Ray

class HitRecord:
    """
    Where and how a ray met a surface, and the material found there.
    """
    __slots__ = ("p", "normal", "t", "front_face", "material", "u", "v")

    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, front_face: bool = True, material = None,
                 u: float = 0.0, v: float = 0.0):
        self.p = p              # World-space hit point
        self.normal = normal    # Surface normal, always against the ray
        self.t = t              # Distance along the ray
        self.front_face = front_face  # Ray arrived from the outside
        self.material = material
        self.u = u              # Surface texture coordinates
        self.v = v

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Stores the normal flipped to face the incoming ray and records
        which side was hit.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

class Hittable:
    """
    Anything a ray can intersect, from a single primitive to a whole BVH.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError(f"{type(self).__name__} does not implement hit()")

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        """
        Box enclosing the object over the time interval [time0, time1], or
        None if the object is unbounded.
        """
        raise NotImplementedError(f"{type(self).__name__} does not implement bounding_box()")

    def translate(self, offset: Vector3) -> "Hittable":
        from nextweek.geometry.transform import Translate
        return Translate(self, offset)

    def rotate_y(self, degrees: float) -> "Hittable":
        from nextweek.geometry.transform import RotateY
        return RotateY(self, degrees)
