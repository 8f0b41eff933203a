# geometry/world.py
from typing import Iterator, List, Optional
from nextweek.core.aabb import AABB
from nextweek.core.ray import Ray
from nextweek.geometry.hittable import Hittable, HitRecord

class HittableList(Hittable):
    """
    An unordered list of Hittable objects, scanned linearly.

    Use build_bvh() to get an equivalent tree for large scenes.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def build_bvh(self, time0: float = 0.0, time1: float = 1.0, rng=None) -> Hittable:
        """
        Returns a BVH over the current objects, or this list if it is empty.
        The list itself is left untouched.
        """
        if len(self.objects) == 0:
            return self
        from nextweek.geometry.bvh import BVHNode
        return BVHNode.from_list(self, time0, time1, rng)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        box = None
        for obj in self.objects:
            obj_box = obj.bounding_box(time0, time1)
            if obj_box is None:
                return None
            box = obj_box if box is None else AABB.surrounding_box(box, obj_box)
        return box
