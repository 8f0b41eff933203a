# geometry/bvh.py
import logging
import random
from typing import List, Optional
from nextweek.core.aabb import AABB
from nextweek.core.ray import Ray
from nextweek.core import utils
from nextweek.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

def _box_or_empty(obj: Hittable, time0: float, time1: float) -> AABB:
    box = obj.bounding_box(time0, time1)
    if box is None:
        logger.warning("No bounding box for %r in BVHNode constructor", obj)
        return AABB.empty()
    return box

class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy over a set of hittables.

    The tree is built by sorting the index range [start, end) of a single
    working list along a random axis and splitting it at the midpoint.
    Leaves hold one object on both sides so traversal never has to check
    for a missing child. Interior boxes cover [time0, time1], which keeps
    moving spheres inside their node for the whole shutter interval.
    """
    def __init__(self, objects: List[Hittable], start: int, end: int,
                 time0: float = 0.0, time1: float = 1.0,
                 rng: Optional[random.Random] = None):
        if end <= start:
            raise ValueError("BVHNode needs at least one object")
        if rng is None:
            rng = utils.rng()
        axis = rng.randrange(3)

        def key(obj: Hittable) -> float:
            return _box_or_empty(obj, time0, time0).minimum[axis]

        object_span = end - start
        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            if key(objects[start]) < key(objects[start + 1]):
                self.left = objects[start]
                self.right = objects[start + 1]
            else:
                self.left = objects[start + 1]
                self.right = objects[start]
        else:
            objects[start:end] = sorted(objects[start:end], key=key)
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, time0, time1, rng)
            self.right = BVHNode(objects, mid, end, time0, time1, rng)

        self.box = AABB.surrounding_box(_box_or_empty(self.left, time0, time1),
                                        _box_or_empty(self.right, time0, time1))

    @classmethod
    def from_list(cls, hittable_list, time0: float = 0.0, time1: float = 1.0,
                  rng: Optional[random.Random] = None) -> "BVHNode":
        objects = list(hittable_list.objects)
        return cls(objects, 0, len(objects), time0, time1, rng)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)

        # Update t_max for right branch if we hit something on the left
        if hit_left is not None:
            t_max = hit_left.t

        hit_right = self.right.hit(ray, t_min, t_max)

        # The right probe ran with the tighter bound, so a right hit is closer.
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self, time0: float, time1: float) -> AABB:
        return self.box
