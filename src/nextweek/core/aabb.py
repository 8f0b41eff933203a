# core/aabb.py
import math
from nextweek.core.vector import Vector3

class AABB:
    __slots__ = ("minimum", "maximum")

    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    @classmethod
    def empty(cls) -> "AABB":
        """Zero-sized box at the origin, used in place of a missing bound."""
        return cls(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 0.0))

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Narrow [t_min, t_max] to the overlap with each pair of slabs.
        for a in ('x', 'y', 'z'):
            d = getattr(ray.direction, a)
            # Keep the sign of a zero component, like IEEE-754 division would.
            invD = 1.0 / d if d != 0.0 else math.copysign(math.inf, d)
            origin = getattr(ray.origin, a)
            t0 = (getattr(self.minimum, a) - origin) * invD
            t1 = (getattr(self.maximum, a) - origin) * invD
            if invD < 0:
                t0, t1 = t1, t0
            # A NaN slab distance (0 * inf) leaves the interval unchanged.
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def surrounding(self, other: "AABB") -> "AABB":
        return AABB.surrounding_box(self, other)

    def contains(self, other: "AABB") -> bool:
        return all(
            self.minimum[i] <= other.minimum[i] and other.maximum[i] <= self.maximum[i]
            for i in range(3)
        )

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        return AABB(Vector3(*map(min, box0.minimum, box1.minimum)),
                    Vector3(*map(max, box0.maximum, box1.maximum)))

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"
