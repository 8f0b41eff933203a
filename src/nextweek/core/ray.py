# core/ray.py
from nextweek.core.vector import Vector3

class Ray:
    """
    Represents a ray in 3D space with an origin, a direction and the
    shutter time at which it was emitted (used for motion blur).
    """
    __slots__ = ("origin", "direction", "time")

    def __init__(self, origin: Vector3, direction: Vector3, time: float = 0.0):
        self.origin = origin
        self.direction = direction
        self.time = time

    def at(self, t: float) -> Vector3:
        """
        Position reached after travelling t direction-lengths from the origin.
        """
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r}, time={self.time})"
