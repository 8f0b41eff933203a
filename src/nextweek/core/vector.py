# core/vector.py
import math
from typing import Iterator, TypeVar, Union

V = TypeVar("V", bound="Vec3")


class Vec3:
    """
    A 3D vector supporting arithmetic, dot and cross products,
    and normalization.

    Concrete vectors are either a Vector3 (positions and directions) or a
    Color. Arithmetic only combines vectors of the same kind: the operators
    return NotImplemented for the other kind, so mixing them raises
    TypeError and is rejected by a type checker through the self-typed
    signatures.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = x
        self.y = y
        self.z = z

    @classmethod
    def repeat(cls: type[V], value: float) -> V:
        return cls(value, value, value)

    def __add__(self: V, other: V) -> V:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self.__class__(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self: V, other: V) -> V:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self.__class__(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self: V, other: Union[V, float]) -> V:
        if isinstance(other, (int, float)):
            return self.__class__(self.x * other, self.y * other, self.z * other)
        if other.__class__ is not self.__class__:
            return NotImplemented
        # Element-wise multiplication.
        return self.__class__(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self: V, other: float) -> V:
        if isinstance(other, (int, float)):
            return self.__class__(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self: V, t: float) -> V:
        return self.__class__(self.x / t, self.y / t, self.z / t)

    def __neg__(self: V) -> V:
        return self.__class__(-self.x, -self.y, -self.z)

    def __eq__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self.x, self.y, self.z))

    def __getitem__(self, axis: int) -> float:
        if axis == 0:
            return self.x
        if axis == 1:
            return self.y
        if axis == 2:
            return self.z
        raise IndexError(f"axis {axis} out of range")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self: V, other: V) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self: V, other: V) -> V:
        return self.__class__(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self: V) -> V:
        l = self.length()
        if l == 0:
            return self.__class__(0.0, 0.0, 0.0)
        return self / l

    unit = normalize

    def near_zero(self) -> bool:
        s = 1e-8
        return abs(self.x) < s and abs(self.y) < s and abs(self.z) < s

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.x}, {self.y}, {self.z})"


class Vector3(Vec3):
    """A position or a direction in world space."""
    __slots__ = ()


class Color(Vec3):
    """Linear RGB radiance, albedo or attenuation."""
    __slots__ = ()

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z
