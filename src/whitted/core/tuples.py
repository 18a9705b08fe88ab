# core/tuples.py
import math
from dataclasses import dataclass

from whitted.core.utils import float_equal


@dataclass(frozen=True, slots=True, eq=False)
class Tuple:
    """
    A homogeneous 4-component value. w == 1.0 marks a point, w == 0.0 a vector.
    Instances are never mutated; arithmetic always builds a new Tuple.
    """
    x: float
    y: float
    z: float
    w: float

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def __add__(self, other: "Tuple") -> "Tuple":
        if self.w + other.w > 1.0:
            raise TypeError("cannot add two points")
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: "Tuple") -> "Tuple":
        if self.w - other.w < 0.0:
            raise TypeError("cannot subtract a point from a vector")
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> "Tuple":
        if self.w != 0.0:
            raise TypeError("cannot negate a point")
        return Tuple(-self.x, -self.y, -self.z, 0.0)

    def __mul__(self, scalar: float) -> "Tuple":
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __rmul__(self, scalar: float) -> "Tuple":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Tuple":
        return Tuple(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (float_equal(self.x, other.x) and float_equal(self.y, other.y)
                and float_equal(self.z, other.z) and float_equal(self.w, other.w))

    def __iter__(self):
        return iter((self.x, self.y, self.z, self.w))

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalize(self) -> "Tuple":
        """
        Returns the unit-length tuple. A zero vector normalizes to itself.
        """
        m = self.magnitude()
        if m == 0:
            return self
        return Tuple(self.x / m, self.y / m, self.z / m, self.w / m)

    def dot(self, other: "Tuple") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: "Tuple") -> "Tuple":
        if self.w != 0.0 or other.w != 0.0:
            raise TypeError("cross product is only defined for two vectors")
        return Tuple(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
            0.0,
        )

    def reflect(self, normal: "Tuple") -> "Tuple":
        """
        Reflects this vector about the normal.
        """
        return self - normal * (2.0 * self.dot(normal))

    def __repr__(self) -> str:
        if self.w == 1.0:
            return f"point({self.x}, {self.y}, {self.z})"
        if self.w == 0.0:
            return f"vector({self.x}, {self.y}, {self.z})"
        return f"Tuple({self.x}, {self.y}, {self.z}, {self.w})"


def point(x: float, y: float, z: float) -> Tuple:
    return Tuple(x, y, z, 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    return Tuple(x, y, z, 0.0)


ORIGIN = point(0.0, 0.0, 0.0)
