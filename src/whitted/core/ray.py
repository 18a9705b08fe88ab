# core/ray.py
from whitted.core.matrix import Matrix
from whitted.core.tuples import Tuple


class Ray:
    """
    Represents a ray in 3D space with an origin point and direction vector.
    The direction is not normalized; object-space rays keep the scale of the
    inverse transform so that t values agree with world space.
    """
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Tuple, direction: Tuple):
        self.origin = origin
        self.direction = direction

    def position(self, t: float) -> Tuple:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    at = position

    def transform(self, matrix: Matrix) -> "Ray":
        return Ray(matrix * self.origin, matrix * self.direction)

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
