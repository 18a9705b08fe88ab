# src/core/aabb.py
import math
from typing import Iterable

from whitted.core.matrix import Matrix
from whitted.core.tuples import Tuple, point

INFINITY = math.inf


def check_axis(origin: float, direction: float, lo: float, hi: float):
    """
    Slab test along one axis. Returns the (entry, exit) parameters of the ray
    against the planes at lo and hi, entry <= exit. Only an exactly zero
    direction counts as parallel: it gets (-inf, inf) when the origin lies
    inside the slab and an empty interval otherwise. Tiny non-zero
    components still divide, since a scaled ray can reach the slab far away.
    """
    tmin_numerator = lo - origin
    tmax_numerator = hi - origin
    if direction != 0.0:
        tmin = tmin_numerator / direction
        tmax = tmax_numerator / direction
    else:
        tmin = -INFINITY if tmin_numerator <= 0 else INFINITY
        tmax = INFINITY if tmax_numerator >= 0 else -INFINITY
    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax


class AABB:
    """
    Axis-aligned bounding box. Used to fast-reject rays against groups; a box
    with infinite extents never rejects anything.
    """
    def __init__(self, minimum: Tuple, maximum: Tuple):
        self.minimum = minimum
        self.maximum = maximum

    @staticmethod
    def empty() -> "AABB":
        return AABB(point(INFINITY, INFINITY, INFINITY), point(-INFINITY, -INFINITY, -INFINITY))

    @staticmethod
    def infinite() -> "AABB":
        return AABB(point(-INFINITY, -INFINITY, -INFINITY), point(INFINITY, INFINITY, INFINITY))

    @staticmethod
    def from_points(points: Iterable[Tuple]) -> "AABB":
        box = AABB.empty()
        for p in points:
            box = box.add_point(p)
        return box

    def is_empty(self) -> bool:
        return (self.minimum.x > self.maximum.x or self.minimum.y > self.maximum.y
                or self.minimum.z > self.maximum.z)

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.minimum.x, self.minimum.y, self.minimum.z,
                                              self.maximum.x, self.maximum.y, self.maximum.z))

    def add_point(self, p: Tuple) -> "AABB":
        return AABB(
            point(min(self.minimum.x, p.x), min(self.minimum.y, p.y), min(self.minimum.z, p.z)),
            point(max(self.maximum.x, p.x), max(self.maximum.y, p.y), max(self.maximum.z, p.z)),
        )

    def contains_point(self, p: Tuple) -> bool:
        return (self.minimum.x <= p.x <= self.maximum.x
                and self.minimum.y <= p.y <= self.maximum.y
                and self.minimum.z <= p.z <= self.maximum.z)

    def transform(self, matrix: Matrix) -> "AABB":
        """
        Returns the box enclosing this box's eight corners after transformation.
        Infinite boxes stay infinite, since their corners cannot be transformed.
        """
        if self.is_empty():
            return self
        if not self.is_finite():
            return AABB.infinite()
        lo, hi = self.minimum, self.maximum
        corners = [
            point(x, y, z)
            for x in (lo.x, hi.x)
            for y in (lo.y, hi.y)
            for z in (lo.z, hi.z)
        ]
        return AABB.from_points(matrix * c for c in corners)

    def hit(self, ray) -> bool:
        """
        True when the infinite line of the ray crosses the box. Boxes behind
        the origin still count, so negative-t intersections survive culling.
        """
        if self.is_empty():
            return False
        xtmin, xtmax = check_axis(ray.origin.x, ray.direction.x, self.minimum.x, self.maximum.x)
        ytmin, ytmax = check_axis(ray.origin.y, ray.direction.y, self.minimum.y, self.maximum.y)
        ztmin, ztmax = check_axis(ray.origin.z, ray.direction.z, self.minimum.z, self.maximum.z)
        return max(xtmin, ytmin, ztmin) <= min(xtmax, ytmax, ztmax)

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = point(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z),
        )
        big = point(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z),
        )
        return AABB(small, big)

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"
