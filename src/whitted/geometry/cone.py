# geometry/cone.py
import math
from typing import List

from whitted.core.aabb import AABB
from whitted.core.ray import Ray
from whitted.core.tuples import Tuple, point, vector
from whitted.core.utils import EPSILON
from whitted.geometry.cylinder import TruncatedShape


class Cone(TruncatedShape):
    """
    Double-napped cone x^2 + z^2 = y^2 with its apex at the origin.
    The radius at height y is |y|, which also sizes the caps.
    """

    def _cap_radius(self, y: float) -> float:
        return abs(y)

    def local_intersect(self, local_ray: Ray) -> List[float]:
        o, d = local_ray.origin, local_ray.direction
        xs: List[float] = []

        a = d.x * d.x - d.y * d.y + d.z * d.z
        b = 2.0 * o.x * d.x - 2.0 * o.y * d.y + 2.0 * o.z * d.z
        c = o.x * o.x - o.y * o.y + o.z * o.z

        if abs(a) < EPSILON:
            # Ray parallel to one of the nappes: the quadratic degenerates to
            # a line with a single root, or none when b is also zero.
            if abs(b) >= EPSILON:
                t = -c / (2.0 * b)
                if self._in_range(local_ray, t):
                    xs.append(t)
        else:
            disc = b * b - 4.0 * a * c
            # Rays through the apex are tangent to both nappes; rounding can
            # push their zero discriminant slightly negative.
            if -EPSILON < disc < 0:
                disc = 0.0
            if disc >= 0:
                sqrt_disc = math.sqrt(disc)
                t0 = (-b - sqrt_disc) / (2.0 * a)
                t1 = (-b + sqrt_disc) / (2.0 * a)
                if t0 > t1:
                    t0, t1 = t1, t0
                if self._in_range(local_ray, t0):
                    xs.append(t0)
                if self._in_range(local_ray, t1):
                    xs.append(t1)

        self._intersect_caps(local_ray, xs)
        return xs

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        cap = self._cap_normal(local_point)
        if cap is not None:
            return cap
        y = math.sqrt(local_point.x * local_point.x + local_point.z * local_point.z)
        if local_point.y > 0:
            y = -y
        return vector(local_point.x, y, local_point.z)

    def bounds(self) -> AABB:
        limit = max(abs(self.minimum), abs(self.maximum))
        return AABB(point(-limit, self.minimum, -limit), point(limit, self.maximum, limit))
