# geometry/plane.py
import math
from typing import List

from whitted.core.aabb import AABB
from whitted.core.ray import Ray
from whitted.core.tuples import Tuple, point, vector
from whitted.core.utils import EPSILON
from whitted.geometry.shape import Shape

_NORMAL = vector(0.0, 1.0, 0.0)


class Plane(Shape):
    """
    The infinite xz plane through the object-space origin, normal +y.
    """

    def local_intersect(self, local_ray: Ray) -> List[float]:
        # Parallel (or coplanar) rays never hit.
        if abs(local_ray.direction.y) < EPSILON:
            return []
        return [-local_ray.origin.y / local_ray.direction.y]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        return _NORMAL

    def bounds(self) -> AABB:
        return AABB(point(-math.inf, 0.0, -math.inf), point(math.inf, 0.0, math.inf))
