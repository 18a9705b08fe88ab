# geometry/cylinder.py
import math
from typing import List, Optional

from whitted.core.aabb import AABB
from whitted.core.matrix import Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import Tuple, point, vector
from whitted.core.utils import EPSILON
from whitted.geometry.shape import Shape
from whitted.materials.material import Material


class TruncatedShape(Shape):
    """
    Shared state for shapes around the y axis that can be cut at
    `minimum` < y < `maximum` and optionally capped with flat disks.
    """

    def __init__(self, minimum: float = -math.inf, maximum: float = math.inf, closed: bool = False,
                 transform: Optional[Matrix] = None, material: Optional[Material] = None):
        self._minimum = minimum
        self._maximum = maximum
        self._closed = closed
        super().__init__(transform, material)

    @property
    def minimum(self) -> float:
        return self._minimum

    @minimum.setter
    def minimum(self, value: float):
        self._minimum = value
        self._notify_changed()

    @property
    def maximum(self) -> float:
        return self._maximum

    @maximum.setter
    def maximum(self, value: float):
        self._maximum = value
        self._notify_changed()

    @property
    def closed(self) -> bool:
        return self._closed

    @closed.setter
    def closed(self, value: bool):
        self._closed = value

    def _cap_radius(self, y: float) -> float:
        raise NotImplementedError

    def _intersect_caps(self, local_ray: Ray, xs: List[float]):
        # Only closed shapes have caps, and only on finite ends.
        d = local_ray.direction
        if not self._closed or d.y == 0.0:
            return
        o = local_ray.origin
        for y_plane in (self._minimum, self._maximum):
            if not math.isfinite(y_plane):
                continue
            t = (y_plane - o.y) / d.y
            x = o.x + t * d.x
            z = o.z + t * d.z
            radius = self._cap_radius(y_plane)
            if x * x + z * z <= radius * radius:
                xs.append(t)

    def _in_range(self, local_ray: Ray, t: float) -> bool:
        y = local_ray.origin.y + t * local_ray.direction.y
        return self._minimum < y < self._maximum

    def _cap_normal(self, local_point: Tuple) -> Optional[Tuple]:
        dist = local_point.x * local_point.x + local_point.z * local_point.z
        if local_point.y >= self._maximum - EPSILON and dist < self._cap_radius(self._maximum) ** 2:
            return vector(0.0, 1.0, 0.0)
        if local_point.y <= self._minimum + EPSILON and dist < self._cap_radius(self._minimum) ** 2:
            return vector(0.0, -1.0, 0.0)
        return None


class Cylinder(TruncatedShape):
    """
    Radius-1 cylinder around the y axis. Infinite unless truncated.
    """

    def _cap_radius(self, y: float) -> float:
        return 1.0

    def local_intersect(self, local_ray: Ray) -> List[float]:
        o, d = local_ray.origin, local_ray.direction
        xs: List[float] = []

        a = d.x * d.x + d.z * d.z
        # a ~ 0 means the ray is parallel to the y axis: only caps can be hit.
        if abs(a) >= EPSILON:
            b = 2.0 * o.x * d.x + 2.0 * o.z * d.z
            c = o.x * o.x + o.z * o.z - 1.0
            disc = b * b - 4.0 * a * c
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
        return vector(local_point.x, 0.0, local_point.z)

    def bounds(self) -> AABB:
        return AABB(point(-1.0, self._minimum, -1.0), point(1.0, self._maximum, 1.0))
