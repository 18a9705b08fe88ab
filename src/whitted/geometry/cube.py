# geometry/cube.py
from typing import List

from whitted.core.aabb import AABB, check_axis
from whitted.core.ray import Ray
from whitted.core.tuples import Tuple, point, vector
from whitted.geometry.shape import Shape


class Cube(Shape):
    """
    Axis-aligned cube spanning -1..1 on every axis in object space.
    """

    def local_intersect(self, local_ray: Ray) -> List[float]:
        # Slab method: intersect the three per-axis [entry, exit] intervals.
        o, d = local_ray.origin, local_ray.direction
        xtmin, xtmax = check_axis(o.x, d.x, -1.0, 1.0)
        ytmin, ytmax = check_axis(o.y, d.y, -1.0, 1.0)
        ztmin, ztmax = check_axis(o.z, d.z, -1.0, 1.0)

        tmin = max(xtmin, ytmin, ztmin)
        tmax = min(xtmax, ytmax, ztmax)
        if tmin > tmax:
            return []
        return [tmin, tmax]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        # The face hit is the one on the axis with the largest component.
        ax, ay, az = abs(local_point.x), abs(local_point.y), abs(local_point.z)
        maxc = max(ax, ay, az)
        if maxc == ax:
            return vector(local_point.x, 0.0, 0.0)
        if maxc == ay:
            return vector(0.0, local_point.y, 0.0)
        return vector(0.0, 0.0, local_point.z)

    def bounds(self) -> AABB:
        return AABB(point(-1.0, -1.0, -1.0), point(1.0, 1.0, 1.0))
