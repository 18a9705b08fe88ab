# geometry/triangle.py
from typing import List, Optional

from whitted.core.aabb import AABB
from whitted.core.matrix import Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import Tuple
from whitted.core.utils import EPSILON
from whitted.geometry.shape import Shape
from whitted.materials.material import Material


class Triangle(Shape):
    """Flat triangle given by three object-space points."""

    def __init__(self, p1: Tuple, p2: Tuple, p3: Tuple,
                 transform: Optional[Matrix] = None, material: Optional[Material] = None):
        self.p1 = p1
        self.p2 = p2
        self.p3 = p3
        # Edges and the face normal are fixed at construction
        self.e1 = p2 - p1
        self.e2 = p3 - p1
        self.normal = self.e2.cross(self.e1).normalize()
        super().__init__(transform, material)

    def local_intersect(self, local_ray: Ray) -> List[float]:
        # Möller–Trumbore
        dir_cross_e2 = local_ray.direction.cross(self.e2)
        det = self.e1.dot(dir_cross_e2)

        # Ray is parallel to the triangle's plane
        if abs(det) < EPSILON:
            return []

        f = 1.0 / det
        p1_to_origin = local_ray.origin - self.p1
        u = f * p1_to_origin.dot(dir_cross_e2)
        if u < 0.0 or u > 1.0:
            return []

        origin_cross_e1 = p1_to_origin.cross(self.e1)
        v = f * local_ray.direction.dot(origin_cross_e1)
        if v < 0.0 or u + v > 1.0:
            return []

        return [f * self.e2.dot(origin_cross_e1)]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        return self.normal

    def bounds(self) -> AABB:
        return AABB.from_points([self.p1, self.p2, self.p3])

    def __repr__(self) -> str:
        return f"Triangle({self.p1!r}, {self.p2!r}, {self.p3!r})"
