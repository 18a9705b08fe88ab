# geometry/shape.py
import weakref
from typing import List, Optional

from whitted.core.aabb import AABB
from whitted.core.matrix import IDENTITY, Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import Tuple, vector
from whitted.geometry.intersection import Intersection
from whitted.materials.material import Material


class Shape:
    """
    Abstract base for every primitive that can be hit by a ray.

    Subclasses work purely in object space and implement:
        local_intersect(local_ray) -> list of t values
        local_normal_at(local_point) -> object-space normal vector
        bounds() -> object-space AABB

    The world-space wrappers here take care of the transform. The inverse
    and inverse-transpose are computed once, when the transform is assigned.
    """

    def __init__(self, transform: Optional[Matrix] = None, material: Optional[Material] = None):
        self._parent = None
        self.transform = transform if transform is not None else IDENTITY
        self.material = material if material is not None else Material()

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, matrix: Matrix):
        # Raises DegenerateTransform before anything is stored.
        inverse = matrix.inverse()
        self._transform = matrix
        self._inverse = inverse
        self._inverse_transpose = inverse.transpose()
        self._notify_changed()

    @property
    def inverse(self) -> Matrix:
        return self._inverse

    @property
    def parent(self):
        """The enclosing group, or None. Held through a weak reference."""
        return self._parent() if self._parent is not None else None

    @parent.setter
    def parent(self, group):
        self._parent = weakref.ref(group) if group is not None else None

    def _notify_changed(self):
        """Tells the enclosing group that this shape's extent may have changed."""
        parent = self.parent
        if parent is not None:
            parent._invalidate_bounds()

    def intersect(self, ray: Ray) -> List[Intersection]:
        """
        Intersects a ray given in the parent's space (world space for
        top-level shapes). Returns intersections sorted by ascending t.
        """
        local_ray = ray.transform(self._inverse)
        ts = self.local_intersect(local_ray)
        if not ts:
            return []
        ts = sorted(ts)
        return [Intersection(t, self) for t in ts]

    def local_intersect(self, local_ray: Ray) -> List[float]:
        raise NotImplementedError("local_intersect() must be implemented by subclasses.")

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        raise NotImplementedError("local_normal_at() must be implemented by subclasses.")

    def bounds(self) -> AABB:
        raise NotImplementedError("bounds() must be implemented by subclasses.")

    def parent_space_bounds(self) -> AABB:
        return self.bounds().transform(self._transform)

    def world_to_object(self, world_point: Tuple) -> Tuple:
        parent = self.parent
        if parent is not None:
            world_point = parent.world_to_object(world_point)
        return self._inverse * world_point

    def normal_to_world(self, normal: Tuple) -> Tuple:
        # The inverse-transpose keeps normals perpendicular under
        # non-uniform scaling; w is forced back to 0 afterwards.
        n = self._inverse_transpose * normal
        n = vector(n.x, n.y, n.z).normalize()
        parent = self.parent
        if parent is not None:
            n = parent.normal_to_world(n)
        return n

    def normal_at(self, world_point: Tuple) -> Tuple:
        local_point = self.world_to_object(world_point)
        local_normal = self.local_normal_at(local_point)
        return self.normal_to_world(local_normal)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(transform={self._transform!r})"
