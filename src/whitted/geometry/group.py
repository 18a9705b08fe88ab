# geometry/group.py
from typing import Iterator, List, Optional

from whitted.core.aabb import AABB
from whitted.core.matrix import Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import Tuple
from whitted.geometry.intersection import Intersection
from whitted.geometry.shape import Shape
from whitted.materials.material import Material


class Group(Shape):
    """
    A shape made of other shapes. The group's transform applies to every
    child on top of the child's own transform.

    The bounding box of all children (in group space) is cached and used to
    reject rays before any child is tested. Changes to a child's transform,
    or to a nested group's contents, drop the cached box up the whole chain.
    """

    def __init__(self, transform: Optional[Matrix] = None, material: Optional[Material] = None):
        self.children: List[Shape] = []
        self._bounds: Optional[AABB] = None
        super().__init__(transform, material)

    def add_child(self, shape: Shape) -> "Group":
        """
        Adds `shape` to the group and makes the group its parent. A shape
        can only belong to one group at a time, and a group cannot be
        nested inside itself or any of its own children.
        """
        ancestor = self
        while ancestor is not None:
            if ancestor is shape:
                raise ValueError("a group cannot contain itself")
            ancestor = ancestor.parent
        previous = shape.parent
        if previous is not None and previous is not self:
            previous.remove_child(shape)
        if shape not in self.children:
            self.children.append(shape)
        shape.parent = self
        self._invalidate_bounds()
        return self

    def remove_child(self, shape: Shape):
        self.children.remove(shape)
        shape.parent = None
        self._invalidate_bounds()

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def __contains__(self, shape) -> bool:
        return any(child is shape for child in self.children)

    def is_empty(self) -> bool:
        return not self.children

    def _invalidate_bounds(self):
        self._bounds = None
        self._notify_changed()

    def bounds(self) -> AABB:
        if self._bounds is None:
            box = AABB.empty()
            for child in self.children:
                box = AABB.surrounding_box(box, child.parent_space_bounds())
            self._bounds = box
        return self._bounds

    def intersect(self, ray: Ray) -> List[Intersection]:
        return self.intersect_local(ray.transform(self.inverse))

    def local_intersect(self, local_ray: Ray) -> List[float]:
        return [i.t for i in self.intersect_local(local_ray)]

    def intersect_local(self, local_ray: Ray) -> List[Intersection]:
        if not self.bounds().hit(local_ray):
            return []
        xs: List[Intersection] = []
        for child in self.children:
            xs.extend(child.intersect(local_ray))
        xs.sort(key=lambda i: i.t)
        return xs

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        # Hits always report the leaf shape, never the group.
        raise TypeError("a group has no surface; normals come from its children")

    def __repr__(self) -> str:
        return f"Group(children={len(self.children)}, transform={self.transform!r})"
