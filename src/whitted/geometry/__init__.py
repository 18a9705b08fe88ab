from whitted.geometry.intersection import (Computations, Intersection, hit, intersections,
                                           prepare_computations, schlick)
from whitted.geometry.shape import Shape
from whitted.geometry.sphere import Sphere, glass_sphere
from whitted.geometry.plane import Plane
from whitted.geometry.cube import Cube
from whitted.geometry.cylinder import Cylinder
from whitted.geometry.cone import Cone
from whitted.geometry.triangle import Triangle
from whitted.geometry.group import Group
from whitted.geometry.world import World, default_world

__all__ = [
    "Computations", "Intersection", "hit", "intersections", "prepare_computations", "schlick",
    "Shape", "Sphere", "glass_sphere", "Plane", "Cube", "Cylinder", "Cone", "Triangle", "Group",
    "World", "default_world",
]
