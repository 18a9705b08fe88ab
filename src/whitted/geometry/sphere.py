# geometry/sphere.py
import math
from typing import List, Optional

from whitted.core.aabb import AABB
from whitted.core.matrix import Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import Tuple, point, vector
from whitted.geometry.shape import Shape
from whitted.materials.material import Material


class Sphere(Shape):
    """
    Unit sphere centered at the object-space origin. Place and size it with
    the transform.
    """

    def local_intersect(self, local_ray: Ray) -> List[float]:
        # Vector from the sphere center to the ray origin
        ox = local_ray.origin.x
        oy = local_ray.origin.y
        oz = local_ray.origin.z
        d = local_ray.direction

        a = d.x * d.x + d.y * d.y + d.z * d.z
        b = 2.0 * (d.x * ox + d.y * oy + d.z * oz)
        c = ox * ox + oy * oy + oz * oz - 1.0
        discriminant = b * b - 4.0 * a * c

        if discriminant < 0:
            return []

        # A tangent ray yields the double root twice.
        sqrt_disc = math.sqrt(discriminant)
        t1 = (-b - sqrt_disc) / (2.0 * a)
        t2 = (-b + sqrt_disc) / (2.0 * a)
        return [t1, t2]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        return vector(local_point.x, local_point.y, local_point.z)

    def bounds(self) -> AABB:
        return AABB(point(-1.0, -1.0, -1.0), point(1.0, 1.0, 1.0))


def glass_sphere(transform: Optional[Matrix] = None, refractive_index: float = 1.5) -> Sphere:
    """
    A fully transparent sphere, the usual test subject for refraction.
    """
    return Sphere(transform=transform,
                  material=Material(transparency=1.0, refractive_index=refractive_index))
