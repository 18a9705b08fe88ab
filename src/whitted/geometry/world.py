# src/geometry/world.py
import logging
import math
from typing import Iterable, List, Optional

from whitted.config import DEFAULT_MAX_DEPTH
from whitted.core.color import BLACK, WHITE, Color
from whitted.core.ray import Ray
from whitted.core.transform import scaling
from whitted.core.tuples import Tuple, point
from whitted.geometry.intersection import (Computations, Intersection, hit,
                                           prepare_computations, schlick)
from whitted.geometry.shape import Shape
from whitted.geometry.sphere import Sphere
from whitted.materials.light import PointLight
from whitted.materials.material import Material

logger = logging.getLogger(__name__)


class World:
    """
    The scene: top-level shapes plus point lights.

    Nothing here mutates the scene while shading, so one World can be read
    by any number of render workers at once.
    """
    def __init__(self, objects: Optional[Iterable[Shape]] = None,
                 lights: Optional[Iterable[PointLight]] = None):
        self.objects: List[Shape] = list(objects) if objects is not None else []
        self.lights: List[PointLight] = list(lights) if lights is not None else []

    def add(self, obj: Shape):
        self.objects.append(obj)

    def add_light(self, light: PointLight):
        self.lights.append(light)

    def clear(self):
        self.objects.clear()
        self.lights.clear()

    def __contains__(self, obj) -> bool:
        return any(o is obj for o in self.objects)

    def intersect(self, ray: Ray) -> List[Intersection]:
        """Every intersection of the ray with the scene, sorted by t."""
        xs: List[Intersection] = []
        for obj in self.objects:
            xs.extend(obj.intersect(ray))
        xs.sort(key=lambda i: i.t)
        return xs

    def intersect_first(self, ray: Ray, max_distance: float = math.inf) -> Optional[Intersection]:
        """
        Returns the first intersection found with 0 < t < max_distance, or
        None. Stops at the first shape that yields one, so the result is
        any occluder, not necessarily the nearest.
        """
        for obj in self.objects:
            for i in obj.intersect(ray):
                if 0 < i.t < max_distance:
                    return i
        return None

    def is_shadowed(self, position: Tuple, light: PointLight) -> bool:
        v = light.position - position
        distance = v.magnitude()
        shadow_ray = Ray(position, v.normalize())
        return self.intersect_first(shadow_ray, distance) is not None

    def shade_hit(self, comps: Computations, remaining: int = DEFAULT_MAX_DEPTH) -> Color:
        material = comps.shape.material
        surface = BLACK
        for light in self.lights:
            shadowed = self.is_shadowed(comps.over_point, light)
            surface = surface + material.lighting(comps.shape, light, comps.over_point,
                                                  comps.eyev, comps.normalv, shadowed)

        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)

        if material.reflective > 0 and material.transparency > 0:
            reflectance = schlick(comps)
            return surface + reflected * reflectance + refracted * (1.0 - reflectance)
        return surface + reflected + refracted

    def color_at(self, ray: Ray, remaining: int = DEFAULT_MAX_DEPTH) -> Color:
        xs = self.intersect(ray)
        h = hit(xs)
        if h is None:
            return BLACK
        comps = prepare_computations(h, ray, xs)
        return self.shade_hit(comps, remaining)

    def reflected_color(self, comps: Computations, remaining: int = DEFAULT_MAX_DEPTH) -> Color:
        reflective = comps.shape.material.reflective
        if remaining <= 0 or reflective == 0:
            return BLACK
        reflect_ray = Ray(comps.over_point, comps.reflectv)
        return self.color_at(reflect_ray, remaining - 1) * reflective

    def refracted_color(self, comps: Computations, remaining: int = DEFAULT_MAX_DEPTH) -> Color:
        transparency = comps.shape.material.transparency
        if remaining <= 0 or transparency == 0:
            return BLACK

        # Snell's law
        n_ratio = comps.n1 / comps.n2
        cos_i = comps.eyev.dot(comps.normalv)
        sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
        if sin2_t > 1.0:
            # total internal reflection
            return BLACK

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.normalv * (n_ratio * cos_i - cos_t) - comps.eyev * n_ratio
        refract_ray = Ray(comps.under_point, direction)
        return self.color_at(refract_ray, remaining - 1) * transparency

    def __repr__(self) -> str:
        return f"World(objects={len(self.objects)}, lights={len(self.lights)})"


def default_world() -> World:
    """
    Two concentric spheres lit by a white light at (-10, 10, -10).
    """
    s1 = Sphere(material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    s2 = Sphere(transform=scaling(0.5, 0.5, 0.5))
    light = PointLight(point(-10.0, 10.0, -10.0), WHITE)
    world = World([s1, s2], [light])
    logger.debug("Built default world: %r", world)
    return world
