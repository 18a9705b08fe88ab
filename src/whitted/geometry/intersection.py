# geometry/intersection.py
"""
Intersection records, hit selection and the per-hit precomputation used by
shading.

A negative t is a valid intersection (the surface is behind the ray origin).
Such records stay in intersection lists because the refraction bookkeeping
in prepare_computations walks the whole list, but hit() never selects them.
"""
import math
from dataclasses import dataclass
from typing import Iterable, List, Optional

from whitted.core.ray import Ray
from whitted.core.tuples import Tuple
from whitted.core.utils import EPSILON


class Intersection:
    """A (t, shape) pair."""
    __slots__ = ("t", "shape")

    def __init__(self, t: float, shape):
        self.t = t
        self.shape = shape

    def __repr__(self) -> str:
        return f"Intersection(t={self.t}, shape={type(self.shape).__name__})"


def intersections(*xs: Intersection) -> List[Intersection]:
    """
    Aggregates intersections into a list sorted by ascending t.
    The sort is stable, so records with equal t keep their order.
    """
    return sorted(xs, key=lambda i: i.t)


def hit(xs: Iterable[Intersection]) -> Optional[Intersection]:
    """
    Returns the intersection with the smallest non-negative t, or None.
    A single scan; the input does not need to be sorted.
    """
    best = None
    for i in xs:
        if i.t >= 0 and (best is None or i.t < best.t):
            best = i
    return best


@dataclass
class Computations:
    """
    Values precomputed at a hit for shading.

    over_point sits just above the surface (shadow and reflection rays start
    there); under_point sits just below it (refracted rays start there).
    n1/n2 are the refractive indices on the incoming and outgoing side.
    """
    t: float
    shape: object
    point: Tuple
    eyev: Tuple
    normalv: Tuple
    inside: bool
    reflectv: Tuple
    over_point: Tuple
    under_point: Tuple
    n1: float = 1.0
    n2: float = 1.0


def prepare_computations(intersection: Intersection, ray: Ray,
                         xs: Optional[List[Intersection]] = None) -> Computations:
    """
    Builds the Computations for `intersection` along `ray`.

    `xs` is the full, sorted intersection list the hit came from; it is used
    to find which objects the ray is inside of at the hit. Without it the hit
    is treated as the only intersection.
    """
    t = intersection.t
    shape = intersection.shape
    position = ray.position(t)
    eyev = -ray.direction
    normalv = shape.normal_at(position)

    inside = normalv.dot(eyev) < 0
    if inside:
        normalv = -normalv

    reflectv = ray.direction.reflect(normalv)
    offset = normalv * EPSILON

    comps = Computations(
        t=t,
        shape=shape,
        point=position,
        eyev=eyev,
        normalv=normalv,
        inside=inside,
        reflectv=reflectv,
        over_point=position + offset,
        under_point=position - offset,
    )

    if xs is None:
        xs = [intersection]

    # Walk the list keeping track of the objects the ray is currently inside.
    containers = []
    for i in xs:
        if i is intersection:
            comps.n1 = containers[-1].material.refractive_index if containers else 1.0

        if i.shape in containers:
            containers.remove(i.shape)
        else:
            containers.append(i.shape)

        if i is intersection:
            comps.n2 = containers[-1].material.refractive_index if containers else 1.0
            break

    return comps


def schlick(comps: Computations) -> float:
    """
    Schlick's approximation of the Fresnel reflectance at the hit.
    Returns 1.0 under total internal reflection.
    """
    cos = comps.eyev.dot(comps.normalv)

    if comps.n1 > comps.n2:
        n = comps.n1 / comps.n2
        sin2_t = n * n * (1.0 - cos * cos)
        if sin2_t > 1.0:
            return 1.0
        cos = math.sqrt(1.0 - sin2_t)

    r0 = ((comps.n1 - comps.n2) / (comps.n1 + comps.n2)) ** 2
    return r0 + (1.0 - r0) * (1.0 - cos) ** 5
