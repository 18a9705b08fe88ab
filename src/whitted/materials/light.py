# materials/light.py
from dataclasses import dataclass

from whitted.core.color import Color
from whitted.core.tuples import Tuple


@dataclass(frozen=True)
class PointLight:
    """
    A light source with no size, emitting `intensity` from `position`.
    """
    position: Tuple
    intensity: Color
