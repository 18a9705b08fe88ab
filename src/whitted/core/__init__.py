from whitted.core.color import BLACK, WHITE, Color
from whitted.core.matrix import IDENTITY, DegenerateTransform, Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import ORIGIN, Tuple, point, vector
from whitted.core.utils import EPSILON, float_equal

__all__ = [
    "BLACK", "WHITE", "Color",
    "IDENTITY", "DegenerateTransform", "Matrix",
    "Ray",
    "ORIGIN", "Tuple", "point", "vector",
    "EPSILON", "float_equal",
]
