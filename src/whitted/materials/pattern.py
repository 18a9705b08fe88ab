# materials/pattern.py
import math
from typing import Optional

from whitted.core.color import Color
from whitted.core.matrix import IDENTITY, Matrix
from whitted.core.tuples import Tuple


class Pattern:
    """Base class for all patterns. A pattern has its own transform, applied after the shape's."""
    def __init__(self, transform: Optional[Matrix] = None):
        self.transform = transform if transform is not None else IDENTITY

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, matrix: Matrix):
        self._inverse = matrix.inverse()
        self._transform = matrix

    def pattern_at(self, p: Tuple) -> Color:
        """Sample the pattern at a point in pattern space."""
        raise NotImplementedError("pattern_at() must be implemented by pattern subclasses.")

    def pattern_at_shape(self, shape, world_point: Tuple) -> Color:
        """
        Sample the pattern at a world-space point on the given shape.
        The point is taken to object space (through any parent groups) and
        then into pattern space.
        """
        object_point = shape.world_to_object(world_point)
        return self.pattern_at(self._inverse * object_point)


class SolidPattern(Pattern):
    """A single color everywhere."""
    def __init__(self, color: Color, transform: Optional[Matrix] = None):
        super().__init__(transform)
        self.color = color

    def pattern_at(self, p: Tuple) -> Color:
        return self.color


class StripePattern(Pattern):
    """Alternates between two colors along x."""
    def __init__(self, a: Color, b: Color, transform: Optional[Matrix] = None):
        super().__init__(transform)
        self.a = a
        self.b = b

    def pattern_at(self, p: Tuple) -> Color:
        return self.a if math.floor(p.x) % 2 == 0 else self.b


class GradientPattern(Pattern):
    """Linear blend from a to b over each unit of x."""
    def __init__(self, a: Color, b: Color, transform: Optional[Matrix] = None):
        super().__init__(transform)
        self.a = a
        self.b = b

    def pattern_at(self, p: Tuple) -> Color:
        fraction = p.x - math.floor(p.x)
        return self.a + (self.b - self.a) * fraction


class RingPattern(Pattern):
    """Concentric rings around the y axis."""
    def __init__(self, a: Color, b: Color, transform: Optional[Matrix] = None):
        super().__init__(transform)
        self.a = a
        self.b = b

    def pattern_at(self, p: Tuple) -> Color:
        distance = math.sqrt(p.x * p.x + p.z * p.z)
        return self.a if math.floor(distance) % 2 == 0 else self.b


class CheckersPattern(Pattern):
    """A 3D checker pattern."""
    def __init__(self, a: Color, b: Color, transform: Optional[Matrix] = None):
        super().__init__(transform)
        self.a = a
        self.b = b

    def pattern_at(self, p: Tuple) -> Color:
        total = math.floor(p.x) + math.floor(p.y) + math.floor(p.z)
        return self.a if total % 2 == 0 else self.b
