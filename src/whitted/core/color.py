# core/color.py
from dataclasses import dataclass

from whitted.core.utils import float_equal


@dataclass(frozen=True, slots=True, eq=False)
class Color:
    """
    An RGB triple. Components are unclamped; values above 1.0 are legal.
    """
    red: float
    green: float
    blue: float

    def __add__(self, other: "Color") -> "Color":
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: "Color") -> "Color":
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other):
        # Scalar multiplication or the Hadamard product of two colors.
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        return Color(self.red * other, self.green * other, self.blue * other)

    def __rmul__(self, other: float) -> "Color":
        return self.__mul__(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (float_equal(self.red, other.red) and float_equal(self.green, other.green)
                and float_equal(self.blue, other.blue))

    def __iter__(self):
        return iter((self.red, self.green, self.blue))

    def __repr__(self) -> str:
        return f"Color({self.red}, {self.green}, {self.blue})"


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
