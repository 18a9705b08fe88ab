from whitted.materials.light import PointLight
from whitted.materials.material import Material, lighting
from whitted.materials.pattern import (CheckersPattern, GradientPattern, Pattern, RingPattern,
                                       SolidPattern, StripePattern)

__all__ = [
    "PointLight", "Material", "lighting",
    "Pattern", "SolidPattern", "StripePattern", "GradientPattern", "RingPattern",
    "CheckersPattern",
]
