# materials/presets.py
from whitted.core.color import Color
from whitted.materials.material import Material
from whitted.materials.pattern import CheckersPattern


class RefractiveIndex:
    """Common refractive indices."""
    VACUUM = 1.0
    AIR = 1.00029
    WATER = 1.333
    GLASS = 1.52
    DIAMOND = 2.417


class DielectricPresets:
    """Transparent materials. Kept mostly dark so the refracted term dominates."""

    @staticmethod
    def glass() -> Material:
        return Material(color=Color(0.1, 0.1, 0.1), ambient=0.0, diffuse=0.1, specular=1.0,
                        shininess=300.0, reflective=0.9, transparency=0.9,
                        refractive_index=RefractiveIndex.GLASS)

    @staticmethod
    def water() -> Material:
        return Material(color=Color(0.0, 0.05, 0.1), ambient=0.0, diffuse=0.1, specular=0.8,
                        shininess=250.0, reflective=0.6, transparency=0.9,
                        refractive_index=RefractiveIndex.WATER)

    @staticmethod
    def diamond() -> Material:
        return Material(color=Color(0.05, 0.05, 0.05), ambient=0.0, diffuse=0.05, specular=1.0,
                        shininess=400.0, reflective=0.9, transparency=0.95,
                        refractive_index=RefractiveIndex.DIAMOND)


class MetalPresets:
    """Opaque reflective materials."""

    @staticmethod
    def mirror() -> Material:
        return Material(color=Color(0.05, 0.05, 0.05), ambient=0.0, diffuse=0.05,
                        specular=1.0, shininess=300.0, reflective=1.0)

    @staticmethod
    def chrome() -> Material:
        return Material(color=Color(0.6, 0.6, 0.6), ambient=0.05, diffuse=0.3,
                        specular=0.9, shininess=250.0, reflective=0.7)

    @staticmethod
    def gold() -> Material:
        return Material(color=Color(1.0, 0.78, 0.34), ambient=0.1, diffuse=0.5,
                        specular=0.8, shininess=150.0, reflective=0.4)


class ColorPresets:
    """Common color presets for materials."""

    RED = Color(0.9, 0.2, 0.2)
    ORANGE = Color(0.9, 0.6, 0.1)
    YELLOW = Color(0.9, 0.9, 0.1)

    BLUE = Color(0.2, 0.3, 0.9)
    GREEN = Color(0.2, 0.8, 0.2)
    PURPLE = Color(0.6, 0.2, 0.8)

    WHITE = Color(0.9, 0.9, 0.9)
    GRAY = Color(0.5, 0.5, 0.5)
    BLACK = Color(0.1, 0.1, 0.1)

    @staticmethod
    def matte(color: Color) -> Material:
        """Create a matte material with the given color."""
        return Material(color=color, specular=0.1, shininess=10.0)


class TexturePresets:
    """Predefined pattern-backed materials."""

    @staticmethod
    def checkerboard(color1: Color = None, color2: Color = None) -> Material:
        if color1 is None:
            color1 = ColorPresets.WHITE
        if color2 is None:
            color2 = ColorPresets.BLACK
        return Material(pattern=CheckersPattern(color1, color2), specular=0.0)
