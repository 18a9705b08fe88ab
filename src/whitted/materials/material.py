# materials/material.py
from dataclasses import dataclass, field
from typing import Optional

from whitted.core.color import BLACK, WHITE, Color
from whitted.core.tuples import Tuple
from whitted.materials.light import PointLight
from whitted.materials.pattern import Pattern


@dataclass
class Material:
    """
    Phong surface description plus the Whitted reflection/refraction terms.
    When a pattern is set it replaces `color` as the surface color.
    """
    color: Color = field(default_factory=lambda: WHITE)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = 1.0
    pattern: Optional[Pattern] = None

    def lighting(self, shape, light: PointLight, position: Tuple, eyev: Tuple,
                 normalv: Tuple, in_shadow: bool = False) -> Color:
        """
        Computes the Phong color of `position` lit by `light`.
        Only the ambient term survives when the point is in shadow.
        """
        if self.pattern is not None:
            surface = self.pattern.pattern_at_shape(shape, position)
        else:
            surface = self.color

        # combine the surface color with the light's color/intensity
        effective_color = surface * light.intensity
        ambient = effective_color * self.ambient
        if in_shadow:
            return ambient

        lightv = (light.position - position).normalize()

        # cosine of the angle between the light and the normal; negative
        # means the light is on the other side of the surface
        light_dot_normal = lightv.dot(normalv)
        if light_dot_normal < 0:
            return ambient

        diffuse = effective_color * (self.diffuse * light_dot_normal)

        reflectv = (-lightv).reflect(normalv)
        reflect_dot_eye = reflectv.dot(eyev)
        if reflect_dot_eye <= 0:
            specular = BLACK
        else:
            factor = reflect_dot_eye ** self.shininess
            specular = light.intensity * (self.specular * factor)

        return ambient + diffuse + specular


def lighting(material: Material, shape, light: PointLight, position: Tuple, eyev: Tuple,
             normalv: Tuple, in_shadow: bool = False) -> Color:
    return material.lighting(shape, light, position, eyev, normalv, in_shadow)
