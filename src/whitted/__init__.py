"""
whitted: a Whitted-style recursive ray tracer.

Build shapes, add them and point lights to a World, point a Camera at it and
call render() to get a Canvas.
"""
from whitted.core import (BLACK, WHITE, Color, DegenerateTransform, Matrix, Ray, Tuple,
                          point, vector)
from whitted.core.transform import (chain, rotation_x, rotation_y, rotation_z, scaling,
                                    shearing, translation, view_transform)
from whitted.materials import Material, PointLight
from whitted.geometry import (Cone, Cube, Cylinder, Group, Plane, Sphere, Triangle, World,
                              default_world, glass_sphere)
from whitted.camera import Camera
from whitted.renderer import Canvas, Renderer, render

__version__ = "0.1.0"
