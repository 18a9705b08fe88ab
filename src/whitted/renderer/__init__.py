from whitted.renderer.canvas import Canvas
from whitted.renderer.raytracer import Renderer, render

__all__ = ["Canvas", "Renderer", "render"]
