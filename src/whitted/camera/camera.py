# camera/camera.py
import math

from whitted.core.matrix import IDENTITY, Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import point


class Camera:
    """
    Pinhole camera looking down -z in camera space, with the canvas one unit
    in front of the eye. `transform` is the view transform (world to camera),
    usually built with view_transform().
    """
    def __init__(self, hsize: int, vsize: int, field_of_view: float,
                 transform: Matrix = IDENTITY):
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"canvas size must be positive, got {hsize}x{vsize}")
        if not 0.0 < field_of_view < math.pi:
            raise ValueError(f"field of view must be in (0, pi) radians, got {field_of_view}")
        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.transform = transform
        self._update_viewport()

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, matrix: Matrix):
        self._inverse = matrix.inverse()
        self._transform = matrix
        self._origin = self._inverse * point(0.0, 0.0, 0.0)

    def _update_viewport(self):
        """Computes the half extents of the canvas plane and the pixel size."""
        half_view = math.tan(self.field_of_view / 2.0)
        aspect = self.hsize / self.vsize
        if aspect >= 1.0:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2.0) / self.hsize

    def ray_for_pixel(self, px: float, py: float) -> Ray:
        """
        World-space ray from the eye through the center of pixel (px, py).
        Pixel (0, 0) is the top-left corner of the canvas.
        """
        xoffset = (px + 0.5) * self.pixel_size
        yoffset = (py + 0.5) * self.pixel_size

        # Camera looks toward -z, so +x is to the left
        world_x = self.half_width - xoffset
        world_y = self.half_height - yoffset

        pixel = self._inverse * point(world_x, world_y, -1.0)
        direction = (pixel - self._origin).normalize()
        return Ray(self._origin, direction)

    def __repr__(self) -> str:
        return f"Camera({self.hsize}x{self.vsize}, fov={self.field_of_view:.4f})"
