# renderer/canvas.py
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from whitted.core.color import Color
from whitted.renderer.tone_mapping import to_8bit

# PPM readers are not required to accept longer lines
PPM_LINE_LIMIT = 70


class Canvas:
    """
    A width x height grid of linear RGB values, stored row-major in a numpy
    array of shape (height, width, 3). Pixel (0, 0) is the top-left corner.
    Values are kept unclamped; clamping happens only on export.
    """
    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.float64)

    def _check_bounds(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")

    def write_pixel(self, x: int, y: int, color: Color):
        self._check_bounds(x, y)
        self.pixels[y, x] = (color.red, color.green, color.blue)

    def pixel_at(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        r, g, b = self.pixels[y, x]
        return Color(float(r), float(g), float(b))

    def fill(self, color: Color):
        self.pixels[:, :] = (color.red, color.green, color.blue)

    def to_ppm(self) -> str:
        """
        Plain (P3) PPM text. Components are scaled to 0..255, lines are
        wrapped before PPM_LINE_LIMIT characters and the text ends with a
        newline.
        """
        lines = ["P3", f"{self.width} {self.height}", "255"]
        data = to_8bit(self.pixels)
        for row in data:
            line = ""
            for value in row.reshape(-1):
                token = str(int(value))
                if not line:
                    line = token
                elif len(line) + 1 + len(token) > PPM_LINE_LIMIT:
                    lines.append(line)
                    line = token
                else:
                    line = f"{line} {token}"
            lines.append(line)
        return "\n".join(lines) + "\n"

    def to_image(self) -> Image.Image:
        """An 8-bit RGB Pillow image of the canvas."""
        return Image.fromarray(to_8bit(self.pixels))

    def save(self, path: Union[str, Path]):
        """
        Write the canvas to `path`. `.ppm` files are written as plain text;
        any other extension goes through Pillow.
        """
        path = Path(path)
        if path.suffix.lower() == ".ppm":
            path.write_text(self.to_ppm())
        else:
            self.to_image().save(path)

    def __repr__(self) -> str:
        return f"Canvas({self.width}x{self.height})"
