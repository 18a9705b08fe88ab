# core/transform.py
"""
Builders for affine transform matrices.

All builders use the column-vector convention: in ``A * B * p`` the
rightmost matrix ``B`` is applied to ``p`` first. Composition is not
commutative, so every call site that multiplies transforms together should
read right-to-left, or use ``chain`` which takes transforms in the order
they are applied.
"""
import math
from functools import reduce

from whitted.core.matrix import IDENTITY, Matrix
from whitted.core.tuples import Tuple


def translation(x: float, y: float, z: float) -> Matrix:
    return Matrix([
        [1.0, 0.0, 0.0, x],
        [0.0, 1.0, 0.0, y],
        [0.0, 0.0, 1.0, z],
        [0.0, 0.0, 0.0, 1.0],
    ])


def scaling(x: float, y: float, z: float) -> Matrix:
    return Matrix([
        [x, 0.0, 0.0, 0.0],
        [0.0, y, 0.0, 0.0],
        [0.0, 0.0, z, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_x(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix([
        [1.0, 0.0, 0.0, 0.0],
        [0.0, c, -s, 0.0],
        [0.0, s, c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_y(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix([
        [c, 0.0, s, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [-s, 0.0, c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_z(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix([
        [c, -s, 0.0, 0.0],
        [s, c, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """
    Shear matrix; ``xy`` moves x in proportion to y, and so on.
    Singular for some combinations (e.g. xy == yx == 1), which surfaces as
    DegenerateTransform once the matrix is inverted.
    """
    return Matrix([
        [1.0, xy, xz, 0.0],
        [yx, 1.0, yz, 0.0],
        [zx, zy, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def chain(*transforms: Matrix) -> Matrix:
    """
    Composes transforms in application order: chain(a, b, c) == c * b * a.
    """
    return reduce(lambda acc, t: t * acc, transforms, IDENTITY)


def view_transform(from_point: Tuple, to: Tuple, up: Tuple) -> Matrix:
    """
    Builds the world-to-camera matrix for an eye at ``from_point`` looking at
    ``to``, with ``up`` roughly indicating the upward direction.
    """
    forward = (to - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix([
        [left.x, left.y, left.z, 0.0],
        [true_up.x, true_up.y, true_up.z, 0.0],
        [-forward.x, -forward.y, -forward.z, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])
    # Orientation is applied after moving the eye to the origin.
    return orientation * translation(-from_point.x, -from_point.y, -from_point.z)
