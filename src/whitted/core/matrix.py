# core/matrix.py
import math
from typing import Iterable, Optional

import numpy as np
from numba import njit

from whitted.core.tuples import Tuple
from whitted.core.utils import EPSILON


class DegenerateTransform(ValueError):
    """
    Raised when a non-invertible matrix is inverted. Transforms built from the
    primitives in core.transform are always invertible, so this signals bad
    scene data rather than a recoverable condition.
    """


@njit(cache=True)
def _determinant4(m):
    s0 = m[0, 0] * m[1, 1] - m[1, 0] * m[0, 1]
    s1 = m[0, 0] * m[1, 2] - m[1, 0] * m[0, 2]
    s2 = m[0, 0] * m[1, 3] - m[1, 0] * m[0, 3]
    s3 = m[0, 1] * m[1, 2] - m[1, 1] * m[0, 2]
    s4 = m[0, 1] * m[1, 3] - m[1, 1] * m[0, 3]
    s5 = m[0, 2] * m[1, 3] - m[1, 2] * m[0, 3]

    c5 = m[2, 2] * m[3, 3] - m[3, 2] * m[2, 3]
    c4 = m[2, 1] * m[3, 3] - m[3, 1] * m[2, 3]
    c3 = m[2, 1] * m[3, 2] - m[3, 1] * m[2, 2]
    c2 = m[2, 0] * m[3, 3] - m[3, 0] * m[2, 3]
    c1 = m[2, 0] * m[3, 2] - m[3, 0] * m[2, 2]
    c0 = m[2, 0] * m[3, 1] - m[3, 0] * m[2, 1]

    return s0 * c5 - s1 * c4 + s2 * c3 + s3 * c2 - s4 * c1 + s5 * c0


@njit(cache=True)
def _inverse4(m, det):
    # Closed-form adjugate of a 4x4 built from its 2x2 sub-determinants.
    s0 = m[0, 0] * m[1, 1] - m[1, 0] * m[0, 1]
    s1 = m[0, 0] * m[1, 2] - m[1, 0] * m[0, 2]
    s2 = m[0, 0] * m[1, 3] - m[1, 0] * m[0, 3]
    s3 = m[0, 1] * m[1, 2] - m[1, 1] * m[0, 2]
    s4 = m[0, 1] * m[1, 3] - m[1, 1] * m[0, 3]
    s5 = m[0, 2] * m[1, 3] - m[1, 2] * m[0, 3]

    c5 = m[2, 2] * m[3, 3] - m[3, 2] * m[2, 3]
    c4 = m[2, 1] * m[3, 3] - m[3, 1] * m[2, 3]
    c3 = m[2, 1] * m[3, 2] - m[3, 1] * m[2, 2]
    c2 = m[2, 0] * m[3, 3] - m[3, 0] * m[2, 3]
    c1 = m[2, 0] * m[3, 2] - m[3, 0] * m[2, 2]
    c0 = m[2, 0] * m[3, 1] - m[3, 0] * m[2, 1]

    inv = 1.0 / det
    out = np.empty((4, 4), dtype=np.float64)

    out[0, 0] = (m[1, 1] * c5 - m[1, 2] * c4 + m[1, 3] * c3) * inv
    out[0, 1] = (-m[0, 1] * c5 + m[0, 2] * c4 - m[0, 3] * c3) * inv
    out[0, 2] = (m[3, 1] * s5 - m[3, 2] * s4 + m[3, 3] * s3) * inv
    out[0, 3] = (-m[2, 1] * s5 + m[2, 2] * s4 - m[2, 3] * s3) * inv

    out[1, 0] = (-m[1, 0] * c5 + m[1, 2] * c2 - m[1, 3] * c1) * inv
    out[1, 1] = (m[0, 0] * c5 - m[0, 2] * c2 + m[0, 3] * c1) * inv
    out[1, 2] = (-m[3, 0] * s5 + m[3, 2] * s2 - m[3, 3] * s1) * inv
    out[1, 3] = (m[2, 0] * s5 - m[2, 2] * s2 + m[2, 3] * s1) * inv

    out[2, 0] = (m[1, 0] * c4 - m[1, 1] * c2 + m[1, 3] * c0) * inv
    out[2, 1] = (-m[0, 0] * c4 + m[0, 1] * c2 - m[0, 3] * c0) * inv
    out[2, 2] = (m[3, 0] * s4 - m[3, 1] * s2 + m[3, 3] * s0) * inv
    out[2, 3] = (-m[2, 0] * s4 + m[2, 1] * s2 - m[2, 3] * s0) * inv

    out[3, 0] = (-m[1, 0] * c3 + m[1, 1] * c1 - m[1, 2] * c0) * inv
    out[3, 1] = (m[0, 0] * c3 - m[0, 1] * c1 + m[0, 2] * c0) * inv
    out[3, 2] = (-m[3, 0] * s3 + m[3, 1] * s1 - m[3, 2] * s0) * inv
    out[3, 3] = (m[2, 0] * s3 - m[2, 1] * s1 + m[2, 2] * s0) * inv
    return out


class Matrix:
    """
    An immutable 4x4 matrix of float64 values.

    The values live in a read-only numpy array; a tuple-of-tuples copy is kept
    for the Matrix * Tuple product, which runs once per ray per shape and is
    cheaper in plain Python than through numpy for a single 4-vector.
    The inverse is computed on first use and cached on the instance.
    """
    __slots__ = ("_data", "_rows", "_inverse")

    def __init__(self, rows: Iterable[Iterable[float]]):
        data = np.array(rows, dtype=np.float64)
        if data.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {data.shape}")
        data.setflags(write=False)
        self._data = data
        self._rows = tuple(tuple(row) for row in data.tolist())
        self._inverse: Optional["Matrix"] = None

    @classmethod
    def identity(cls) -> "Matrix":
        return cls(np.identity(4))

    def __getitem__(self, index) -> float:
        row, col = index
        return self._rows[row][col]

    def to_numpy(self) -> np.ndarray:
        return self._data

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return Matrix(self._data @ other._data)
        if isinstance(other, Tuple):
            r0, r1, r2, r3 = self._rows
            x, y, z, w = other.x, other.y, other.z, other.w
            return Tuple(
                r0[0] * x + r0[1] * y + r0[2] * z + r0[3] * w,
                r1[0] * x + r1[1] * y + r1[2] * z + r1[3] * w,
                r2[0] * x + r2[1] * y + r2[2] * z + r2[3] * w,
                r3[0] * x + r3[1] * y + r3[2] * z + r3[3] * w,
            )
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.all(np.abs(self._data - other._data) < EPSILON))

    def transpose(self) -> "Matrix":
        return Matrix(self._data.T)

    def determinant(self) -> float:
        return float(_determinant4(self._data))

    def is_invertible(self) -> bool:
        det = self.determinant()
        return det != 0.0 and math.isfinite(det)

    def inverse(self) -> "Matrix":
        """
        Returns the inverse matrix.

        Raises:
            DegenerateTransform: if the determinant is zero or not finite.
        """
        if self._inverse is None:
            det = self.determinant()
            if det == 0.0 or not math.isfinite(det):
                raise DegenerateTransform(f"matrix is not invertible (determinant {det})")
            self._inverse = Matrix(_inverse4(self._data, det))
        return self._inverse

    def submatrix(self, row: int, col: int) -> np.ndarray:
        """
        Returns a copy of the values with one row and one column removed.
        """
        return np.delete(np.delete(self._data, row, axis=0), col, axis=1)

    def minor(self, row: int, col: int) -> float:
        return float(np.linalg.det(self.submatrix(row, col)))

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 else minor

    def __repr__(self) -> str:
        return f"Matrix({[list(row) for row in self._rows]})"


IDENTITY = Matrix.identity()
