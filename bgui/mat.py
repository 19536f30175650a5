"""Row-major matrices and the projection helpers built on them."""

from __future__ import annotations

from numbers import Real
from typing import Tuple, Union


class Mat:
    """A ``rows`` by ``cols`` matrix; square matrices start as identity, others as zero."""

    __slots__ = ("rows", "cols", "_m")

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError("matrix dimensions must be positive")
        self.rows = rows
        self.cols = cols
        self._m = [0.0] * (rows * cols)
        if rows == cols:
            for i in range(rows):
                self._m[i * cols + i] = 1.0

    def _offset(self, key: Tuple[int, int]) -> int:
        row, col = key
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"index {key} out of range for {self.rows}x{self.cols}")
        return row * self.cols + col

    def __getitem__(self, key: Tuple[int, int]) -> float:
        return self._m[self._offset(key)]

    def __setitem__(self, key: Tuple[int, int], value: float) -> None:
        self._m[self._offset(key)] = value

    def _product(self, other: "Mat") -> "Mat":
        if self.cols != other.rows:
            raise ValueError(
                f"cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}"
            )
        result = Mat(self.rows, other.cols)
        result._m = [
            sum(self[i, k] * other[k, j] for k in range(self.cols))
            for i in range(self.rows)
            for j in range(other.cols)
        ]
        return result

    def __mul__(self, other: Union["Mat", float]) -> "Mat":
        if isinstance(other, Mat):
            return self._product(other)
        if isinstance(other, Real):
            result = Mat(self.rows, self.cols)
            result._m = [v * other for v in self._m]
            return result
        return NotImplemented

    def __imul__(self, other: Union["Mat", float]) -> "Mat":
        if isinstance(other, Mat):
            if self.rows != self.cols:
                raise ValueError("in-place matrix product needs a square matrix")
            self._m = self._product(other)._m
            return self
        if isinstance(other, Real):
            self._m = [v * other for v in self._m]
            return self
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat):
            return NotImplemented
        return (self.rows, self.cols, self._m) == (other.rows, other.cols, other._m)

    __hash__ = None  # mutable

    def data(self) -> Tuple[float, ...]:
        """Return the components in storage order."""
        return tuple(self._m)

    def __repr__(self) -> str:
        return f"Mat({self.rows}, {self.cols}, {self._m!r})"


def orthographic(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float = -1.0,
    far: float = 1.0,
) -> Mat:
    """Return an orthographic projection laid out for column-major upload."""
    m = Mat(4, 4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[3, 0] = -(right + left) / (right - left)
    m[3, 1] = -(top + bottom) / (top - bottom)
    m[3, 2] = -(far + near) / (far - near)
    m[3, 3] = 1.0
    return m


def translate(m: Mat, x: float, y: float, z: float) -> None:
    """Add a translation to ``m`` in place."""
    m[3, 0] += x
    m[3, 1] += y
    m[3, 2] += z


def scale(m: Mat, sx: float, sy: float, sz: float) -> None:
    """Scale the diagonal of ``m`` in place."""
    m[0, 0] *= sx
    m[1, 1] *= sy
    m[2, 2] *= sz