"""Small fixed-size numeric vectors used for positions, sizes and colours."""

from __future__ import annotations

from numbers import Real
from typing import Iterable, Iterator, Union

Number = Union[int, float]


class Vec:
    """An immutable vector of numbers with component-wise arithmetic."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[Number]) -> None:
        self._values = tuple(values)

    def __getitem__(self, index):
        return self._values[index]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Number]:
        return iter(self._values)

    def _check_same_size(self, other: "Vec") -> None:
        if len(other) != len(self):
            raise ValueError(
                f"vector sizes differ: {len(self)} and {len(other)}"
            )

    def __add__(self, other: "Vec") -> "Vec":
        if not isinstance(other, Vec):
            return NotImplemented
        self._check_same_size(other)
        return Vec(a + b for a, b in zip(self, other))

    def __sub__(self, other: "Vec") -> "Vec":
        if not isinstance(other, Vec):
            return NotImplemented
        self._check_same_size(other)
        return Vec(a - b for a, b in zip(self, other))

    def __mul__(self, other: Union["Vec", Number]) -> "Vec":
        if isinstance(other, Vec):
            self._check_same_size(other)
            return Vec(a * b for a, b in zip(self, other))
        if isinstance(other, Real):
            return Vec(a * other for a in self)
        return NotImplemented

    def __truediv__(self, scalar: Number) -> "Vec":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec(a / scalar for a in self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"Vec({list(self._values)!r})"


def filled(size: int, scalar: Number) -> Vec:
    """Return a vector of ``size`` components all equal to ``scalar``."""
    if size < 0:
        raise ValueError("vector size must not be negative")
    return Vec([scalar] * size)


def _sized(size: int, args: tuple) -> Vec:
    values = list(args[:size])
    values.extend([0] * (size - len(values)))
    return Vec(values)


def vec2(*args: Number) -> Vec:
    """Build a two-component vector; missing components are zero, extras are dropped."""
    return _sized(2, args)


def vec3(*args: Number) -> Vec:
    """Build a three-component vector; missing components are zero, extras are dropped."""
    return _sized(3, args)


def vec4(*args: Number) -> Vec:
    """Build a four-component vector; missing components are zero, extras are dropped."""
    return _sized(4, args)