"""Quad draw requests and the queue that collects them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque

from .properties import Material
from .vec import Vec, vec2, vec4


def _default_bounds() -> Vec:
    return vec4(0.0, 0.0, 100.0, 100.0)


@dataclass(eq=False)
class DrawRequest:
    """Everything needed to draw one textured or coloured quad."""

    material: Material
    count: int = 6
    bounds: Vec = field(default_factory=_default_bounds)
    uv_min: Vec = field(default_factory=vec2)
    uv_max: Vec = field(default_factory=vec2)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DrawRequest):
            return NotImplemented
        return (
            self.material == other.material
            and self.count == other.count
            and self.uv_max == other.uv_max
            and self.uv_min == other.uv_min
        )


class DrawData:
    """A first-in, first-out queue of draw requests."""

    def __init__(self) -> None:
        self._requests: Deque[DrawRequest] = deque()

    def push(self, request: DrawRequest) -> None:
        """Append a request to the back of the queue."""
        self._requests.append(request)

    def pop(self) -> DrawRequest:
        """Remove and return the oldest request; raises IndexError when empty."""
        if not self._requests:
            raise IndexError("pop from empty draw data")
        return self._requests.popleft()

    def clear(self) -> None:
        """Drop every queued request."""
        self._requests.clear()

    def __len__(self) -> int:
        return len(self._requests)