"""The base class of every interface part: geometry, spacing, material and input hooks."""

from __future__ import annotations

from typing import Optional, Tuple

from .draw import DrawData, DrawRequest
from .properties import Material
from .theme import Alignment, Mode, Orientation, Theme
from .vec import Vec, vec2, vec4


def _unsigned_pair(first: int, second: int, what: str) -> Tuple[int, int]:
    first, second = int(first), int(second)
    if first < 0 or second < 0:
        raise ValueError(f"{what} must not be negative: ({first}, {second})")
    return first, second


class Element:
    """A rectangle on screen with a material, spacing settings and input callbacks."""

    def __init__(self) -> None:
        self.orientation = Orientation.HORIZONTAL
        self.alignment = Alignment.START
        self.cross_alignment = Alignment.START
        self.spacing_elements: Tuple[int, int] = (1, 1)
        self.material = Material()
        self.visible = False
        self.size_mode: Tuple[Mode, Mode] = (Mode.PIXEL, Mode.PIXEL)
        self.intern_spacing: Tuple[int, int] = (0, 0)
        self.extern_spacing: Tuple[int, int] = (0, 0)
        self.padding: Tuple[int, int] = (0, 0)
        self._bounds = [0.0, 0.0, 0.0, 0.0]

    def set_intern_spacing(self, x: int, y: int) -> None:
        """Set the space between the border and the content."""
        self.intern_spacing = _unsigned_pair(x, y, "intern spacing")

    def set_extern_spacing(self, x: int, y: int) -> None:
        """Set the space kept around the element."""
        self.extern_spacing = _unsigned_pair(x, y, "extern spacing")

    def set_padding(self, x: int, y: int) -> None:
        """Set the padding used when placing children."""
        self.padding = _unsigned_pair(x, y, "padding")

    def set_position(self, x: int, y: int) -> None:
        """Move the element; coordinates are truncated to whole pixels."""
        self._bounds[0] = int(x)
        self._bounds[1] = int(y)

    def set_size(self, width: int, height: int) -> None:
        """Resize the element; sizes are truncated to whole pixels."""
        self._bounds[2] = int(width)
        self._bounds[3] = int(height)

    def set_width(self, w: float, mode: Mode = Mode.PIXEL) -> None:
        """Set the width and how it is measured."""
        self.size_mode = (mode, self.size_mode[1])
        self._bounds[2] = w

    def set_height(self, h: float, mode: Mode = Mode.PIXEL) -> None:
        """Set the height and how it is measured."""
        self.size_mode = (self.size_mode[0], mode)
        self._bounds[3] = h

    def set_rect(self, x: int, y: int, width: int, height: int) -> None:
        """Set position and size at once."""
        self.set_position(x, y)
        self.set_size(width, height)

    def set_spacing_elements(self, a: int, b: int) -> None:
        """Set the gap left between children along each axis."""
        self.spacing_elements = _unsigned_pair(a, b, "element spacing")

    @property
    def shader_tag(self) -> str:
        """The tag of the shader that draws this element."""
        return self.material.shader_tag

    @shader_tag.setter
    def shader_tag(self, tag: str) -> None:
        self.material.shader_tag = tag

    @property
    def x(self) -> int:
        """Horizontal position in whole pixels."""
        return int(self._bounds[0])

    @x.setter
    def x(self, value: int) -> None:
        self._bounds[0] = int(value)

    @property
    def y(self) -> int:
        """Vertical position in whole pixels."""
        return int(self._bounds[1])

    @y.setter
    def y(self, value: int) -> None:
        self._bounds[1] = int(value)

    @property
    def width(self) -> int:
        """Width in whole pixels."""
        return int(self._bounds[2])

    @property
    def height(self) -> int:
        """Height in whole pixels."""
        return int(self._bounds[3])

    @property
    def size(self) -> Vec:
        """``(width, height)`` in whole pixels."""
        return vec2(self.width, self.height)

    @property
    def position(self) -> Vec:
        """``(x, y)`` in whole pixels."""
        return vec2(self.x, self.y)

    @property
    def bounds(self) -> Vec:
        """``(x, y, width, height)`` as stored."""
        return vec4(*self._bounds)

    def as_layout(self) -> Optional["Element"]:
        """Return this element as a layout, or None when it holds no children."""
        return None

    def update(self) -> None:
        """Advance the element's state by one frame."""

    def apply_theme(self, theme: Theme) -> None:
        """Take colours from ``theme``."""

    def on_clicked(self) -> None:
        """Called when the mouse button goes down over the element."""

    def on_released(self) -> None:
        """Called when the mouse button goes up over the element."""

    def on_mouse_hover(self) -> None:
        """Called while the mouse is over the element."""

    def collect_requests(self, data: DrawData) -> None:
        """Queue the element's background quad when it is visible."""
        if not self.visible:
            return
        data.push(DrawRequest(self.material, 6, self.bounds))