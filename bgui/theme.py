"""Layout enums and colour themes."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .vec import Vec, vec4


class Mode(enum.Enum):
    """How a size is measured."""

    RELATIVE = enum.auto()
    PIXEL = enum.auto()


class Orientation(enum.Enum):
    """The main axis along which a layout stacks its children."""

    VERTICAL = enum.auto()
    HORIZONTAL = enum.auto()


class Alignment(enum.Enum):
    """Placement of children along an axis."""

    START = enum.auto()
    CENTER = enum.auto()
    END = enum.auto()
    STRETCH = enum.auto()


@dataclass(frozen=True)
class Theme:
    """The colours used to draw the interface."""

    clear_color: Vec
    text_color: Vec
    box_color: Vec
    button_color: Vec
    button_border_color: Vec
    button_clicked_color: Vec
    button_hovered_color: Vec


LIGHT_THEME = Theme(
    clear_color=vec4(0.94, 0.94, 0.94, 1.0),
    text_color=vec4(0.0, 0.0, 0.0, 1.0),
    box_color=vec4(0.92, 0.92, 0.92, 1.0),
    button_color=vec4(0.9, 0.9, 0.9, 1.0),
    button_border_color=vec4(0.6, 0.6, 0.6, 1.0),
    button_clicked_color=vec4(0.88, 0.88, 0.88, 1.0),
    button_hovered_color=vec4(0.88, 0.88, 0.88, 1.0),
)

DARK_THEME = Theme(
    clear_color=vec4(0.06, 0.06, 0.06, 1.0),
    text_color=vec4(1.0, 1.0, 1.0, 1.0),
    box_color=vec4(0.08, 0.08, 0.08, 1.0),
    button_color=vec4(0.1, 0.1, 0.1, 1.0),
    button_border_color=vec4(0.04, 0.04, 0.04, 1.0),
    button_clicked_color=vec4(0.12, 0.12, 0.12, 1.0),
    button_hovered_color=vec4(0.12, 0.12, 0.12, 1.0),
)