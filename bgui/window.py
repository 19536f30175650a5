"""Window state shared between the backend and the interface: size, mouse and buttons."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Dict

from .mat import Mat, orthographic
from .vec import Vec, vec2


class InputKey(enum.Enum):
    """Input sources the interface reacts to."""

    NONE = enum.auto()
    MOUSE_LEFT = enum.auto()
    MOUSE_RIGHT = enum.auto()
    MOUSE_MIDDLE = enum.auto()


class InputAction(enum.Enum):
    """The last thing that happened to an input source."""

    NONE = enum.auto()
    PRESS = enum.auto()
    RELEASE = enum.auto()
    REPEAT = enum.auto()


def _default_size() -> Vec:
    return vec2(800, 600)


@dataclass
class WindowIO:
    """Mutable state of the window as last reported by the backend."""

    size: Vec = field(default_factory=_default_size)
    mouse_position: Vec = field(default_factory=vec2)
    input_map: Dict[InputKey, InputAction] = field(default_factory=dict)
    title: str = ""


_WINDOW_IO = WindowIO()


def window_io() -> WindowIO:
    """Return the process-wide window state."""
    return _WINDOW_IO


def get_window_size() -> Vec:
    """Return the window size in pixels as ``(width, height)``."""
    return _WINDOW_IO.size


def get_mouse_position() -> Vec:
    """Return the mouse position in window pixels."""
    return _WINDOW_IO.mouse_position


def read_file(path) -> str:
    """Return the whole text of the file at ``path``."""
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read()
    except OSError as exc:
        raise OSError(f"Failed to open file: {path}") from exc


def get_projection() -> Mat:
    """Return a pixel-space orthographic projection with the origin at the top left."""
    width, height = get_window_size()
    return orthographic(0.0, float(width), float(height), 0.0)


def get_pressed(key: InputKey) -> bool:
    """Return whether ``key`` is currently held down."""
    return _WINDOW_IO.input_map.get(key, InputAction.NONE) is InputAction.PRESS