"""Window creation, event pumping and mouse input on top of pyglet."""

from __future__ import annotations

from .vec import vec2
from .window import InputAction, InputKey, window_io

# Button codes as reported by pyglet.window.mouse.
MOUSE_LEFT = 1
MOUSE_MIDDLE = 2
MOUSE_RIGHT = 4

_BUTTONS = {
    MOUSE_LEFT: InputKey.MOUSE_LEFT,
    MOUSE_RIGHT: InputKey.MOUSE_RIGHT,
    MOUSE_MIDDLE: InputKey.MOUSE_MIDDLE,
}
_ACTIONS = frozenset({InputAction.PRESS, InputAction.RELEASE, InputAction.REPEAT})


def _track_cursor(window, x, y) -> None:
    # pyglet measures y from the bottom; the interface measures it from the top.
    window_io().mouse_position = vec2(int(x), int(window.height - y))


def set_up_window(width: int, height: int, title: str):
    """Open a window with an OpenGL 3.3 context and hook its mouse events."""
    import pyglet

    config = pyglet.gl.Config(
        major_version=3, minor_version=3, forward_compatible=True, double_buffer=True
    )
    try:
        window = pyglet.window.Window(
            width=width, height=height, caption=title, config=config, vsync=True
        )
    except Exception as exc:
        raise RuntimeError("Failed to create window") from exc

    io = window_io()
    io.title = title
    io.size = vec2(width, height)

    def on_mouse_press(x, y, button, modifiers):
        _track_cursor(window, x, y)
        on_mouse_button(button, InputAction.PRESS)

    def on_mouse_release(x, y, button, modifiers):
        _track_cursor(window, x, y)
        on_mouse_button(button, InputAction.RELEASE)

    def on_mouse_motion(x, y, dx, dy):
        _track_cursor(window, x, y)

    def on_mouse_drag(x, y, dx, dy, buttons, modifiers):
        _track_cursor(window, x, y)

    window.push_handlers(
        on_mouse_press=on_mouse_press,
        on_mouse_release=on_mouse_release,
        on_mouse_motion=on_mouse_motion,
        on_mouse_drag=on_mouse_drag,
    )
    window.switch_to()
    return window


def update_window(window) -> None:
    """Process pending events and record the current window size."""
    window.dispatch_events()
    width, height = window.get_size()
    window_io().size = vec2(width, height)


def on_mouse_button(button: int, action: InputAction) -> None:
    """Record ``action`` for a mouse ``button``; unknown buttons raise KeyError."""
    try:
        key = _BUTTONS[button]
    except KeyError:
        raise KeyError(f"unsupported mouse button: {button!r}") from None
    if action not in _ACTIONS:
        raise ValueError(f"unsupported mouse action: {action!r}")
    window_io().input_map[key] = action


def shutdown_window(window) -> None:
    """Close ``window``."""
    window.close()