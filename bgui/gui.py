"""The interface root: theme, main layout, queued calls and input dispatch."""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Optional

from .draw import DrawData
from .theme import LIGHT_THEME, Theme
from .window import InputKey, get_mouse_position, get_pressed, get_window_size


class NotInitializedError(RuntimeError):
    """Raised when the interface is used before ``set_up``."""

    def __init__(self) -> None:
        super().__init__("You must initialize the library.")


class Gui:
    """Owns the main layout and drives its update, input and draw cycle."""

    _instance: Optional["Gui"] = None

    def __init__(self, theme: Theme = LIGHT_THEME) -> None:
        self._theme = theme
        self._draw_data = DrawData()
        self._calls: Deque[Callable[[], None]] = deque()
        self._layout = None
        self._last_mouse_left = False
        self._initialized = False

    @classmethod
    def instance(cls) -> "Gui":
        """Return the process-wide interface."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def _require_init(self) -> None:
        if not self._initialized:
            raise NotInitializedError()

    def set_up(self) -> None:
        """Mark the interface ready, create a main layout if none is set, apply the theme."""
        self._initialized = True
        if self._layout is None:
            from .layout import Layout

            self._layout = Layout()
        self.apply_theme(self._theme)

    def shutdown(self) -> bool:
        """Drop pending calls and draw requests; ``set_up`` is needed again afterwards."""
        self._calls.clear()
        self._draw_data.clear()
        self._initialized = False
        return True

    def add_call(self, function: Callable[[], None]) -> None:
        """Queue ``function`` to run at the start of the next update."""
        self._require_init()
        self._calls.append(function)

    @property
    def layout(self):
        """The main layout."""
        self._require_init()
        return self._layout

    def set_layout(self, layout):
        """Replace the main layout and return it."""
        self._layout = layout
        return layout

    def apply_theme(self, theme: Theme) -> None:
        """Switch to ``theme`` and pass it down the layout tree."""
        self._require_init()
        self._theme = theme
        self._layout.apply_theme(theme)

    @property
    def theme(self) -> Theme:
        """The current theme."""
        self._require_init()
        return self._theme

    @property
    def draw_data(self) -> DrawData:
        """The draw requests produced by the last update."""
        self._require_init()
        return self._draw_data

    def update(self) -> None:
        """Fit the main layout to the window, update it and rebuild the draw requests."""
        self._require_init()
        width, height = get_window_size()
        self._layout.set_rect(0, 0, int(width), int(height))
        self.update_layout(self._layout)
        self._draw_data.clear()
        self._layout.collect_requests(self._draw_data)

    def update_inputs(self, lay) -> bool:
        """Dispatch mouse events in ``lay``, topmost first; return True once one is consumed."""
        mouse_x, mouse_y = get_mouse_position()
        mouse_now = get_pressed(InputKey.MOUSE_LEFT)
        mouse_click = mouse_now and not self._last_mouse_left
        mouse_released = not mouse_now and self._last_mouse_left

        modals = lay.modals
        for elem in reversed(lay.elements):
            child = elem.as_layout()
            if child is not None and self.update_inputs(child):
                return True

            x = elem.x + lay.x
            y = elem.y + lay.y
            inside = x <= mouse_x <= x + elem.width and y <= mouse_y <= y + elem.height

            if modals:
                self.update_inputs(modals[0])
                return True
            if inside:
                elem.on_mouse_hover()
                if mouse_click:
                    elem.on_clicked()
                    return True
                if mouse_released:
                    elem.on_released()
                    return True
        return False

    def update_layout(self, lay) -> None:
        """Run queued calls, update ``lay`` and dispatch input to it."""
        self._require_init()
        while self._calls:
            self._calls.popleft()()
        lay.update()
        self.update_inputs(lay)
        self._last_mouse_left = get_pressed(InputKey.MOUSE_LEFT)