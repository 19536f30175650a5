"""A clickable button with a text label."""

from __future__ import annotations

from typing import Callable

from .draw import DrawData
from .element import Element
from .gui import Gui
from .text import Text
from .theme import Alignment, Theme


def _half(value: float) -> int:
    return int(value / 2)


class Button(Element):
    """A bordered box around a label that queues ``function`` when released."""

    def __init__(self, name: str, scale: float, function: Callable[[], None]) -> None:
        super().__init__()
        self.label = Text(name, scale)
        self.function = function
        self.alignment = Alignment.CENTER
        self.apply_theme(Gui.instance().theme)
        self.material.shader_tag = "ui::default"

    def update(self) -> None:
        """Reset the background colour and fit the box around the label."""
        self.material.set("bg_color", Gui.instance().theme.button_color)
        spacing_x, spacing_y = self.intern_spacing
        self.set_size(self.label.width + spacing_x * 2, self.label.height + spacing_y * 2)

    def collect_requests(self, data: DrawData) -> None:
        """Queue the box, place the label by the alignment, then queue the label."""
        super().collect_requests(data)
        label = self.label
        spacing_x, spacing_y = self.intern_spacing
        if self.alignment is Alignment.START:
            label.set_position(self.x + spacing_x, self.y + spacing_y)
        elif self.alignment is Alignment.CENTER:
            label.set_position(
                self.x + _half(self.width - label.width),
                self.y + _half(self.height - label.height),
            )
        elif self.alignment is Alignment.END:
            label.set_position(
                self.x + self.width - label.width - spacing_x,
                self.y + self.height - label.height - spacing_y,
            )
        label.collect_requests(data)

    def apply_theme(self, theme: Theme) -> None:
        """Take button and label colours from ``theme`` and show the button."""
        self.material.set("bg_color", theme.button_color)
        self.material.set("bordered", True)
        self.material.set("border_radius", 4.0)
        self.material.set("border_size", 1.0)
        self.material.set("border_color", theme.button_border_color)
        self.visible = True
        self.label.apply_theme(theme)

    def on_released(self) -> None:
        """Queue the button's function for the next update."""
        Gui.instance().add_call(self.function)

    def on_clicked(self) -> None:
        """Show the pressed colour."""
        self.material.set("bg_color", Gui.instance().theme.button_clicked_color)

    def on_mouse_hover(self) -> None:
        """Show the hovered colour."""
        self.material.set("bg_color", Gui.instance().theme.button_hovered_color)