"""An element that holds editable text."""

from __future__ import annotations

from .draw import DrawData
from .element import Element
from .gui import Gui
from .text import Text
from .theme import Theme


class TextInput(Element):
    """A text field showing its buffer, with a placeholder for when it is empty."""

    def __init__(self, buffer: str, scale: float, placeholder: str = "") -> None:
        super().__init__()
        self._text = Text(buffer, scale)
        self.placeholder = placeholder
        self.apply_theme(Gui.instance().theme)
        self.visible = False
        self.material.shader_tag = "ui::default"

    @property
    def text(self) -> Text:
        """The text element holding the typed content."""
        return self._text

    def on_clicked(self) -> None:
        """Clicking does not change the field."""

    def on_released(self) -> None:
        """Releasing does not change the field."""

    def on_mouse_hover(self) -> None:
        """Hovering does not change the field."""

    def update(self) -> None:
        """The field has no per-frame state."""

    def collect_requests(self, data: DrawData) -> None:
        """Queue the background when visible, then the text."""
        super().collect_requests(data)
        self._text.collect_requests(data)

    def apply_theme(self, theme: Theme) -> None:
        """Pass ``theme`` to the text."""
        self._text.apply_theme(theme)