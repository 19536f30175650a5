"""Containers that own child elements and a queue of modal layouts."""

from __future__ import annotations

from collections import deque
from typing import Deque, List, TypeVar

from .draw import DrawData
from .element import Element
from .gui import Gui
from .theme import Theme

E = TypeVar("E", bound=Element)
L = TypeVar("L", bound="Layout")


def _half(value: int) -> int:
    """Halve an integer, truncating toward zero."""
    return int(value / 2)


class Layout(Element):
    """An element that holds children at absolute positions and shows one modal at a time."""

    def __init__(self) -> None:
        super().__init__()
        self._elements: List[Element] = []
        self._modals: Deque["Layout"] = deque()
        self.visible = False
        self.apply_theme(Gui.instance().theme)

    def apply_theme(self, theme: Theme) -> None:
        """Take box colours from ``theme`` and pass it on to every child."""
        self.material.set("bg_color", theme.box_color)
        self.material.set("bordered", True)
        self.material.set("border_radius", 4.0)
        self.material.set("border_size", 1.0)
        self.material.set("border_color", theme.button_border_color)
        for elem in self._elements:
            elem.apply_theme(theme)

    def add(self, element: E) -> E:
        """Append ``element`` as the topmost child and return it."""
        self._elements.append(element)
        return element

    def new_modal(self, modal: L) -> L:
        """Queue ``modal`` behind any modal already shown and return it."""
        self._modals.append(modal)
        return modal

    def remove(self, element: Element) -> bool:
        """Remove ``element`` from the children; return whether it was there."""
        kept = [e for e in self._elements if e is not element]
        if len(kept) == len(self._elements):
            return False
        self._elements[:] = kept
        return True

    def update(self) -> None:
        """Update every child, then fit and centre the front modal."""
        for elem in self._elements:
            elem.update()
        if self._modals:
            modal = self._modals[0]
            modal.update()
            modal.fit_to_content()
            modal.set_position(
                self.x + _half(self.width) - _half(modal.width),
                self.y + _half(self.height) - _half(modal.height),
            )

    def collect_requests(self, data: DrawData) -> None:
        """Queue the background, offset each child by this layout's position and queue it."""
        super().collect_requests(data)
        for elem in self._elements:
            elem.set_position(elem.x + self.x, elem.y + self.y)
            elem.collect_requests(data)
        if self._modals:
            self._modals[0].collect_requests(data)

    def fit_to_content(self) -> None:
        """Grow or shrink to the furthest right and bottom edges of the children."""
        max_width = 0
        max_height = 0
        for elem in self._elements:
            max_width = max(max_width, elem.x + elem.width)
            max_height = max(max_height, elem.y + elem.height)
        self.set_size(max_width, max_height)

    @property
    def elements(self) -> List[Element]:
        """The children, bottom first."""
        return self._elements

    @property
    def modals(self) -> Deque["Layout"]:
        """The queued modals; the front one is shown."""
        return self._modals

    def pop_modal(self) -> "Layout":
        """Close and return the front modal; raises IndexError when there is none."""
        if not self._modals:
            raise IndexError("no modal to pop")
        return self._modals.popleft()

    def as_layout(self) -> "Layout":
        """A layout is its own layout."""
        return self