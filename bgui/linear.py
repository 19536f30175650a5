"""A layout that stacks its children along one axis."""

from __future__ import annotations

from .layout import Layout
from .theme import Alignment, Orientation


def _half(value: int) -> int:
    """Halve an integer, truncating toward zero."""
    return int(value / 2)


class Linear(Layout):
    """Places children one after another, horizontally or vertically, in insertion order."""

    def __init__(self, orientation: Orientation = Orientation.HORIZONTAL) -> None:
        super().__init__()
        self.orientation = orientation
        self.visible = False
        self.material.shader_tag = "ui::default"

    def update(self) -> None:
        """Update the children and place them along the main axis, aligned on both axes."""
        if not self.elements:
            return
        super().update()

        vertical = self.orientation is Orientation.VERTICAL
        main = 1 if vertical else 0
        cross = 0 if vertical else 1

        spacing = self.spacing_elements[main]
        size = self.size
        available_main = size[main] - self.padding[main] * 2

        total_main = sum(elem.size[main] for elem in self.elements)
        if len(self.elements) > 1:
            total_main += spacing * (len(self.elements) - 1)

        cursor = 0
        if self.alignment is Alignment.START:
            cursor = self.padding[main]
        elif self.alignment is Alignment.CENTER:
            cursor = _half(available_main - total_main) + self.padding[main]
        elif self.alignment is Alignment.END:
            cursor = available_main - total_main + self.padding[main]

        container_cross = size[cross]
        for elem in self.elements:
            cross_size = elem.size[cross]
            cross_pos = 0
            if self.cross_alignment is Alignment.START:
                cross_pos = self.padding[cross]
            elif self.cross_alignment is Alignment.CENTER:
                cross_pos = _half(container_cross - cross_size)
            elif self.cross_alignment is Alignment.END:
                cross_pos = container_cross - cross_size - self.padding[cross]
            elif self.cross_alignment is Alignment.STRETCH:
                cross_pos = self.padding[cross]
                stretched = container_cross - self.padding[cross] * 2
                if vertical:
                    elem.set_width(stretched)
                else:
                    elem.set_height(stretched)

            if vertical:
                elem.x = cross_pos
                elem.y = cursor
            else:
                elem.x = cursor
                elem.y = cross_pos

            cursor += elem.size[main] + spacing

    def fit_to_content(self) -> None:
        """Size to the stacked children plus padding and their outer spacing."""
        vertical = self.orientation is Orientation.VERTICAL
        main = 1 if vertical else 0
        max_cross = 0
        for elem in self.elements:
            max_cross = max(max_cross, elem.width if vertical else elem.height)
        max_main = self.padding[main] * 2
        for elem in self.elements:
            max_main += elem.height if vertical else elem.width
            max_main += elem.extern_spacing[main] * 2

        if vertical:
            self.set_width(max_cross + self.padding[0] * 2)
            self.set_height(max_main)
        else:
            self.set_height(max_cross + self.padding[1] * 2)
            self.set_width(max_main)