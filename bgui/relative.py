"""A layout whose children keep the positions they were given."""

from __future__ import annotations

from .layout import Layout
from .theme import Orientation


class Relative(Layout):
    """Leaves its children where they are; neither updates nor resizes them."""

    def __init__(self, orientation: Orientation = Orientation.HORIZONTAL) -> None:
        super().__init__()
        self.orientation = orientation
        self.visible = False
        self.material.shader_tag = "ui::default"

    def update(self) -> None:
        """Children are not moved or updated."""

    def fit_to_content(self) -> None:
        """The size is left as set."""