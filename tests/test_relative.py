import pytest

from bgui.draw import DrawData
from bgui.element import Element
from bgui.gui import Gui
from bgui.relative import Relative
from bgui.theme import LIGHT_THEME, Orientation
from bgui.vec import vec2


class Box(Element):
    def __init__(self, x=0, y=0, w=0, h=0):
        super().__init__()
        self.set_rect(x, y, w, h)
        self.visible = True
        self.updates = 0

    def update(self):
        self.updates += 1


@pytest.fixture(autouse=True)
def gui():
    g = Gui.instance()
    g.set_up()
    g.apply_theme(LIGHT_THEME)
    yield g


def test_constructor_settings():
    rel = Relative(Orientation.VERTICAL)
    assert rel.orientation is Orientation.VERTICAL
    assert rel.shader_tag == "ui::default"
    assert rel.visible is False
    assert rel.as_layout() is rel


def test_default_orientation_is_horizontal():
    assert Relative().orientation is Orientation.HORIZONTAL


def test_update_leaves_children_alone():
    rel = Relative()
    box = rel.add(Box(5, 6, 7, 8))
    rel.update()
    assert box.updates == 0
    assert box.position == vec2(5, 6)


def test_fit_to_content_keeps_size():
    rel = Relative()
    rel.set_size(40, 50)
    rel.add(Box(0, 0, 100, 100))
    rel.fit_to_content()
    assert rel.size == vec2(40, 50)


def test_collect_requests_offsets_children():
    rel = Relative()
    rel.set_position(7, 9)
    box = rel.add(Box(1, 1, 4, 4))
    data = DrawData()
    rel.collect_requests(data)
    assert len(data) == 1
    assert box.position == vec2(7 + 1, 9 + 1)