import pytest

from bgui.draw import DrawData, DrawRequest
from bgui.properties import Material, Texture
from bgui.vec import vec2, vec4


def test_request_defaults():
    r = DrawRequest(Material())
    assert r.count == 6
    assert r.bounds == vec4(0.0, 0.0, 100.0, 100.0)
    assert r.uv_min == vec2()
    assert r.uv_max == vec2()


def test_request_keeps_material_reference():
    m = Material()
    r = DrawRequest(m)
    m.set("bordered", True)
    assert r.material is m
    assert "bordered" in r.material.properties


def test_request_equality_ignores_bounds():
    m = Material()
    a = DrawRequest(m, bounds=vec4(1, 2, 3, 4))
    b = DrawRequest(m, bounds=vec4(5, 6, 7, 8))
    assert a == b


def test_request_equality_checks_uv_count_and_material():
    m = Material()
    base = DrawRequest(m)
    assert not (base == DrawRequest(m, uv_max=vec2(1, 1)))
    assert not (base == DrawRequest(m, count=3))
    other = Material(texture=Texture(buffer=bytearray(b"\xff")))
    assert not (base == DrawRequest(other))


def test_queue_is_first_in_first_out():
    data = DrawData()
    requests = [DrawRequest(Material(), count=n) for n in (1, 2, 3)]
    for r in requests:
        data.push(r)
    assert len(data) == 3
    assert [data.pop() for _ in range(3)] == requests
    assert len(data) == 0


def test_pop_returns_same_object():
    data = DrawData()
    r = DrawRequest(Material())
    data.push(r)
    assert data.pop() is r


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        DrawData().pop()


def test_clear_empties_queue():
    data = DrawData()
    data.push(DrawRequest(Material()))
    data.push(DrawRequest(Material()))
    data.clear()
    assert len(data) == 0
    assert not data