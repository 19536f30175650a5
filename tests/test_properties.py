import pytest

from bgui.mat import Mat
from bgui.properties import Material, Property, PropertyType, Texture
from bgui.vec import vec2, vec3, vec4


def test_default_property_is_int_zero():
    p = Property()
    assert p.type is PropertyType.INT
    assert p.value == 0


def test_property_type_codes():
    assert Property.from_value(vec2(0, 0)).type == 0x0
    assert Property.from_value(Mat(4, 4)).type == 0x3
    assert Property().type == 0x5


@pytest.mark.parametrize(
    "value, expected",
    [
        (vec2(1, 2), PropertyType.VEC2),
        (vec3(1, 2, 3), PropertyType.VEC3),
        (vec4(1, 2, 3, 4), PropertyType.VEC4),
        (Mat(4, 4), PropertyType.MAT4),
        (1.5, PropertyType.FLOAT),
        (7, PropertyType.INT),
        (True, PropertyType.INT),
    ],
)
def test_from_value_infers_type(value, expected):
    assert Property.from_value(value).type is expected


def test_bool_is_stored_as_int():
    p = Property.from_value(True)
    assert p.value == 1
    assert type(p.value) is int


def test_from_value_keeps_value():
    v = vec4(0.1, 0.2, 0.3, 1.0)
    assert Property.from_value(v).value == v


def test_from_value_rejects_bad_inputs():
    with pytest.raises(TypeError):
        Property.from_value("red")
    with pytest.raises(ValueError):
        Property.from_value(Mat(3, 3))


def test_property_equality_needs_same_type():
    assert Property.from_value(1.0) == Property.from_value(1.0)
    assert not (Property.from_value(1) == Property.from_value(1.0))


def test_texture_defaults_and_equality_on_buffer():
    a = Texture()
    assert a.path == "default"
    assert a.size == vec2()
    b = Texture(path="other", has_alpha=True)
    assert a == b
    c = Texture(buffer=bytearray(b"\x01\x02"))
    assert not (a == c)


def test_material_set_replaces_value():
    m = Material()
    m.set("border_size", 1.0)
    m.set("border_size", 2.0)
    assert m.properties["border_size"] == Property(PropertyType.FLOAT, 2.0)
    assert len(m.properties) == 1


def test_material_set_accepts_property():
    m = Material()
    prop = Property.from_value(vec4(1, 1, 1, 1))
    m.set("bg_color", prop)
    assert m.properties["bg_color"] is prop


def test_material_equality_ignores_properties():
    a = Material()
    b = Material()
    b.set("bordered", True)
    assert a == b
    assert a.shader_tag == "ui::default"
    assert a.use_tex is False
    assert not (a == Material(shader_tag="ui::text"))