import types
from unittest import mock

import pytest

from bgui.mat import Mat
from bgui.properties import Property
from bgui.shader import (
    Shader,
    ShaderError,
    compile_stage,
    default_shader,
    link_program,
    resolve_sources,
    shader_from_tag,
    text_shader,
)
from bgui.vec import vec2, vec3, vec4

UNIFORMS = {"a", "b", "rect", "projection", "count", "border_size", "bordered"}


def make_backend(compile_ok=True, link_ok=True):
    module = types.ModuleType("pyglet.graphics.shader")
    module.programs = []

    class ShaderException(Exception):
        pass

    class StageShader:
        def __init__(self, source, shader_type):
            if not compile_ok:
                raise ShaderException("syntax error")
            self.source = source
            self.type = shader_type
            self.deleted = False

        def delete(self):
            self.deleted = True

    class ShaderProgram:
        def __init__(self, *shaders):
            if not link_ok:
                raise ShaderException("link error")
            self.shaders = shaders
            self.uniforms = {name: None for name in UNIFORMS}
            self.values = {}
            self.events = []
            module.programs.append(self)

        def use(self):
            self.events.append("use")

        def stop(self):
            self.events.append("stop")

        def __setitem__(self, name, value):
            self.values[name] = value

    module.ShaderException = ShaderException
    module.Shader = StageShader
    module.ShaderProgram = ShaderProgram
    return module


def _install(module):
    return mock.patch.dict("sys.modules", {"pyglet.graphics.shader": module})


@pytest.fixture
def backend():
    module = make_backend()
    with _install(module):
        yield module


def test_resolve_sources_known_names():
    vertex, fragment = resolve_sources("ui::default", "ui::text")
    assert "gl_Position" in vertex
    assert "uniform sampler2D tex;" in fragment


def test_resolve_sources_falls_back_to_defaults():
    assert resolve_sources("missing", "missing") == resolve_sources("ui::default", "ui::default")


def test_bind_without_program_raises():
    with pytest.raises(ShaderError, match="program is null"):
        Shader().bind()


def test_set_without_program_raises():
    with pytest.raises(ShaderError):
        Shader().set("rect", vec4(0, 0, 1, 1))


def test_compile_stage_returns_compiled_stage(backend):
    stage = compile_stage("vertex", "void main() {}")
    assert stage.type == "vertex"
    assert stage.source == "void main() {}"


def test_compile_stage_rejects_unknown_stage(backend):
    with pytest.raises(ValueError):
        compile_stage("geometry", "void main() {}")


def test_compile_stage_failure_names_stage():
    with _install(make_backend(compile_ok=False)):
        with pytest.raises(ShaderError, match=r"\(fragment\): syntax error"):
            compile_stage("fragment", "bad")


def test_link_program_deletes_stages(backend):
    vert = compile_stage("vertex", "v")
    frag = compile_stage("fragment", "f")
    program = link_program(vert, frag)
    assert program.shaders == (vert, frag)
    assert vert.deleted is True
    assert frag.deleted is True


def test_link_failure_raises():
    module = make_backend(link_ok=False)
    with _install(module):
        vert = compile_stage("vertex", "v")
        frag = compile_stage("fragment", "f")
        with pytest.raises(ShaderError, match="Shader link failed"):
            link_program(vert, frag)


def test_compile_failure_in_shader_mentions_vertex():
    with _install(make_backend(compile_ok=False)):
        with pytest.raises(ShaderError, match="vertex"):
            Shader("broken_vertex", "broken_fragment")


def test_same_names_share_one_program(backend):
    first = Shader("shared_v", "shared_f")
    second = Shader("shared_v", "shared_f")
    assert first == second
    assert first.program is backend.programs[0]
    assert len(backend.programs) == 1


def test_unknown_names_use_default_sources(backend):
    shader = Shader("fallback_v", "fallback_f")
    vertex, fragment = resolve_sources("ui::default", "ui::default")
    assert [s.source for s in shader.program.shaders] == [vertex, fragment]


def test_bind_and_unbind_use_program(backend):
    shader = Shader("bind_v", "bind_f")
    shader.bind()
    shader.unbind()
    assert shader.program.events == ["use", "stop"]


def test_set_vectors(backend):
    shader = Shader("vec_v", "vec_f")
    shader.set("a", vec2(1, 2))
    shader.set("b", vec3(1, 2, 3))
    shader.set("rect", vec4(1, 2, 3, 4))
    values = shader.program.values
    assert values["a"] == (1.0, 2.0)
    assert values["b"] == (1.0, 2.0, 3.0)
    assert values["rect"] == (1.0, 2.0, 3.0, 4.0)


def test_set_scalars(backend):
    shader = Shader("scalar_v", "scalar_f")
    shader.set("count", 3)
    shader.set("border_size", 1.5)
    shader.set("bordered", True)
    values = shader.program.values
    assert values["count"] == 3
    assert values["border_size"] == 1.5
    assert values["bordered"] == 1


def test_set_accepts_property(backend):
    shader = Shader("prop_v", "prop_f")
    shader.set("border_size", Property.from_value(2.5))
    assert shader.program.values["border_size"] == 2.5


def test_set_unknown_uniform_is_ignored(backend):
    shader = Shader("unknown_v", "unknown_f")
    shader.set("not_there", 1.0)
    assert "not_there" not in shader.program.values


def test_set_matrix(backend):
    shader = Shader("mat_v", "mat_f")
    matrix = Mat(4, 4)
    shader.set("projection", matrix)
    assert list(shader.program.values["projection"]) == list(matrix.data())


def test_shader_from_tag(backend):
    assert shader_from_tag("ui::text") is text_shader()
    assert shader_from_tag("ui::default") is default_shader()
    assert shader_from_tag("something else") is default_shader()