"""GLSL programs for interface quads, compiled once per vertex/fragment pair."""

from __future__ import annotations

import functools
from typing import Any, Dict, Optional, Tuple

from .properties import Property, PropertyType

VERTEX = "vertex"
FRAGMENT = "fragment"

DEFAULT_VERTEX = "ui::default_vs"
DEFAULT_FRAGMENT = "ui::default_fs"

_EMBEDDED: Dict[str, str] = {
    "ui::default_vs": """#version 330 core
layout(location = 0) in vec2 aPos;
layout(location = 1) in vec2 aUv;

out vec2 Uv;

uniform vec4 rect;
uniform mat4 projection;

void main() {
    vec2 pos = aPos * rect.zw + rect.xy;
    Uv = aUv;
    gl_Position = projection * vec4(pos, 0, 1);
}
""",
    "ui::default_fs": """#version 330 core

in vec2 Uv;
out vec4 FragColor;

uniform vec4 bg_color;
uniform vec4 border_color;
uniform bool bordered;
uniform float border_radius;
uniform float border_size;
uniform vec4 rect;

void main() {
    if (bordered) {
        vec2 pos = rect.zw * Uv;
        vec2 center = rect.zw * 0.5;
        vec2 p = pos - center;

        vec2 q = abs(p) - (center - vec2(border_radius));
        float dist = length(max(q, 0.0)) + min(max(q.x, q.y), 0.0) - border_radius;

        if (dist > 0.0) discard;
        if (dist > -border_size) {
            FragColor = border_color;
        } else {
            FragColor = bg_color;
        }
    } else {
        FragColor = bg_color;
    }
}
""",
    "ui::text_fs": """#version 330 core

in vec2 Uv;
out vec4 FragColor;

uniform sampler2D tex;
uniform vec4 text_color;
uniform vec2 uv_min;
uniform vec2 uv_max;

void main() {
    vec2 uv = mix(uv_min, uv_max, vec2(Uv.x, 1.0 - Uv.y));
    FragColor = texture(tex, uv);
}
""",
}

_PROGRAMS: Dict[Tuple[str, str], Any] = {}


class ShaderError(RuntimeError):
    """Raised when a shader fails to compile, link or bind."""


def _api():
    from pyglet.graphics.shader import Shader as StageShader
    from pyglet.graphics.shader import ShaderException, ShaderProgram

    return StageShader, ShaderProgram, ShaderException


def resolve_sources(vertex_name: str, fragment_name: str) -> Tuple[str, str]:
    """Return the vertex and fragment sources for the names, falling back to the defaults."""
    vertex = _EMBEDDED.get(f"{vertex_name}_vs", _EMBEDDED[DEFAULT_VERTEX])
    fragment = _EMBEDDED.get(f"{fragment_name}_fs", _EMBEDDED[DEFAULT_FRAGMENT])
    return vertex, fragment


def compile_stage(stage: str, source: str):
    """Compile one shader stage ("vertex" or "fragment") and return it."""
    if stage not in (VERTEX, FRAGMENT):
        raise ValueError(f"unknown shader stage: {stage!r}")
    stage_shader, _, shader_exception = _api()
    try:
        return stage_shader(source, stage)
    except shader_exception as exc:
        raise ShaderError(f"Shader compilation failed ({stage}): {exc}") from exc


def link_program(vert, frag):
    """Link two compiled stages into a program, delete the stages and return the program."""
    _, shader_program, shader_exception = _api()
    try:
        program = shader_program(vert, frag)
    except shader_exception as exc:
        raise ShaderError(f"Shader link failed:\n{exc}") from exc
    vert.delete()
    frag.delete()
    return program


class Shader:
    """A linked program; programs are shared between shaders with the same names."""

    def __init__(
        self, vertex_name: Optional[str] = None, fragment_name: Optional[str] = None
    ) -> None:
        self._program: Any = None
        if vertex_name is not None and fragment_name is not None:
            self.compile(vertex_name, fragment_name)

    @property
    def program(self):
        """The linked program, or None before compiling."""
        return self._program

    def compile(self, vertex_name: str, fragment_name: str) -> None:
        """Use the program for these names, building it on first use."""
        key = (f"{vertex_name}_vs", f"{fragment_name}_fs")
        cached = _PROGRAMS.get(key)
        if cached is not None:
            self._program = cached
            return
        vertex_source, fragment_source = resolve_sources(vertex_name, fragment_name)
        vert = compile_stage(VERTEX, vertex_source)
        frag = compile_stage(FRAGMENT, fragment_source)
        program = link_program(vert, frag)
        _PROGRAMS[key] = program
        self._program = program

    def _require_program(self):
        if self._program is None:
            raise ShaderError("shader program is null! Have you compiled before binding?")
        return self._program

    def bind(self) -> None:
        """Make this program current."""
        self._require_program().use()

    def unbind(self) -> None:
        """Make no program current."""
        self._require_program().stop()

    def set(self, name: str, prop) -> None:
        """Upload ``prop`` (a Property or a plain value) to the uniform ``name``.

        Names the program does not use are ignored.
        """
        program = self._require_program()
        prop = Property.from_value(prop)
        if name not in program.uniforms:
            return
        value = prop.value
        if prop.type in (PropertyType.VEC2, PropertyType.VEC3, PropertyType.VEC4):
            program[name] = tuple(float(c) for c in value)
        elif prop.type is PropertyType.MAT4:
            program[name] = tuple(float(c) for c in value.data())
        elif prop.type is PropertyType.FLOAT:
            program[name] = float(value)
        elif prop.type is PropertyType.INT:
            program[name] = int(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shader):
            return NotImplemented
        return self._program is other._program

    __hash__ = None  # the program can change on compile


@functools.lru_cache(maxsize=None)
def default_shader() -> Shader:
    """The shared shader for plain boxes."""
    return Shader("ui::default", "ui::default")


@functools.lru_cache(maxsize=None)
def text_shader() -> Shader:
    """The shared shader for text glyphs."""
    return Shader("ui::default", "ui::text")


def shader_from_tag(tag: str) -> Shader:
    """Return the shader for a material's tag; unknown tags get the default shader."""
    if tag == "ui::text":
        return text_shader()
    return default_shader()