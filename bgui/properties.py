"""Typed shader properties, textures and materials."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from numbers import Real
from typing import Dict, Union

from .mat import Mat
from .vec import Vec, vec2


class PropertyType(enum.IntEnum):
    """The kind of value a property carries."""

    VEC2 = 0x0
    VEC3 = 0x1
    VEC4 = 0x2
    MAT4 = 0x3
    FLOAT = 0x4
    INT = 0x5


PropertyValue = Union[Vec, Mat, float, int]

_VEC_TYPES = {2: PropertyType.VEC2, 3: PropertyType.VEC3, 4: PropertyType.VEC4}


@dataclass(frozen=True)
class Property:
    """A value passed to a shader, tagged with its type."""

    type: PropertyType = PropertyType.INT
    value: PropertyValue = 0

    @classmethod
    def from_value(cls, value: PropertyValue) -> "Property":
        """Build a property, inferring its type from ``value``."""
        if isinstance(value, Property):
            return value
        if isinstance(value, Vec):
            try:
                return cls(_VEC_TYPES[len(value)], value)
            except KeyError:
                raise ValueError(
                    f"vector property must have 2, 3 or 4 components, not {len(value)}"
                ) from None
        if isinstance(value, Mat):
            if (value.rows, value.cols) != (4, 4):
                raise ValueError("matrix property must be 4x4")
            return cls(PropertyType.MAT4, value)
        if isinstance(value, (bool, int)):
            return cls(PropertyType.INT, int(value))
        if isinstance(value, Real):
            return cls(PropertyType.FLOAT, float(value))
        raise TypeError(f"unsupported property value: {value!r}")


@dataclass(eq=False)
class Texture:
    """Pixel data and placement for a texture; equal when the pixel data is equal."""

    path: str = "default"
    has_alpha: bool = False
    use_red_channel: bool = False
    buffer: bytearray = field(default_factory=bytearray)
    offset: Vec = field(default_factory=vec2)
    size: Vec = field(default_factory=vec2)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Texture):
            return NotImplemented
        return bytes(self.buffer) == bytes(other.buffer)


@dataclass(eq=False)
class Material:
    """A shader tag with its properties and an optional texture."""

    shader_tag: str = "ui::default"
    properties: Dict[str, Property] = field(default_factory=dict)
    texture: Texture = field(default_factory=Texture)
    use_tex: bool = False

    def set(self, name: str, value: Union[Property, PropertyValue]) -> None:
        """Store a property under ``name``, replacing any earlier value."""
        self.properties[name] = Property.from_value(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return self.texture == other.texture and self.shader_tag == other.shader_tag