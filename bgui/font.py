"""Glyph metrics, fonts and the registry that holds loaded fonts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Dict, Optional

from .properties import Texture
from .vec import Vec, vec2


@dataclass
class Character:
    """Metrics and atlas coordinates of a single glyph."""

    size: Vec = field(default_factory=vec2)
    bearing: Vec = field(default_factory=vec2)
    advance: int = 0
    uv_min: Vec = field(default_factory=vec2)
    uv_max: Vec = field(default_factory=vec2)


@dataclass
class Font:
    """A font: its glyph atlas and the glyphs keyed by code point."""

    atlas: Texture = field(default_factory=Texture)
    chs: Dict[int, Character] = field(default_factory=dict)
    atlas_size: Vec = field(default_factory=vec2)
    resolution: int = 0
    ascent: float = 0.0
    descent: float = 0.0
    line_gap: float = 0.0


class FontManager:
    """Registry of loaded fonts, by name."""

    DEFAULT_RESOLUTION: ClassVar[float] = 40.0
    _instance: ClassVar[Optional["FontManager"]] = None

    def __init__(self) -> None:
        self.fonts: Dict[str, Font] = {}

    @classmethod
    def instance(cls) -> "FontManager":
        """Return the process-wide font registry."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get_font(self, name: str) -> Font:
        """Return the font registered as ``name``."""
        try:
            return self.fonts[name]
        except KeyError:
            raise KeyError(
                f"Font {name} not found. Have you added it to the backend?"
            ) from None

    def has_font(self, name: str) -> bool:
        """Return whether a font is registered as ``name``."""
        return name in self.fonts

    def add_font(self, name: str, font: Font) -> Font:
        """Register ``font`` as ``name``, replacing any earlier one, and return it."""
        self.fonts[name] = font
        return font