"""Load font files into glyph atlases and discover installed fonts."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Dict, Iterator, NamedTuple, Optional, Union

from PIL import Image, ImageDraw, ImageFont

from .font import Character, Font, FontManager
from .properties import Texture
from .vec import vec2

logger = logging.getLogger(__name__)

DEFAULT_FONT = "Noto Sans-Condensed"
_PADDING = 2
_FIRST_CODE = 32
_END_CODE = 256
_PROBE_SIZE = 12

PathLike = Union[str, Path]


class _Glyph(NamedTuple):
    code: int
    image: Optional[Image.Image]
    width: int
    rows: int
    left: int
    top: int
    advance: int


def _open(path: PathLike, size: int) -> ImageFont.FreeTypeFont:
    return ImageFont.truetype(str(path), size, layout_engine=ImageFont.Layout.BASIC)


def _default_font_folder() -> Path:
    if sys.platform.startswith("win"):
        return Path("C:\\Windows\\Fonts")
    return Path("/usr/share/fonts")


def search_system_fonts(folder: Optional[PathLike] = None) -> Dict[str, str]:
    """Map ``"<family>-<style>"`` to the path of every readable .ttf/.otf under ``folder``."""
    root = Path(folder) if folder is not None else _default_font_folder()
    if not root.is_dir():
        raise FileNotFoundError(f"font folder not found: {root}")
    found: Dict[str, str] = {}
    candidates = sorted(
        p for p in root.rglob("*") if p.is_file() and p.name.endswith((".ttf", ".otf"))
    )
    for path in candidates:
        try:
            face = _open(path, _PROBE_SIZE)
        except (OSError, ValueError):
            continue
        family, style = face.getname()
        found[f"{family or '(unknown)'}-{style or '(unknown)'}"] = str(path)
    return found


def _render_glyphs(face: ImageFont.FreeTypeFont) -> Iterator[_Glyph]:
    for code in range(_FIRST_CODE, _END_CODE):
        char = chr(code)
        try:
            left, top, right, bottom = (int(v) for v in face.getbbox(char, anchor="ls"))
            advance = int(face.getlength(char))
        except (OSError, ValueError):
            logger.warning("Missing glyph: %d", code)
            continue
        width = max(0, right - left)
        rows = max(0, bottom - top)
        image = None
        if width and rows:
            image = Image.new("L", (width, rows))
            ImageDraw.Draw(image).text((-left, -top), char, font=face, fill=255, anchor="ls")
        yield _Glyph(code, image, width, rows, left, -top, advance)


def _ratio(value: int, total: int) -> float:
    return value / total if total else 0.0


def load_font(
    font_name: str,
    font_path: PathLike,
    resolution: float = FontManager.DEFAULT_RESOLUTION,
) -> Font:
    """Rasterise the font at ``font_path`` into an atlas and register it as ``font_name``.

    A font already registered under that name from the same path is returned as is.
    """
    manager = FontManager.instance()
    path = str(font_path)
    if manager.has_font(font_name):
        cached = manager.get_font(font_name)
        if cached.atlas.path == path:
            return cached

    try:
        face = _open(path, max(1, int(round(resolution))))
    except (OSError, ValueError) as exc:
        raise OSError(f"Error loading font: {font_name}") from exc

    glyphs = list(_render_glyphs(face))
    ascent = max([0, *(g.top for g in glyphs)])
    descent = max([0, *(g.rows - g.top for g in glyphs)])
    atlas_width = sum(g.width + _PADDING for g in glyphs)
    atlas_height = ascent + descent

    atlas = Image.new("L", (atlas_width, atlas_height))
    chars: Dict[int, Character] = {}
    x_offset = 0
    for glyph in glyphs:
        y_offset = ascent - glyph.top
        if glyph.image is not None:
            atlas.paste(glyph.image, (x_offset, y_offset))
        chars[glyph.code] = Character(
            size=vec2(glyph.width, glyph.rows),
            bearing=vec2(glyph.left, glyph.top),
            advance=glyph.advance,
            uv_min=vec2(_ratio(x_offset, atlas_width), _ratio(y_offset, atlas_height)),
            uv_max=vec2(
                _ratio(x_offset + glyph.width, atlas_width),
                _ratio(y_offset + glyph.rows, atlas_height),
            ),
        )
        x_offset += glyph.width + _PADDING

    face_ascent, face_descent = face.getmetrics()
    line_height = getattr(face.font, "height", face_ascent + face_descent)
    font_ascent = float(face_ascent)
    font_descent = abs(float(face_descent))

    font = Font(
        atlas=Texture(
            path=path,
            use_red_channel=True,
            buffer=bytearray(atlas.tobytes()),
            size=vec2(atlas_width, atlas_height),
        ),
        chs=chars,
        atlas_size=vec2(float(atlas_width), float(atlas_height)),
        resolution=int(resolution),
        ascent=font_ascent,
        descent=font_descent,
        line_gap=float(line_height) - (font_ascent + font_descent),
    )
    return manager.add_font(font_name, font)


def set_up() -> Font:
    """Scan the system fonts and load the default interface font."""
    fonts = search_system_fonts()
    path = fonts.get(DEFAULT_FONT)
    if path is None:
        raise OSError(f"Error loading font: {DEFAULT_FONT}")
    return load_font(DEFAULT_FONT, path, FontManager.DEFAULT_RESOLUTION)