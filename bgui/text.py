"""A run of text drawn glyph by glyph from a font atlas."""

from __future__ import annotations

from typing import List, Union

from .draw import DrawData, DrawRequest
from .element import Element
from .font import Font, FontManager
from .fontloader import DEFAULT_FONT
from .gui import Gui
from .theme import Theme
from .vec import vec4

_NEWLINE = 0x0A


def utf8_to_utf32(data: Union[str, bytes, bytearray]) -> List[int]:
    """Decode UTF-8 into a list of code points; a str is encoded as UTF-8 first."""
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    result: List[int] = []
    i = 0
    while i < len(raw):
        lead = raw[i]
        if lead & 0x80 == 0:
            length, code = 1, lead
        elif lead & 0xE0 == 0xC0:
            length, code = 2, lead & 0x1F
        elif lead & 0xF0 == 0xE0:
            length, code = 3, lead & 0x0F
        elif lead & 0xF8 == 0xF0:
            length, code = 4, lead & 0x07
        else:
            raise ValueError(f"invalid UTF-8 lead byte 0x{lead:02x} at offset {i}")
        if i + length > len(raw):
            raise ValueError(f"truncated UTF-8 sequence at offset {i}")
        for byte in raw[i + 1 : i + length]:
            code = (code << 6) | (byte & 0x3F)
        result.append(code)
        i += length
    return result


class Text(Element):
    """Text laid out in lines; its size follows the last drawn content."""

    def __init__(self, buffer: str, scale: float) -> None:
        super().__init__()
        self.buffer = buffer
        self.font_name = DEFAULT_FONT
        self.scale = scale
        self._font: Font
        self.set_font(self.font_name)
        self.apply_theme(Gui.instance().theme)
        self.material.use_tex = True
        self.material.shader_tag = "ui::text"

    @property
    def font(self) -> Font:
        """The font the text is drawn with."""
        return self._font

    def set_font(self, name: str) -> None:
        """Draw the text with the registered font called ``name``."""
        self._font = FontManager.instance().get_font(name)
        self.font_name = name

    def update(self) -> None:
        """Text has no per-frame state."""

    def apply_theme(self, theme: Theme) -> None:
        """Take the text colour from ``theme`` and show the text."""
        self.material.set("text_color", theme.text_color)
        self.visible = True

    def collect_requests(self, data: DrawData) -> None:
        """Queue one quad per known glyph and resize to the laid out text."""
        font = self._font
        if not font.chs:
            return
        scale = self.scale
        ascent = font.ascent * scale
        descent = font.descent * scale
        line_gap = font.line_gap * scale
        line_height = ascent + descent + line_gap

        line_x = 0.0
        line_y = ascent
        max_line_width = 0.0
        line_count = 1
        origin_x, origin_y = self.x, self.y

        self.material.texture = font.atlas

        for code in utf8_to_utf32(self.buffer):
            if code == _NEWLINE:
                max_line_width = max(max_line_width, line_x)
                line_y += line_height
                line_x = 0.0
                line_count += 1
                continue
            glyph = font.chs.get(code)
            if glyph is None:
                continue
            xpos = origin_x + line_x + scale * glyph.bearing[0]
            ypos = origin_y + line_y - (glyph.bearing[1] * scale - glyph.size[1] * scale)
            w = scale * glyph.size[0]
            h = scale * glyph.size[1]
            data.push(
                DrawRequest(self.material, 6, vec4(xpos, ypos, w, -h), glyph.uv_min, glyph.uv_max)
            )
            line_x += glyph.advance * scale

        max_line_width = max(max_line_width, line_x)
        self.set_size(max_line_width, line_count * line_height)