"""Text rendering for OpenGL with pygame fonts.

Renders word-wrapped, centred text boxes in whatever transform is current,
so the caller decides where the origin is. Rendered lines are cached as GL
textures keyed by (font, size, text, color).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

import pygame
from OpenGL.GL import (
    glGenTextures,
    glBindTexture,
    glTexImage2D,
    glTexParameteri,
    glBegin,
    glEnd,
    glTexCoord2f,
    glVertex2f,
    glColor4f,
    GL_TEXTURE_2D,
    GL_TEXTURE_MIN_FILTER,
    GL_TEXTURE_MAG_FILTER,
    GL_LINEAR,
    GL_RGBA,
    GL_UNSIGNED_BYTE,
    GL_QUADS,
)

Color = Tuple[int, int, int, int]


@dataclass
class _TexSlot:
    id: int
    size: Tuple[int, int]


def wrap_words(text: str, max_width: float, measure: Callable[[str], int]) -> List[str]:
    """Greedy word wrap. `measure` returns the pixel width of a string.

    A single word wider than `max_width` gets a line of its own rather than
    being split.
    """
    lines: List[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if current and measure(candidate) > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


class TextRenderer:
    """Word-wrapping text renderer using pygame.font.

    Fonts are created lazily per (name, size); pygame.font must be
    initialized before the first draw.
    """

    def __init__(self, line_spacing: float = 1.15) -> None:
        self.line_spacing = line_spacing
        self._fonts: Dict[Tuple[Optional[str], int], pygame.font.Font] = {}
        self._cache: Dict[Tuple[Optional[str], int, str, Color], _TexSlot] = {}

    def font(self, name: Optional[str], size: int) -> pygame.font.Font:
        key = (name, size)
        f = self._fonts.get(key)
        if f is None:
            # SysFont falls back to pygame's default font if `name` is missing
            f = pygame.font.SysFont(name, size) if name else pygame.font.Font(None, size)
            self._fonts[key] = f
        return f

    def _upload_surface(self, slot: _TexSlot, surf: pygame.Surface) -> None:
        data = pygame.image.tostring(surf, "RGBA", True)
        w, h = surf.get_width(), surf.get_height()
        glBindTexture(GL_TEXTURE_2D, slot.id)
        glTexImage2D(
            GL_TEXTURE_2D,
            0,
            GL_RGBA,
            w,
            h,
            0,
            GL_RGBA,
            GL_UNSIGNED_BYTE,
            data,
        )
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
        slot.size = (w, h)

    def _get_slot(
        self, font_name: Optional[str], size: int, text: str, color: Color
    ) -> _TexSlot:
        cache_key = (font_name, size, text, color)
        slot = self._cache.get(cache_key)
        if slot is None:
            slot = _TexSlot(id=glGenTextures(1), size=(0, 0))
            surf = self.font(font_name, size).render(text, True, color)
            self._upload_surface(slot, surf)
            self._cache[cache_key] = slot
        return slot

    def _draw_slot(self, slot: _TexSlot, x: float, y: float, alpha: float) -> None:
        w, h = slot.size
        glBindTexture(GL_TEXTURE_2D, slot.id)
        glColor4f(1.0, 1.0, 1.0, alpha)
        glBegin(GL_QUADS)
        glTexCoord2f(0.0, 1.0)
        glVertex2f(x, y)
        glTexCoord2f(1.0, 1.0)
        glVertex2f(x + w, y)
        glTexCoord2f(1.0, 0.0)
        glVertex2f(x + w, y + h)
        glTexCoord2f(0.0, 0.0)
        glVertex2f(x, y + h)
        glEnd()

    def draw_text_box(
        self,
        text: str,
        x: float,
        y: float,
        w: float,
        h: float,
        *,
        size: int,
        color: Color = (255, 255, 255, 255),
        font_name: Optional[str] = None,
    ) -> Tuple[int, int]:  # pragma: no cover - visual
        """Wrap `text` to width `w` and centre the block in the box at (x, y).

        Returns the (width, height) of the drawn block.
        """
        f = self.font(font_name, size)
        lines = wrap_words(text, w, lambda s: f.size(s)[0])
        if not lines:
            return 0, 0

        # pygame renders alpha per pixel; apply the requested alpha as a tint
        rgb = tuple(color[:3])
        alpha = (color[3] / 255.0) if len(color) > 3 else 1.0
        line_h = f.get_linesize()
        step = int(line_h * self.line_spacing)
        total_h = line_h + (len(lines) - 1) * step
        top = y + (h - total_h) / 2

        max_w = 0
        for i, line in enumerate(lines):
            slot = self._get_slot(font_name, size, line, rgb + (255,))
            lw, _ = slot.size
            max_w = max(max_w, lw)
            self._draw_slot(slot, x + (w - lw) / 2, top + i * step, alpha)
        return max_w, total_h
