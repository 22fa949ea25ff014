"""2D renderer on the fixed-function OpenGL pipeline.

Sets up a pixel-space orthographic projection (origin top-left, +y down) and
exposes the handful of primitives the pasture scene needs: clear, origin
shifts, textured quads and word-wrapped text boxes. Sprites only ever talk
to this object, so tests can swap in a recording fake.
"""

from __future__ import annotations

from typing import Optional, Tuple

from OpenGL.GL import (
    glBegin,
    glEnd,
    glBindTexture,
    glBlendFunc,
    glClear,
    glClearColor,
    glColor4f,
    glDisable,
    glEnable,
    glLoadIdentity,
    glMatrixMode,
    glOrtho,
    glPopMatrix,
    glPushMatrix,
    glTexCoord2f,
    glTranslatef,
    glVertex2f,
    glViewport,
    GL_BLEND,
    GL_COLOR_BUFFER_BIT,
    GL_DEPTH_TEST,
    GL_MODELVIEW,
    GL_ONE_MINUS_SRC_ALPHA,
    GL_PROJECTION,
    GL_QUADS,
    GL_SRC_ALPHA,
    GL_TEXTURE_2D,
)

from ui.text_renderer import TextRenderer


class Renderer2D:
    def __init__(
        self, width: int, height: int, text: Optional[TextRenderer] = None
    ) -> None:
        self.width = width
        self.height = height
        self.text = text or TextRenderer()

    def begin_frame(self) -> None:  # pragma: no cover - visual
        glViewport(0, 0, self.width, self.height)
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, self.width, self.height, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

        glDisable(GL_DEPTH_TEST)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)

    def clear(self, color: Tuple[int, int, int]) -> None:  # pragma: no cover - visual
        r, g, b = color[:3]
        glClearColor(r / 255.0, g / 255.0, b / 255.0, 1.0)
        glClear(GL_COLOR_BUFFER_BIT)

    def push_origin(self, x: float, y: float) -> None:  # pragma: no cover - visual
        """Save the transform and move the origin to (x, y)."""
        glPushMatrix()
        glTranslatef(x, y, 0.0)

    def pop_origin(self) -> None:  # pragma: no cover - visual
        glPopMatrix()

    def draw_image(
        self, texture: int, x: float, y: float, w: float, h: float
    ) -> None:  # pragma: no cover - visual
        """Draw `texture` stretched over the rectangle with top-left (x, y)."""
        if not texture:
            return
        glEnable(GL_TEXTURE_2D)
        glBindTexture(GL_TEXTURE_2D, texture)
        glColor4f(1.0, 1.0, 1.0, 1.0)
        glBegin(GL_QUADS)
        # Texture data is uploaded flipped, so v=1 is the top row
        glTexCoord2f(0.0, 1.0)
        glVertex2f(x, y)
        glTexCoord2f(1.0, 1.0)
        glVertex2f(x + w, y)
        glTexCoord2f(1.0, 0.0)
        glVertex2f(x + w, y + h)
        glTexCoord2f(0.0, 0.0)
        glVertex2f(x, y + h)
        glEnd()
        glDisable(GL_TEXTURE_2D)

    def draw_text_box(
        self,
        text: str,
        x: float,
        y: float,
        w: float,
        h: float,
        *,
        size: int,
        color: Tuple[int, int, int, int],
        font_name: Optional[str] = None,
    ) -> None:  # pragma: no cover - visual
        glEnable(GL_TEXTURE_2D)
        self.text.draw_text_box(
            text, x, y, w, h, size=size, color=color, font_name=font_name
        )
        glDisable(GL_TEXTURE_2D)
