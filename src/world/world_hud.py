"""Pasture HUD: the description text box under the playing field.

Holds the two-state description (instructions, then success) and draws it.
Switching to success is one-way; there is no path back to the instructions.
"""

from __future__ import annotations

from config import (
    DESCRIPTION_BOTTOM_OFFSET,
    DESCRIPTION_COLOR,
    DESCRIPTION_FONT,
    DESCRIPTION_INITIAL,
    DESCRIPTION_INITIAL_FONT_SIZE,
    DESCRIPTION_SIZE,
    DESCRIPTION_SUCCESS,
    DESCRIPTION_SUCCESS_FONT_SIZE,
    DESCRIPTION_X,
)


class PastureHUD:
    def __init__(self, *, x: float, y: float) -> None:
        self.x = x
        self.y = y
        self.width, self.height = DESCRIPTION_SIZE
        self.text = DESCRIPTION_INITIAL
        self.font_size = DESCRIPTION_INITIAL_FONT_SIZE
        self.success = False

    @classmethod
    def for_screen(cls, height: float) -> "PastureHUD":
        return cls(x=DESCRIPTION_X, y=height / 2 - DESCRIPTION_BOTTOM_OFFSET)

    def show_success(self) -> bool:
        """Switch to the success text. Returns True on the first switch only."""
        if self.success:
            return False
        self.success = True
        self.text = DESCRIPTION_SUCCESS
        self.font_size = DESCRIPTION_SUCCESS_FONT_SIZE
        return True

    def draw(self, renderer) -> None:
        renderer.draw_text_box(
            self.text,
            self.x,
            self.y,
            self.width,
            self.height,
            size=self.font_size,
            color=DESCRIPTION_COLOR,
            font_name=DESCRIPTION_FONT,
        )
