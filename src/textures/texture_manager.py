"""Centralized texture loading for the pasture scene.

Provides a single function `load_pasture_textures()` which loads every image
the game uses and returns them in a dict. Must run after the GL context
exists; missing files come back as placeholder textures.
"""

from __future__ import annotations

from typing import Dict

from textures.texture_utils import load_texture
from textures.resoucepath import (
    DIRECTIONS,
    FENCE_TEXTURE_PATH,
    TITLE_TEXTURE_PATH,
    cow_texture_path,
    person_texture_path,
)
from config import COW_FRAME_COUNT, PERSON_FRAME_COUNT

_COW_PLACEHOLDER = (120, 80, 40)
_PERSON_PLACEHOLDER = (40, 60, 200)
_FENCE_PLACEHOLDER = (140, 90, 30)
_TITLE_PLACEHOLDER = (255, 255, 255)


def _load_frames(path_fn, count: int, color) -> Dict[str, list]:
    return {
        d: [load_texture(path_fn(d, i), color) for i in range(count)]
        for d in DIRECTIONS
    }


def load_pasture_textures() -> Dict[str, object]:
    """Load and return the game's textures.

    Returns a dict with keys:
      - cow_frames, person_frames: {direction: [texture, ...]}
      - fence_tex, title_tex
    """
    return {
        "cow_frames": _load_frames(cow_texture_path, COW_FRAME_COUNT, _COW_PLACEHOLDER),
        "person_frames": _load_frames(
            person_texture_path, PERSON_FRAME_COUNT, _PERSON_PLACEHOLDER
        ),
        "fence_tex": load_texture(FENCE_TEXTURE_PATH, _FENCE_PLACEHOLDER),
        "title_tex": load_texture(TITLE_TEXTURE_PATH, _TITLE_PLACEHOLDER),
    }
