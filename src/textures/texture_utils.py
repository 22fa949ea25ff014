"""Texture loading utilities for OpenGL.

Missing images never stop the game: they are replaced by a generated
placeholder so the sprite still shows up where it should.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np
import pygame
from OpenGL.GL import (
    glGenTextures,
    glBindTexture,
    glTexImage2D,
    glTexParameteri,
    GL_TEXTURE_2D,
    GL_RGBA,
    GL_UNSIGNED_BYTE,
    GL_TEXTURE_MIN_FILTER,
    GL_TEXTURE_MAG_FILTER,
    GL_TEXTURE_WRAP_S,
    GL_TEXTURE_WRAP_T,
    GL_NEAREST,
    GL_CLAMP_TO_EDGE,
)

# Tint used when no placeholder colour is given
DEFAULT_PLACEHOLDER_COLOR = (255, 0, 0)


def checkerboard_pixels(
    size: int, tile: int, color: Tuple[int, int, int]
) -> np.ndarray:
    """Return a (size, size, 4) uint8 RGBA checkerboard.

    Even tiles are opaque `color`, odd tiles fully transparent.
    """
    idx = np.arange(size) // max(1, tile)
    mask = (idx[:, None] + idx[None, :]) % 2 == 0
    pixels = np.zeros((size, size, 4), dtype=np.uint8)
    pixels[mask, :3] = color
    pixels[mask, 3] = 255
    return pixels


def _upload_rgba(data: bytes, width: int, height: int) -> int:
    texture_id = glGenTextures(1)
    glBindTexture(GL_TEXTURE_2D, texture_id)
    glTexImage2D(
        GL_TEXTURE_2D,
        0,
        GL_RGBA,
        width,
        height,
        0,
        GL_RGBA,
        GL_UNSIGNED_BYTE,
        data,
    )
    # Nearest keeps pixel art crisp; clamp avoids seams at sprite edges
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_NEAREST)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_NEAREST)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_S, GL_CLAMP_TO_EDGE)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_T, GL_CLAMP_TO_EDGE)

    return int(texture_id)


def load_texture(filename, placeholder_color=DEFAULT_PLACEHOLDER_COLOR):
    """Load a texture from an image file.

    Parameters
    ----------
    filename : str
        Path to the image file
    placeholder_color : tuple
        RGB tint of the checkerboard used if the file can't be loaded

    Returns
    -------
    int
        OpenGL texture ID
    """
    try:
        surface = pygame.image.load(filename).convert_alpha()
    except (pygame.error, FileNotFoundError) as e:
        print(f"[Textures] Failed to load {filename}: {e}")
        return create_test_texture(placeholder_color)

    texture_data = pygame.image.tostring(surface, "RGBA", True)
    width, height = surface.get_size()
    return _upload_rgba(texture_data, width, height)


def create_test_texture(color=DEFAULT_PLACEHOLDER_COLOR, size: int = 64, tile: int = 8):
    """Create a checkerboard placeholder texture in the given colour."""
    pixels = checkerboard_pixels(size, tile, color)
    # Match the flipped row order pygame.image.tostring(..., True) produces
    data = np.ascontiguousarray(pixels[::-1]).tobytes()
    return _upload_rgba(data, size, size)
