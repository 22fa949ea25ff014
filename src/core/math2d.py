"""Small 2D math helpers shared by sprites and collision code.

Direction vectors are built fresh on every call because pygame's Vector2 is
mutable; callers are free to scale or modify what they get back.
Screen coordinates are used throughout, so "up" is negative y.
"""

from __future__ import annotations

from pygame.math import Vector2


def position_in_bounds(
    position: Vector2, bounds_position: Vector2, bounds_size: Vector2
) -> bool:
    """Return True if `position` is strictly inside the rectangle centred at
    `bounds_position` with full extents `bounds_size`.

    A point lying exactly on an edge is outside.
    """
    half_w = bounds_size.x / 2
    half_h = bounds_size.y / 2
    return (
        bounds_position.x - half_w < position.x < bounds_position.x + half_w
        and bounds_position.y - half_h < position.y < bounds_position.y + half_h
    )


def vector_zero() -> Vector2:
    return Vector2(0, 0)


def vector_one() -> Vector2:
    return Vector2(1, 1)


def vector_left() -> Vector2:
    return Vector2(-1, 0)


def vector_right() -> Vector2:
    return Vector2(1, 0)


def vector_up() -> Vector2:
    return Vector2(0, -1)


def vector_down() -> Vector2:
    return Vector2(0, 1)


def cardinal_directions() -> list[Vector2]:
    """Left, right, up, down as fresh unit vectors."""
    return [vector_left(), vector_right(), vector_up(), vector_down()]
