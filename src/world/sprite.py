"""Base game object: an image with a size, position and velocity.

pygame's Vector2 is mutable, so every vector handed to or returned from a
Sprite is copied. Changing a vector you got from `get_position()` never
moves the sprite.
"""

from __future__ import annotations

from pygame.math import Vector2


class Sprite:
    def __init__(
        self,
        *,
        image,
        size: Vector2,
        position: Vector2,
        velocity: Vector2,
    ) -> None:
        self._image = image
        self._size = Vector2(size)
        self._position = Vector2(position)
        self._velocity = Vector2(velocity)

    @property
    def image(self):
        return self._image

    def tick(self, dt: float) -> None:
        """Advance one frame; velocity is per second, so scale by dt."""
        self._position = self._position + self._velocity * dt

    def draw(self, renderer) -> None:
        """Draw the image centred on the sprite's position."""
        renderer.draw_image(
            self._image,
            self._position.x - self._size.x / 2,
            self._position.y - self._size.y / 2,
            self._size.x,
            self._size.y,
        )

    def set_velocity(self, velocity: Vector2) -> None:
        self._velocity = Vector2(velocity)

    def get_velocity(self) -> Vector2:
        return self._velocity.copy()

    def set_position(self, position: Vector2) -> None:
        self._position = Vector2(position)

    def get_position(self) -> Vector2:
        return self._position.copy()

    def set_size(self, size: Vector2) -> None:
        self._size = Vector2(size)

    def get_size(self) -> Vector2:
        return self._size.copy()
