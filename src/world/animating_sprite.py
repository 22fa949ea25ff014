"""Flipbook-animated sprite.

Frames advance by distance travelled rather than elapsed time, so a sprite
that walks faster also flips through its walk cycle faster. The facing
direction comes from the sign of the velocity, checking x before y.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from pygame.math import Vector2

from world.sprite import Sprite


@dataclass(frozen=True)
class DirectionalImages:
    left: Sequence
    right: Sequence
    up: Sequence
    down: Sequence

    @classmethod
    def from_dict(cls, frames: dict) -> "DirectionalImages":
        return cls(
            left=tuple(frames["left"]),
            right=tuple(frames["right"]),
            up=tuple(frames["up"]),
            down=tuple(frames["down"]),
        )

    def for_velocity(self, velocity: Vector2) -> Optional[Sequence]:
        """Sequence for the direction of motion, or None when not moving."""
        if velocity.x < 0:
            return self.left
        if velocity.x > 0:
            return self.right
        if velocity.y < 0:
            return self.up
        if velocity.y > 0:
            return self.down
        return None


class AnimatingSprite(Sprite):
    def __init__(
        self,
        *,
        images: DirectionalImages,
        distance_per_frame: float,
        size: Vector2,
        position: Vector2,
        velocity: Vector2,
    ) -> None:
        super().__init__(
            image=images.down[0],
            size=size,
            position=position,
            velocity=velocity,
        )
        self._images = images
        self._distance_per_frame = distance_per_frame
        # Seconds this sprite has been ticking; drives frame selection
        self._elapsed_time = 0.0
        # Keeps the last facing direction once the sprite stops
        self._last_image = images.down[0]

    @property
    def elapsed_time(self) -> float:
        return self._elapsed_time

    def _get_image(self):
        sequence = self._images.for_velocity(self._velocity)
        if sequence:
            frame = math.floor(
                self._elapsed_time * self._velocity.length() / self._distance_per_frame
            )
            self._last_image = sequence[frame % len(sequence)]
        return self._last_image

    def tick(self, dt: float) -> None:
        self._elapsed_time += dt
        self._image = self._get_image()
        super().tick(dt)
