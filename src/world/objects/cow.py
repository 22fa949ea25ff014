"""Cow: wanders at random until the person leads it somewhere.

Two modes, picked by whether a target position is set:

- NORMAL: with probability `toggle_rate * dt` per tick, a moving cow stops
  and a stopped cow sets off in a random cardinal direction.
- FOLLOWING: walk toward the target along one axis at a time (x first),
  stopping once within `target_padding` on both axes.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Tuple

from pygame.math import Vector2

from config import (
    COW_DISTANCE_PER_FRAME,
    COW_NORMAL_SPEED,
    COW_SIZE,
    COW_TARGET_PADDING,
    COW_TARGET_SPEED,
    COW_TOGGLE_RATE,
)
from core.math2d import (
    cardinal_directions,
    vector_down,
    vector_left,
    vector_right,
    vector_up,
    vector_zero,
)
from world.animating_sprite import AnimatingSprite, DirectionalImages


@dataclass(frozen=True)
class CowConfig:
    size: Tuple[float, float] = COW_SIZE
    distance_per_frame: float = COW_DISTANCE_PER_FRAME
    target_padding: float = COW_TARGET_PADDING
    normal_speed: float = COW_NORMAL_SPEED
    target_speed: float = COW_TARGET_SPEED
    toggle_rate: float = COW_TOGGLE_RATE


class Cow(AnimatingSprite):
    def __init__(
        self,
        *,
        images: DirectionalImages,
        position: Vector2,
        config: CowConfig = CowConfig(),
    ) -> None:
        super().__init__(
            images=images,
            distance_per_frame=config.distance_per_frame,
            size=Vector2(config.size),
            position=position,
            velocity=vector_zero(),
        )
        self.config = config
        self._target_position: Optional[Vector2] = None

    @property
    def is_following(self) -> bool:
        return self._target_position is not None

    def get_target_position(self) -> Optional[Vector2]:
        if self._target_position is None:
            return None
        return self._target_position.copy()

    def set_target_position(self, position: Vector2) -> None:
        self._target_position = Vector2(position)

    def unset_target_position(self) -> None:
        self._target_position = None

    def tick(self, dt: float) -> None:
        if self._target_position is not None:
            self._tick_target()
        else:
            self._tick_normal(dt)
        super().tick(dt)

    def _tick_target(self) -> None:
        pad = self.config.target_padding
        target = self._target_position
        if self._position.x > target.x + pad:
            direction = vector_left()
        elif self._position.x < target.x - pad:
            direction = vector_right()
        elif self._position.y > target.y + pad:
            direction = vector_up()
        elif self._position.y < target.y - pad:
            direction = vector_down()
        else:
            direction = vector_zero()
        self._velocity = direction * self.config.target_speed

    def _tick_normal(self, dt: float) -> None:
        # Scaling by dt keeps the toggle rate per second independent of FPS
        if random.random() >= self.config.toggle_rate * dt:
            return
        if self._velocity.length() > 0:
            self._velocity = vector_zero()
        else:
            self._velocity = random.choice(cardinal_directions()) * self.config.normal_speed
