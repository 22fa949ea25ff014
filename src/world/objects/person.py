from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from pygame.math import Vector2

from config import PERSON_DISTANCE_PER_FRAME, PERSON_SIZE, PERSON_SPEED
from core.math2d import vector_zero
from world.animating_sprite import AnimatingSprite, DirectionalImages


@dataclass(frozen=True)
class PersonConfig:
    size: Tuple[float, float] = PERSON_SIZE
    distance_per_frame: float = PERSON_DISTANCE_PER_FRAME
    speed: float = PERSON_SPEED


class Person(AnimatingSprite):
    """The player. Moves only where the arrow keys say."""

    def __init__(
        self,
        *,
        images: DirectionalImages,
        position: Vector2,
        config: PersonConfig = PersonConfig(),
    ) -> None:
        super().__init__(
            images=images,
            distance_per_frame=config.distance_per_frame,
            size=Vector2(config.size),
            position=position,
            velocity=vector_zero(),
        )
        self.config = config

    def set_controlled_direction(self, direction: Vector2) -> None:
        """`direction` should be a unit vector or the zero vector."""
        self._velocity = Vector2(direction) * self.config.speed
