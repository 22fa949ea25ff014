"""Square fence with a gap in the middle of its top side.

Only the ring between the outer and inner bounds is solid; the fenced-in
area and the gap are free to walk through.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from pygame.math import Vector2

from config import FENCE_EDGE_WIDTH, FENCE_OPENING_SIZE, FENCE_SIZE
from core.math2d import position_in_bounds, vector_one, vector_zero
from world.sprite import Sprite


@dataclass(frozen=True)
class FenceConfig:
    size: Tuple[float, float] = FENCE_SIZE
    # Thickness of the solid band around the fence image outline
    edge_width: float = FENCE_EDGE_WIDTH
    opening_size: Tuple[float, float] = FENCE_OPENING_SIZE


class Fence(Sprite):
    def __init__(self, *, image, position: Vector2, config: FenceConfig = FenceConfig()) -> None:
        super().__init__(
            image=image,
            size=Vector2(config.size),
            position=position,
            velocity=vector_zero(),
        )
        self.config = config

    def outer_bound_size(self) -> Vector2:
        """A little bigger than the fence image."""
        return self._size + vector_one() * (self.config.edge_width / 2)

    def inner_bound_size(self) -> Vector2:
        """A little smaller than the fence image."""
        return self._size - vector_one() * (self.config.edge_width / 2)

    def opening_position(self) -> Vector2:
        """Centre of the gap, on the top edge."""
        return self._position - Vector2(0, self._size.y / 2)

    def opening_size(self) -> Vector2:
        return Vector2(self.config.opening_size)

    def is_overlapping(self, position: Vector2) -> bool:
        """True if `position` is on the solid part of the fence."""
        in_outer = position_in_bounds(position, self._position, self.outer_bound_size())
        in_inner = position_in_bounds(position, self._position, self.inner_bound_size())
        in_opening = position_in_bounds(
            position, self.opening_position(), self.opening_size()
        )
        return in_outer and not in_inner and not in_opening

    def encloses(self, position: Vector2) -> bool:
        """True if `position` is within the fence's footprint."""
        return position_in_bounds(position, self._position, self._size)
