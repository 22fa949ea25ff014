"""Collision responses used by the pasture scene each frame.

Cows bounce: their velocity is inverted and they are ticked once more,
undoing the step that took them into the obstacle. The person stops dead
instead: the last step is rolled back and velocity zeroed.
"""

from __future__ import annotations

from typing import Iterable, List

from pygame.math import Vector2

from core.math2d import position_in_bounds, vector_zero
from world.objects import Cow, Fence, Person


def bounce(cow: Cow, dt: float) -> None:
    """Reverse the cow and re-run its tick so it steps back out."""
    cow.set_velocity(cow.get_velocity() * -1)
    cow.tick(dt)


def bounce_off_fence(cow: Cow, fence: Fence, dt: float) -> bool:
    """Returns True if the cow hit the fence."""
    if not fence.is_overlapping(cow.get_position()):
        return False
    bounce(cow, dt)
    return True


def keep_in_play_area(cow: Cow, play_area_size: Vector2, dt: float) -> bool:
    """Bounce a cow that wandered out of the play area centred on the origin.

    Returns True if the cow was turned around.
    """
    if position_in_bounds(cow.get_position(), vector_zero(), play_area_size):
        return False
    bounce(cow, dt)
    return True


def stop_at_fence(person: Person, fence: Fence, dt: float) -> bool:
    """Roll the person back one step if they walked into the fence."""
    if not fence.is_overlapping(person.get_position()):
        return False
    person.set_position(person.get_position() - person.get_velocity() * dt)
    person.set_velocity(vector_zero())
    return True


def cows_outside_fence(cows: Iterable[Cow], fence: Fence) -> List[Cow]:
    """Cows not within the fence footprint (the full image, not the inner bound)."""
    return [cow for cow in cows if not fence.encloses(cow.get_position())]
