import math

from pygame.math import Vector2

from core.math2d import (
    cardinal_directions,
    position_in_bounds,
    vector_down,
    vector_left,
    vector_one,
    vector_right,
    vector_up,
    vector_zero,
)
from core.scene import frame_dt


def test_position_in_bounds_inside():
    assert position_in_bounds(Vector2(1, 1), Vector2(0, 0), Vector2(10, 10))
    assert position_in_bounds(Vector2(104, 96), Vector2(100, 100), Vector2(10, 10))


def test_position_in_bounds_is_strict_on_edges():
    center = Vector2(0, 0)
    size = Vector2(10, 20)
    assert not position_in_bounds(Vector2(5, 0), center, size)
    assert not position_in_bounds(Vector2(-5, 0), center, size)
    assert not position_in_bounds(Vector2(0, 10), center, size)
    assert not position_in_bounds(Vector2(0, -10), center, size)
    assert position_in_bounds(Vector2(4.999, 9.999), center, size)


def test_position_in_bounds_needs_both_axes():
    assert not position_in_bounds(Vector2(0, 50), Vector2(0, 0), Vector2(10, 10))
    assert not position_in_bounds(Vector2(50, 0), Vector2(0, 0), Vector2(10, 10))


def test_direction_vectors_use_screen_coordinates():
    assert vector_zero() == Vector2(0, 0)
    assert vector_one() == Vector2(1, 1)
    assert vector_left() == Vector2(-1, 0)
    assert vector_right() == Vector2(1, 0)
    assert vector_up() == Vector2(0, -1)
    assert vector_down() == Vector2(0, 1)
    assert cardinal_directions() == [vector_left(), vector_right(), vector_up(), vector_down()]


def test_direction_vectors_are_fresh_copies():
    v = vector_left()
    v *= 10
    assert vector_left() == Vector2(-1, 0)
    assert vector_zero() is not vector_zero()


def test_frame_dt():
    assert frame_dt(30) == 1.0 / 30
    assert math.isinf(frame_dt(0))
    assert math.isinf(frame_dt(0.0))
