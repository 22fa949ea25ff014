import math

import pygame
import pytest
from pygame.math import Vector2

from config import (
    DESCRIPTION_INITIAL,
    DESCRIPTION_INITIAL_FONT_SIZE,
    DESCRIPTION_SUCCESS,
    DESCRIPTION_SUCCESS_FONT_SIZE,
)

DT = 1 / 30


def snapshot(scene):
    sprites = [
        (s.get_position(), s.get_velocity(), s.image, getattr(s, "elapsed_time", None))
        for s in scene.drawables
    ]
    return sprites, scene.description_text, scene.description_font_size, scene.won


# ---------------------------------------------------------------------------
# setup
# ---------------------------------------------------------------------------
def test_setup_scatters_cows_inside_edges(textures, held_keys, calm_herd):
    from world.pasture_scene import PastureScene

    scene = PastureScene(1280, 800, textures=textures, key_state=lambda: held_keys)
    scene.setup()

    assert len(scene.cows) == 3
    assert scene.drawables == [scene.title, scene.fence, scene.person, *scene.cows]
    for cow in scene.cows:
        pos = cow.get_position()
        assert -560 <= pos.x <= 560
        assert -320 <= pos.y <= 320
    assert scene.person.get_position() == Vector2(0, 0)
    assert scene.title.get_position() == Vector2(0, -340)


def test_starts_with_instructions(make_scene):
    scene = make_scene([(500, 0)])
    assert not scene.won
    assert scene.description_text == DESCRIPTION_INITIAL
    assert scene.description_font_size == DESCRIPTION_INITIAL_FONT_SIZE
    assert scene.following_cow is None


def test_play_area_is_window_minus_edge(make_scene):
    scene = make_scene([(500, 0)])
    assert scene.play_area_size() == Vector2(1200, 720)


# ---------------------------------------------------------------------------
# tick
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("dt", [0.0, math.inf, -math.inf, math.nan])
def test_invalid_dt_skips_the_whole_tick(make_scene, held_keys, dt):
    scene = make_scene([(500, 0), (-500, 100)])
    scene.cows[0].set_velocity(Vector2(-20, 0))
    scene.cows[1].set_target_position(Vector2(0, 0))
    held_keys[pygame.K_LEFT] = True
    before = snapshot(scene)

    scene.tick(dt)

    assert snapshot(scene) == before


def test_valid_dt_moves_things(make_scene, held_keys):
    scene = make_scene([(500, 0)])
    scene.cows[0].set_velocity(Vector2(-20, 0))
    held_keys[pygame.K_LEFT] = True
    scene.update(0.5)
    assert scene.person.get_position() == Vector2(-15, 0)
    assert scene.cows[0].get_position() == Vector2(490, 0)


@pytest.mark.parametrize(
    "keys, expected",
    [
        ([], Vector2(0, 0)),
        ([pygame.K_LEFT, pygame.K_UP], Vector2(-30, 0)),
        ([pygame.K_RIGHT, pygame.K_DOWN], Vector2(30, 0)),
        ([pygame.K_UP, pygame.K_DOWN], Vector2(0, -30)),
        ([pygame.K_DOWN], Vector2(0, 30)),
    ],
)
def test_arrow_key_priority(make_scene, held_keys, keys, expected):
    scene = make_scene([(500, 0)])
    for k in keys:
        held_keys[k] = True
    scene.tick(DT)
    assert scene.person.get_velocity() == expected


def test_person_stops_at_fence(make_scene, held_keys):
    scene = make_scene([(500, 0)])
    scene.person.set_position(Vector2(170, 0))
    held_keys[pygame.K_RIGHT] = True
    scene.tick(0.5)
    assert scene.person.get_position() == Vector2(170, 0)
    assert scene.person.get_velocity() == Vector2(0, 0)


def test_cow_bounces_off_fence(make_scene):
    scene = make_scene([(230, 0)])
    cow = scene.cows[0]
    cow.set_velocity(Vector2(-20, 0))
    scene.tick(0.5)
    assert cow.get_velocity() == Vector2(20, 0)
    assert cow.get_position() == Vector2(230, 0)


def test_cow_turns_back_at_screen_edge(make_scene):
    scene = make_scene([(595, 0)])
    cow = scene.cows[0]
    cow.set_velocity(Vector2(20, 0))
    scene.tick(0.5)
    assert cow.get_velocity() == Vector2(-20, 0)
    assert cow.get_position() == Vector2(595, 0)


def test_fence_and_edge_bounce_in_same_frame(make_scene):
    # 214 is on the fence ring and past the 210 edge of a 500px window
    scene = make_scene([(0, 0)], width=500, height=500)
    cow = scene.cows[0]
    cow.set_position(Vector2(212, 0))
    cow.set_velocity(Vector2(20, 0))
    scene.tick(0.1)
    assert cow.get_velocity() == Vector2(20, 0)
    assert cow.get_position() == Vector2(214, 0)


# ---------------------------------------------------------------------------
# leading cows
# ---------------------------------------------------------------------------
def test_space_leads_cow_in_range(make_scene):
    scene = make_scene([(30, 0)])
    scene.key_typed(" ")
    assert scene.following_cow is scene.cows[0]
    assert scene.cows[0].get_target_position() == scene.person.get_position()


def test_space_picks_first_cow_in_creation_order(make_scene):
    scene = make_scene([(300, 0), (20, 0), (10, 0)])
    scene.key_typed(" ")
    assert scene.following_index == 1


def test_space_with_no_cow_in_range_does_nothing(make_scene):
    scene = make_scene([(300, 0), (0, 50)])
    scene.key_typed(" ")
    assert scene.following_cow is None
    assert not any(c.is_following for c in scene.cows)


def test_space_again_lets_the_cow_go(make_scene):
    scene = make_scene([(30, 0)])
    scene.key_typed(" ")
    scene.key_typed(" ")
    assert scene.following_cow is None
    assert not scene.cows[0].is_following


def test_other_keys_are_ignored(make_scene):
    scene = make_scene([(30, 0)])
    scene.key_typed("a")
    scene.key_typed("")
    assert scene.following_cow is None


def test_keydown_events_are_forwarded(make_scene):
    scene = make_scene([(30, 0)])
    scene.handle_event(pygame.event.Event(pygame.KEYUP, {"unicode": " ", "key": pygame.K_SPACE}))
    assert scene.following_cow is None
    scene.handle_event(pygame.event.Event(pygame.KEYDOWN, {"unicode": " ", "key": pygame.K_SPACE}))
    assert scene.following_cow is scene.cows[0]


def test_led_cow_walks_after_person_then_stops(make_scene, held_keys):
    scene = make_scene([(30, 0)])
    cow = scene.cows[0]
    scene.key_typed(" ")

    held_keys[pygame.K_LEFT] = True
    for _ in range(60):
        scene.tick(DT)
        v = cow.get_velocity()
        assert v.x == 0 or v.y == 0
    assert cow.get_position().x < 0

    held_keys[pygame.K_LEFT] = False
    for _ in range(120):
        scene.tick(DT)
        v = cow.get_velocity()
        assert v.x == 0 or v.y == 0
        assert cow.get_target_position() == scene.person.get_position()

    assert cow.get_velocity() == Vector2(0, 0)
    assert abs(cow.get_position().x - scene.person.get_position().x) <= 40
    assert abs(cow.get_position().y - scene.person.get_position().y) <= 40


# ---------------------------------------------------------------------------
# winning
# ---------------------------------------------------------------------------
def test_all_cows_home_at_setup_wins(make_scene):
    scene = make_scene([(0, 50), (-100, -100), (120, 80)])
    scene.tick(DT)
    assert scene.won
    assert scene.description_text == DESCRIPTION_SUCCESS
    assert scene.description_font_size == DESCRIPTION_SUCCESS_FONT_SIZE


def test_one_cow_outside_is_not_a_win(make_scene):
    scene = make_scene([(0, 50), (500, 0)])
    scene.tick(DT)
    assert not scene.won


def test_win_is_permanent(make_scene):
    scene = make_scene([(0, 50)])
    scene.tick(DT)
    assert scene.won
    scene.cows[0].set_position(Vector2(500, 0))
    scene.tick(DT)
    assert scene.won
    assert scene.description_text == DESCRIPTION_SUCCESS


# ---------------------------------------------------------------------------
# drawing
# ---------------------------------------------------------------------------
def test_draw_order(make_scene, renderer):
    scene = make_scene([(500, 0), (-500, 0)])
    scene.draw(renderer)

    assert renderer.calls[0] == ("clear", (0, 200, 0))
    assert renderer.calls[1] == ("push_origin", 640, 400)
    assert renderer.calls[2] == ("text", DESCRIPTION_INITIAL, -250, 290, 480, 80, 18)
    assert renderer.calls[3] == ("image", "title", -200, -370, 400, 60)
    assert renderer.images() == [
        "title",
        "fence",
        "person_down_0",
        "cow_down_0",
        "cow_down_0",
    ]
    assert renderer.calls[-1] == ("pop_origin",)


def test_draw_shows_success_text(make_scene, renderer):
    scene = make_scene([(0, 0)])
    scene.tick(DT)
    scene.draw(renderer)
    text_calls = [c for c in renderer.calls if c[0] == "text"]
    assert text_calls == [("text", DESCRIPTION_SUCCESS, -250, 290, 480, 80, 24)]
