"""Pasture scene: owns the person, fence, cows and title, and runs the game.

Each frame the engine calls update(dt), which moves everything, resolves
fence and edge collisions and checks whether every cow is home, and then
draw(renderer). Space starts leading the first cow in range, or lets the
led cow go.
"""

from __future__ import annotations

import math
import random
import time
from typing import Callable, List, Optional, Sequence

import pygame
from pygame.math import Vector2

from config import (
    BACKGROUND_COLOR,
    COW_COUNT,
    COW_RANGE,
    EDGE_WIDTH,
    FPS,
    SETTLE_TICKS,
    TITLE_SIZE,
    TITLE_TOP_OFFSET,
)
from core.drawable import Tickable
from core.math2d import (
    vector_down,
    vector_left,
    vector_one,
    vector_right,
    vector_up,
    vector_zero,
)
from core.scene import Scene
from world.animating_sprite import DirectionalImages
from world.objects import Cow, Fence, Person
from world.sprite import Sprite
from world.world_collision import (
    bounce_off_fence,
    cows_outside_fence,
    keep_in_play_area,
    stop_at_fence,
)
from world.world_hud import PastureHUD

KeyState = Callable[[], Sequence[bool]]


class PastureScene(Scene):

    def __init__(
        self,
        width: int,
        height: int,
        *,
        textures: Optional[dict] = None,
        key_state: Optional[KeyState] = None,
        cow_count: int = COW_COUNT,
    ) -> None:
        super().__init__()
        self.width = width
        self.height = height
        self.cow_count = cow_count
        if textures is None:
            # Needs a live GL context, so only import when actually loading
            from textures.texture_manager import load_pasture_textures

            textures = load_pasture_textures()
        self.textures = textures
        self.key_state = key_state or pygame.key.get_pressed

        self.person: Optional[Person] = None
        self.fence: Optional[Fence] = None
        self.title: Optional[Sprite] = None
        self.cows: List[Cow] = []
        # Index into self.cows of the cow being led, if any
        self.following_index: Optional[int] = None
        self.hud = PastureHUD.for_screen(height)

        print("Pasture Scene Initialized")

    # ------------------------------------------------------------------
    def setup(self, cow_positions: Optional[Sequence[Vector2]] = None) -> None:
        """Create the game objects and let the herd settle for a few ticks.

        Cows are scattered at random unless `cow_positions` is given.
        """
        start_time = time.perf_counter()
        cow_images = DirectionalImages.from_dict(self.textures["cow_frames"])
        person_images = DirectionalImages.from_dict(self.textures["person_frames"])

        self.person = Person(images=person_images, position=vector_zero())
        self.fence = Fence(image=self.textures["fence_tex"], position=vector_zero())

        if cow_positions is None:
            cow_positions = [self.random_cow_position() for _ in range(self.cow_count)]
        self.cows = [Cow(images=cow_images, position=p) for p in cow_positions]

        self.title = Sprite(
            image=self.textures["title_tex"],
            size=Vector2(TITLE_SIZE),
            position=Vector2(0, -self.height / 2 + TITLE_TOP_OFFSET),
            velocity=vector_zero(),
        )

        # Draw order: later entries end up on top
        self.drawables: List[Tickable] = [self.title, self.fence, self.person, *self.cows]
        self.updaters = [self.tick]
        self.log_timing("Creating game objects", start_time, time.perf_counter())

        # Give the cows' random walk a head start before the first frame
        start_time = time.perf_counter()
        for _ in range(SETTLE_TICKS):
            self.tick(1.0 / FPS)
        self.log_timing("Settling herd", start_time, time.perf_counter())

        print(f"Spawned {len(self.cows)} cows.")

    def random_cow_position(self) -> Vector2:
        half_w = self.width / 2 - EDGE_WIDTH
        half_h = self.height / 2 - EDGE_WIDTH
        return Vector2(random.uniform(-half_w, half_w), random.uniform(-half_h, half_h))

    def log_timing(self, message: str, start_time: float, end_time: float, log: bool = False):
        """Logs timing information for scene setup phases."""
        if log:
            print(f"{message} took {end_time - start_time:.6f} seconds")

    # ------------------------------------------------------------------
    @property
    def following_cow(self) -> Optional[Cow]:
        if self.following_index is None:
            return None
        return self.cows[self.following_index]

    @property
    def won(self) -> bool:
        return self.hud.success

    @property
    def description_text(self) -> str:
        return self.hud.text

    @property
    def description_font_size(self) -> int:
        return self.hud.font_size

    def play_area_size(self) -> Vector2:
        """Window size shrunk by the edge margin; centred on the origin."""
        return Vector2(self.width, self.height) - vector_one() * EDGE_WIDTH

    # ------------------------------------------------------------------
    def _controlled_direction(self) -> Vector2:
        keys = self.key_state()
        if keys[pygame.K_LEFT]:
            return vector_left()
        if keys[pygame.K_RIGHT]:
            return vector_right()
        if keys[pygame.K_UP]:
            return vector_up()
        if keys[pygame.K_DOWN]:
            return vector_down()
        return vector_zero()

    def tick(self, dt: float) -> None:
        # The clock reports 0 fps for the first frames, which gives inf/nan
        if not dt or not math.isfinite(dt):
            return

        self.person.set_controlled_direction(self._controlled_direction())

        cow = self.following_cow
        if cow is not None:
            cow.set_target_position(self.person.get_position())

        for sprite in self.drawables:
            sprite.tick(dt)

        play_area = self.play_area_size()
        for cow in self.cows:
            bounce_off_fence(cow, self.fence, dt)
            keep_in_play_area(cow, play_area, dt)

        stop_at_fence(self.person, self.fence, dt)

        if not cows_outside_fence(self.cows, self.fence) and self.hud.show_success():
            print("All cows are home!")

    def key_typed(self, key: str) -> None:
        """Space leads the first cow in range, or lets the led cow go."""
        if key != " ":
            return

        cow = self.following_cow
        if cow is not None:
            cow.unset_target_position()
            self.following_index = None
            return

        person_pos = self.person.get_position()
        for i, cow in enumerate(self.cows):
            if person_pos.distance_to(cow.get_position()) < COW_RANGE:
                self.following_index = i
                cow.set_target_position(person_pos)
                return

    def handle_event(self, event) -> None:
        if event.type == pygame.KEYDOWN:
            self.key_typed(event.unicode)

    def draw(self, renderer) -> None:
        renderer.clear(BACKGROUND_COLOR)
        # Work in coordinates centred on the screen
        renderer.push_origin(self.width / 2, self.height / 2)
        self.hud.draw(renderer)
        super().draw(renderer)
        renderer.pop_origin()
