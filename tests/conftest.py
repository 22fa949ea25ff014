from collections import defaultdict
import random

import pytest
from pygame.math import Vector2

from textures.resoucepath import DIRECTIONS
from world.animating_sprite import DirectionalImages


class RecordingRenderer:
    """Stands in for Renderer2D; remembers every call in order."""

    def __init__(self):
        self.calls = []

    def clear(self, color):
        self.calls.append(("clear", color))

    def push_origin(self, x, y):
        self.calls.append(("push_origin", x, y))

    def pop_origin(self):
        self.calls.append(("pop_origin",))

    def draw_image(self, texture, x, y, w, h):
        self.calls.append(("image", texture, x, y, w, h))

    def draw_text_box(self, text, x, y, w, h, *, size, color, font_name=None):
        self.calls.append(("text", text, x, y, w, h, size))

    def images(self):
        return [c[1] for c in self.calls if c[0] == "image"]


def _frames(prefix, count):
    return {d: [f"{prefix}_{d}_{i}" for i in range(count)] for d in DIRECTIONS}


@pytest.fixture
def textures():
    return {
        "cow_frames": _frames("cow", 4),
        "person_frames": _frames("person", 3),
        "fence_tex": "fence",
        "title_tex": "title",
    }


@pytest.fixture
def cow_images(textures):
    return DirectionalImages.from_dict(textures["cow_frames"])


@pytest.fixture
def person_images(textures):
    return DirectionalImages.from_dict(textures["person_frames"])


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def held_keys():
    return defaultdict(bool)


@pytest.fixture
def calm_herd(monkeypatch):
    """Wandering cows never start or stop moving on their own."""
    monkeypatch.setattr(random, "random", lambda: 0.99)


@pytest.fixture
def make_scene(textures, held_keys, calm_herd):
    from world.pasture_scene import PastureScene

    def _make(cow_positions, width=1280, height=800):
        scene = PastureScene(
            width, height, textures=textures, key_state=lambda: held_keys
        )
        scene.setup(cow_positions=[Vector2(p) for p in cow_positions])
        return scene

    return _make
