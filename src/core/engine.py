"""Core engine loop & orchestration.

Separates concerns:
- Engine: sets up the window and GL context, pumps events, runs the loop.
- Scene: holds the game objects & update/draw logic.
- Renderer2D: the drawing primitives scenes draw through.

Frame time comes from the clock's measured frame rate, which reads 0 until
the clock has a few samples; scenes are expected to skip those frames.
"""

from __future__ import annotations

import pygame

from config import *
from core.renderer import Renderer2D
from core.scene import frame_dt
from world.pasture_scene import PastureScene

# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(self):
        pygame.init()
        pygame.display.set_caption(CAPTION)
        flags = pygame.DOUBLEBUF | pygame.OPENGL
        size = (WIDTH, HEIGHT)
        if FULLSCREEN:
            flags |= pygame.FULLSCREEN
            size = (0, 0)
        try:
            # vsync: 1 to enable, 0 to disable
            surface = pygame.display.set_mode(size, flags, vsync=(1 if VSYNC else 0))
        except (TypeError, pygame.error):
            # Older pygame versions won't accept the vsync kwarg, or vsync
            # was requested but unavailable on this system/driver.
            surface = pygame.display.set_mode(size, flags)
        self.width, self.height = surface.get_size()
        self.clock = pygame.time.Clock()

        self.renderer = Renderer2D(self.width, self.height)
        self.scene = PastureScene(self.width, self.height)
        self.scene.setup()

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            self.scene.handle_event(event)
        return True

    # ------------------------------------------------------------------
    def update(self, dt: float):
        self.scene.update(dt)

    # ------------------------------------------------------------------
    def render(self):  # pragma: no cover - visual
        self.renderer.begin_frame()
        self.scene.draw(self.renderer)
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self):  # pragma: no cover - visual
        running = True
        while running:
            self.clock.tick(FPS)
            running = self.handle_events()
            if not running:
                break
            self.update(frame_dt(self.clock.get_fps()))
            self.render()
        pygame.quit()
