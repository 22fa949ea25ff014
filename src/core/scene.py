import math
from typing import List, Callable
from dataclasses import dataclass, field

from core.drawable import Drawable

UpdateFn = Callable[[float], None]


def frame_dt(fps: float) -> float:
    """Seconds per frame at `fps`; infinite while there is no reading."""
    if not fps:
        return math.inf
    return 1.0 / fps


@dataclass
class Scene:
    # Drawn in list order, so later entries end up on top
    drawables: List[Drawable] = field(default_factory=list)
    updaters: List[UpdateFn] = field(default_factory=list)

    def update(self, dt: float):
        for fn in self.updaters:
            fn(dt)

    # Optional per-event handler (scenes can override)
    def handle_event(self, event) -> None:
        pass

    def draw(self, renderer) -> None:
        for d in self.drawables:
            d.draw(renderer)
