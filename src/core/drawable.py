from typing import Protocol


class Drawable(Protocol):
    def draw(self, renderer) -> None: ...  # noqa: D401


class Tickable(Drawable, Protocol):
    def tick(self, dt: float) -> None: ...  # noqa: D401
