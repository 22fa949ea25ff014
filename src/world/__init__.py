"""World package: re-export common symbols for simpler imports.

Callers can import public types from `world` directly, e.g.:

    from world import PastureScene, Sprite, Cow
"""

from .sprite import Sprite
from .animating_sprite import AnimatingSprite, DirectionalImages
from .objects import Cow, CowConfig, Person, PersonConfig, Fence, FenceConfig
from .world_hud import PastureHUD
from .pasture_scene import PastureScene

__all__ = [
    "Sprite",
    "AnimatingSprite",
    "DirectionalImages",
    "Cow",
    "CowConfig",
    "Person",
    "PersonConfig",
    "Fence",
    "FenceConfig",
    "PastureHUD",
    "PastureScene",
]
