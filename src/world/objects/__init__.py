"""World objects subpackage.

Re-exports the in-world object classes so callers can import them from a
single location::

    from world.objects import Cow, Person, Fence
"""

from .cow import Cow, CowConfig
from .person import Person, PersonConfig
from .fence import Fence, FenceConfig

__all__ = ["Cow", "CowConfig", "Person", "PersonConfig", "Fence", "FenceConfig"]
