"""Property component aggregates.

All properties are immutable marker or value dataclasses; systems read them
from the persistent component stores on :class:`grid_ghost.state.State`.
"""

from .blocking import Blocking
from .ghost import Ghost, GhostType
from .phasing import Phasing
from .player import Player
from .position import Position

__all__ = [
    "Blocking",
    "Ghost",
    "GhostType",
    "Phasing",
    "Player",
    "Position",
]
