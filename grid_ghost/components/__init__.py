"""grid_ghost.components
======================

Aggregate import surface for the ECS component dataclasses, e.g.::

    from grid_ghost.components import Position, Ghost, Blocking

Components carry no behavior; the navigation and decision modules read them
from ``State`` stores keyed by entity id.
"""

from .properties import Blocking
from .properties import Ghost, GhostType
from .properties import Phasing
from .properties import Player
from .properties import Position

__all__ = [
    "Blocking",
    "Ghost",
    "GhostType",
    "Phasing",
    "Player",
    "Position",
]
