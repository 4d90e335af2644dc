"""Core immutable ECS `State` dataclass.

This module defines the frozen :class:`State` object that represents the board
snapshot a ghost decision is computed against. Navigation queries and the
decision function only read it; :func:`grid_ghost.systems.ghost.ghost_system`
returns a *new* ``State`` rather than mutating in place. Because every search
runs over one immutable snapshot, a path can never observe a wall appearing or
disappearing half way through.

Design notes:

* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
    ``EntityID``. Absence of a key means the entity does not currently possess
    that component. A store doubles as an *entity kind* filter for
    :func:`grid_ghost.navigation.find_nearest`.
* Walkability is delegated to ``traversal_fn`` so levels can plug in their own
    rules (see :mod:`grid_ghost.traversal`).
* ``wrap`` turns the board into a torus, modelling side tunnels.
"""

from dataclasses import dataclass
from typing import Optional
from pyrsistent import PMap, pmap

from grid_ghost.components import Blocking, Ghost, Phasing, Player, Position
from grid_ghost.types import EntityID, TraversalFn


@dataclass(frozen=True)
class State:
    """Immutable board snapshot.

    Attributes:
        width (int): Grid width in tiles.
        height (int): Grid height in tiles.
        traversal_fn (TraversalFn): Predicate deciding whether an entity may enter a tile.
        wrap (bool): If True, stepping off one edge re-enters on the opposite side.
        blocking (PMap[EntityID, Blocking]): Entities that prevent movement into their tile.
        ghost (PMap[EntityID, Ghost]): Non-player chasers and their personalities.
        phasing (PMap[EntityID, Phasing]): Entities that ignore blocking tiles.
        player (PMap[EntityID, Player]): Entities ghosts track.
        position (PMap[EntityID, Position]): Current grid position of entities.
        ghost_interval (PMap[EntityID, int]): Advisory wait (ms) until each ghost's next decision.
        turn (int): Turn counter (0-based).
        seed (int | None): Base RNG seed for deterministic decisions.
    """

    # Level
    width: int
    height: int
    traversal_fn: "TraversalFn"
    wrap: bool = False

    # Components
    blocking: PMap[EntityID, Blocking] = pmap()
    ghost: PMap[EntityID, Ghost] = pmap()
    phasing: PMap[EntityID, Phasing] = pmap()
    player: PMap[EntityID, Player] = pmap()
    position: PMap[EntityID, Position] = pmap()
    ## Extra
    ghost_interval: PMap[EntityID, int] = pmap()

    # Status
    turn: int = 0

    # RNG
    seed: Optional[int] = None
