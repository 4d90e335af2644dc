"""Built-in traversal functions.

A *traversal function* maps (state, entity id, position) -> bool and answers
whether the entity may enter that tile. ``State.traversal_fn`` holds the one a
level uses; the path solver and the random fallback both consult it, so
different ghosts may see different mazes over the same board.

Contract (``TraversalFn``):

* Called only with in-bounds positions (bounds are checked by
  :func:`grid_ghost.utils.grid.is_traversable`).
* Must not mutate ``State``.
"""

from grid_ghost.components import Position
from grid_ghost.state import State
from grid_ghost.types import EntityID
from grid_ghost.utils.grid import is_blocked_at


def default_traversal_fn(state: State, eid: EntityID, pos: Position) -> bool:
    """Walls block everyone except phasing entities."""
    if eid in state.phasing:
        return True
    return not is_blocked_at(state, pos)


def open_traversal_fn(state: State, eid: EntityID, pos: Position) -> bool:
    """Every in-bounds tile is walkable."""
    return True
