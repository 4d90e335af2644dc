"""ECS convenience queries.

Helpers answering "what stands on this tile" without putting iteration logic
in the navigation code. All functions are pure and operate on the immutable
:class:`grid_ghost.state.State` snapshot.

Performance: breadth-first searches ask these questions once per visited
tile, so ``entities_at`` goes through a reverse index of ``State.position``
that is cached per position map. A new snapshot hashes differently and gets
its own index.
"""

from functools import lru_cache
from typing import Dict, FrozenSet, Mapping, Set

from grid_ghost.components import Position
from grid_ghost.state import State
from grid_ghost.types import EntityID


@lru_cache(maxsize=4096)
def _position_index(
    position_store: Mapping[EntityID, Position],
) -> Mapping[Position, FrozenSet[EntityID]]:
    """Build a reverse index from position to entity IDs.

    ``position_store`` is a PMap and therefore hashable.
    """
    index: Dict[Position, Set[EntityID]] = {}
    for eid, pos in position_store.items():
        index.setdefault(pos, set()).add(eid)
    return {pos: frozenset(eids) for pos, eids in index.items()}


def entities_at(state: State, pos: Position) -> FrozenSet[EntityID]:
    """Return IDs of entities standing on ``pos``."""
    return _position_index(state.position).get(pos, frozenset())


def has_kind_at(
    state: State, pos: Position, kind: Mapping[EntityID, object]
) -> bool:
    """Return True if any entity on ``pos`` belongs to the ``kind`` store."""
    return any(eid in kind for eid in entities_at(state, pos))
