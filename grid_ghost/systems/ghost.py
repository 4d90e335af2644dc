"""Ghost movement system.

Runs :func:`grid_ghost.decision.decide` for every ghost against the incoming
snapshot, then applies the chosen single-tile moves. A move is dropped (the
ghost stays) when the decision is ``None`` or the destination is not
traversable, e.g. when an evading ghost backs into a wall.
"""

from dataclasses import replace
from typing import Dict, Optional

from pyrsistent import pmap

from grid_ghost.components import Position
from grid_ghost.config import DEFAULT_CONFIG, GhostConfig
from grid_ghost.decision import decide
from grid_ghost.state import State
from grid_ghost.types import EntityID, RandomSource
from grid_ghost.utils.grid import is_traversable, neighbor


def ghost_system(
    state: State,
    rng: Optional[RandomSource] = None,
    config: GhostConfig = DEFAULT_CONFIG,
) -> State:
    """Advance all ghosts by one decision.

    Args:
        state (State): Current immutable board state.
        rng (RandomSource | None): Shared randomness for every ghost this
            tick; ``None`` uses each ghost's seeded default.
        config (GhostConfig): Timing and distance parameters.

    Returns:
        State: New state with moved ghosts, refreshed ``ghost_interval`` and
            ``turn`` incremented.
    """
    moves: Dict[EntityID, Position] = {}
    intervals: Dict[EntityID, int] = dict(state.ghost_interval)

    for ghost_id in sorted(state.ghost.keys()):
        pos = state.position.get(ghost_id)
        if pos is None:
            continue
        decision = decide(state, ghost_id, rng=rng, config=config)
        intervals[ghost_id] = decision.interval
        if decision.direction is None:
            continue
        next_pos = neighbor(state, pos, decision.direction)
        if next_pos is not None and is_traversable(state, ghost_id, next_pos):
            moves[ghost_id] = next_pos

    position = state.position
    for ghost_id, next_pos in moves.items():
        position = position.set(ghost_id, next_pos)

    return replace(
        state,
        position=position,
        ghost_interval=pmap(intervals),
        turn=state.turn + 1,
    )
