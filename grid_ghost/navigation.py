"""Breadth-first locator and path solver.

Both searches expand neighbors in :data:`grid_ghost.directions.DIRECTIONS`
order (NORTH, SOUTH, EAST, WEST) and track visited tiles, so they terminate on
any finite board (including wrapping ones) and break ties the same way every
time. Neither function touches ``State``; they are pure queries over the
snapshot they are given.
"""

from collections import deque
from typing import Dict, List, Mapping, Optional, Tuple

from grid_ghost.components import Position
from grid_ghost.directions import DIRECTIONS, Direction
from grid_ghost.state import State
from grid_ghost.types import EntityID
from grid_ghost.utils.ecs import has_kind_at
from grid_ghost.utils.grid import is_traversable, neighbor


def find_nearest(
    state: State, kind: Mapping[EntityID, object], from_pos: Position
) -> Optional[Position]:
    """Return the closest tile holding an entity of ``kind``.

    Expansion starts at ``from_pos`` itself and ignores walls: this is a
    proximity query over the board, not a reachability one. Distance is the
    BFS step count; ties go to the tile visited first.

    Args:
        state (State): Board snapshot.
        kind (Mapping[EntityID, object]): Component store used as the entity
            filter, e.g. ``state.player``.
        from_pos (Position): Search origin.

    Returns:
        Position | None: First matching tile, or ``None`` if nothing on the
            board matches.
    """
    if not kind:
        return None
    queue: deque[Position] = deque([from_pos])
    visited: set[Position] = {from_pos}

    while queue:
        pos = queue.popleft()
        if has_kind_at(state, pos, kind):
            return pos
        for direction in DIRECTIONS:
            next_pos = neighbor(state, pos, direction)
            if next_pos is not None and next_pos not in visited:
                visited.add(next_pos)
                queue.append(next_pos)
    return None


def shortest_path(
    state: State, start: Position, goal: Position, entity_id: EntityID
) -> Optional[List[Direction]]:
    """Compute one shortest path from ``start`` to ``goal`` for ``entity_id``.

    Only tiles the entity may enter (``is_traversable``) are expanded, so the
    returned directions never step off the grid or into a wall as seen at
    search time. The ``start`` tile itself is not checked.

    Args:
        state (State): Board snapshot.
        start (Position): Origin, usually the entity's own tile.
        goal (Position): Destination tile.
        entity_id (EntityID): Mover whose traversal rules apply.

    Returns:
        List[Direction] | None: Steps from ``start`` to ``goal``; ``[]`` when
            ``start == goal``; ``None`` when ``goal`` is unreachable.
    """
    if start == goal:
        return []
    queue: deque[Position] = deque([start])
    came_from: Dict[Position, Tuple[Position, Direction]] = {}
    visited: set[Position] = {start}

    while queue:
        pos = queue.popleft()
        for direction in DIRECTIONS:
            next_pos = neighbor(state, pos, direction)
            if next_pos is None or next_pos in visited:
                continue
            if not is_traversable(state, entity_id, next_pos):
                continue
            visited.add(next_pos)
            came_from[next_pos] = (pos, direction)
            if next_pos == goal:
                return _reconstruct(start, goal, came_from)
            queue.append(next_pos)
    return None


def _reconstruct(
    start: Position,
    goal: Position,
    came_from: Dict[Position, Tuple[Position, Direction]],
) -> List[Direction]:
    """Walk the predecessor links back from ``goal`` to ``start``."""
    path: List[Direction] = []
    pos = goal
    while pos != start:
        pos, direction = came_from[pos]
        path.append(direction)
    path.reverse()
    return path
