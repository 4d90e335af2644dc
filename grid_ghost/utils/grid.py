"""Grid topology helpers.

Read-only neighbor and walkability queries used by the locator, the path
solver and the random fallback. Functions here are pure and kept small since
they sit in the inner loop of every breadth-first search.
"""

from typing import List, Optional, Tuple

from grid_ghost.components import Position
from grid_ghost.directions import DIRECTIONS, Direction
from grid_ghost.state import State
from grid_ghost.types import EntityID
from grid_ghost.utils.ecs import entities_at


def is_in_bounds(state: State, pos: Position) -> bool:
    """Return True if ``pos`` lies within the level rectangle."""
    return 0 <= pos.x < state.width and 0 <= pos.y < state.height


def wrap_position(x: int, y: int, width: int, height: int) -> Position:
    """Toroidal wrap for coordinates (used when ``State.wrap`` is set)."""
    return Position(x % width, y % height)


def neighbor(state: State, pos: Position, direction: Direction) -> Optional[Position]:
    """Return the tile one step from ``pos`` in ``direction``.

    ``None`` if the step leaves the grid. On wrapping boards the step
    re-enters on the opposite edge and the result is never ``None``.
    """
    dx, dy = direction.delta
    if state.wrap:
        return wrap_position(pos.x + dx, pos.y + dy, state.width, state.height)
    next_pos = Position(pos.x + dx, pos.y + dy)
    if not is_in_bounds(state, next_pos):
        return None
    return next_pos


def is_blocked_at(state: State, pos: Position) -> bool:
    """Return True if any blocking entity occupies ``pos``."""
    return any(eid in state.blocking for eid in entities_at(state, pos))


def is_traversable(state: State, entity_id: EntityID, pos: Position) -> bool:
    """Return True if ``entity_id`` may currently enter ``pos``.

    Out-of-bounds tiles are never traversable; otherwise the decision is
    delegated to ``state.traversal_fn``.
    """
    return is_in_bounds(state, pos) and state.traversal_fn(state, entity_id, pos)


def traversable_neighbors(
    state: State, entity_id: EntityID, pos: Position
) -> List[Tuple[Direction, Position]]:
    """List ``(direction, tile)`` pairs the entity may step into, in search order."""
    result: List[Tuple[Direction, Position]] = []
    for direction in DIRECTIONS:
        next_pos = neighbor(state, pos, direction)
        if next_pos is not None and is_traversable(state, entity_id, next_pos):
            result.append((direction, next_pos))
    return result
