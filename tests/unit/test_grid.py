from dataclasses import replace
from typing import Optional, Tuple

import pytest

from grid_ghost.components import Position
from grid_ghost.directions import Direction
from grid_ghost.traversal import open_traversal_fn
from grid_ghost.utils.grid import (
    is_blocked_at,
    is_in_bounds,
    is_traversable,
    neighbor,
    traversable_neighbors,
)
from tests.test_utils import make_ghost_state


@pytest.mark.parametrize(
    "start, direction, expected",
    [
        ((2, 2), Direction.NORTH, (2, 1)),
        ((2, 2), Direction.SOUTH, (2, 3)),
        ((2, 2), Direction.EAST, (3, 2)),
        ((2, 2), Direction.WEST, (1, 2)),
        ((0, 0), Direction.NORTH, None),
        ((0, 0), Direction.WEST, None),
        ((4, 4), Direction.SOUTH, None),
        ((4, 4), Direction.EAST, None),
    ],
)
def test_neighbor(
    start: Tuple[int, int],
    direction: Direction,
    expected: Optional[Tuple[int, int]],
) -> None:
    state, _ = make_ghost_state(ghost_pos=(2, 2))
    result = neighbor(state, Position(*start), direction)
    assert result == (Position(*expected) if expected is not None else None)


@pytest.mark.parametrize(
    "start, direction, expected",
    [
        ((0, 1), Direction.WEST, (4, 1)),
        ((4, 1), Direction.EAST, (0, 1)),
        ((2, 0), Direction.NORTH, (2, 4)),
        ((2, 4), Direction.SOUTH, (2, 0)),
        ((2, 2), Direction.NORTH, (2, 1)),
    ],
)
def test_neighbor_wraps_on_toroidal_board(
    start: Tuple[int, int], direction: Direction, expected: Tuple[int, int]
) -> None:
    state, _ = make_ghost_state(ghost_pos=(2, 2), wrap=True)
    assert neighbor(state, Position(*start), direction) == Position(*expected)


def test_walls_block_traversal() -> None:
    state, gid = make_ghost_state(ghost_pos=(0, 0), wall_positions=[(1, 0)])
    assert is_blocked_at(state, Position(1, 0))
    assert not is_traversable(state, gid, Position(1, 0))
    assert is_traversable(state, gid, Position(0, 1))


def test_out_of_bounds_is_never_traversable() -> None:
    state, gid = make_ghost_state(ghost_pos=(0, 0), traversal_fn=open_traversal_fn)
    assert not is_in_bounds(state, Position(-1, 0))
    assert not is_traversable(state, gid, Position(-1, 0))
    assert not is_traversable(state, gid, Position(0, 5))


def test_phasing_ghost_walks_through_walls() -> None:
    state, gid = make_ghost_state(
        ghost_pos=(0, 0), wall_positions=[(1, 0)], phasing=True
    )
    assert is_traversable(state, gid, Position(1, 0))


def test_player_tile_is_walkable() -> None:
    state, gid = make_ghost_state(ghost_pos=(0, 0), player_pos=(1, 0))
    assert is_traversable(state, gid, Position(1, 0))


def test_traversable_neighbors_follow_search_order() -> None:
    state, gid = make_ghost_state(ghost_pos=(2, 2), wall_positions=[(2, 3)])
    result = traversable_neighbors(state, gid, Position(2, 2))
    assert result == [
        (Direction.NORTH, Position(2, 1)),
        (Direction.EAST, Position(3, 2)),
        (Direction.WEST, Position(1, 2)),
    ]


def test_traversable_neighbors_empty_when_boxed_in() -> None:
    state, gid = make_ghost_state(
        ghost_pos=(1, 1),
        width=3,
        height=3,
        wall_positions=[(1, 0), (0, 1), (2, 1), (1, 2)],
    )
    assert traversable_neighbors(state, gid, Position(1, 1)) == []


def test_custom_traversal_fn_is_consulted() -> None:
    state, gid = make_ghost_state(ghost_pos=(0, 0))
    only_top_row = replace(state, traversal_fn=lambda s, eid, pos: pos.y == 0)
    assert is_traversable(only_top_row, gid, Position(3, 0))
    assert not is_traversable(only_top_row, gid, Position(0, 1))
