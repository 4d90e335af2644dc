from dataclasses import replace

import pytest

from grid_ghost.components import GhostType, Position
from grid_ghost.levels.ascii import from_ascii, to_ascii
from grid_ghost.traversal import default_traversal_fn, open_traversal_fn


def test_from_ascii_builds_components() -> None:
    state = from_ascii(
        [
            "#C.",
            ".#P",
            "b..",
        ],
        seed=3,
    )
    assert (state.width, state.height, state.seed) == (3, 3, 3)
    assert state.traversal_fn is default_traversal_fn
    assert len(state.blocking) == 2
    assert len(state.player) == 1

    ghosts = {state.position[eid]: g.type for eid, g in state.ghost.items()}
    assert ghosts == {Position(1, 0): GhostType.CLYDE, Position(0, 2): GhostType.BLINKY}

    (phasing_id,) = state.phasing.keys()
    assert state.position[phasing_id] == Position(0, 2)


def test_ids_are_allocated_row_major() -> None:
    state = from_ascii(["P.C"])
    assert state.position[1] == Position(0, 0)
    assert state.position[2] == Position(2, 0)


def test_from_ascii_forwards_options() -> None:
    state = from_ascii(["C.P"], traversal_fn=open_traversal_fn, wrap=True)
    assert state.traversal_fn is open_traversal_fn
    assert state.wrap


@pytest.mark.parametrize(
    "rows",
    [
        [],
        [""],
        ["C..", ".."],
        ["C.X"],
    ],
)
def test_malformed_layouts_raise(rows: list[str]) -> None:
    with pytest.raises(ValueError):
        from_ascii(rows)


def test_to_ascii_renders_layout() -> None:
    rows = [
        "#C..",
        ".#.P",
        "b...",
    ]
    assert to_ascii(from_ascii(rows)) == rows


def test_to_ascii_draws_ghost_over_player() -> None:
    state = from_ascii(["C.P"])
    (pid,) = state.player.keys()
    (gid,) = state.ghost.keys()
    state = replace(state, position=state.position.set(pid, state.position[gid]))
    assert to_ascii(state) == ["C.."]
