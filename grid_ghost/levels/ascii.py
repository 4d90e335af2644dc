"""Text level layouts.

Build a :class:`grid_ghost.state.State` from rows of glyphs and render one
back, for tests, debugging and quick experiments. One glyph per tile:

========  ====================================
Glyph     Meaning
========  ====================================
``#``     wall (``Blocking``)
``.``     floor (space is accepted too)
``P``     player
``C``     Clyde ghost
``B``     Blinky ghost
``c``     phasing Clyde ghost
``b``     phasing Blinky ghost
========  ====================================

Entity IDs are allocated row by row, left to right, starting at 1.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from pyrsistent import pmap

from grid_ghost.components import (
    Blocking,
    Ghost,
    GhostType,
    Phasing,
    Player,
    Position,
)
from grid_ghost.state import State
from grid_ghost.traversal import default_traversal_fn
from grid_ghost.types import EntityID, TraversalFn
from grid_ghost.utils.ecs import entities_at

FLOOR_GLYPHS = {".", " "}
GHOST_GLYPHS: Dict[str, GhostType] = {
    "C": GhostType.CLYDE,
    "B": GhostType.BLINKY,
    "c": GhostType.CLYDE,
    "b": GhostType.BLINKY,
}


def from_ascii(
    rows: Sequence[str],
    traversal_fn: Optional[TraversalFn] = None,
    wrap: bool = False,
    seed: Optional[int] = None,
) -> State:
    """Parse a rectangular glyph layout into a ``State``.

    Raises:
        ValueError: If the layout is empty, ragged, or uses unknown glyphs.
    """
    if not rows:
        raise ValueError("Level layout is empty")
    width = len(rows[0])
    if width == 0:
        raise ValueError("Level layout has zero width")

    position: Dict[EntityID, Position] = {}
    blocking: Dict[EntityID, Blocking] = {}
    ghost: Dict[EntityID, Ghost] = {}
    phasing: Dict[EntityID, Phasing] = {}
    player: Dict[EntityID, Player] = {}
    next_eid = 1

    for y, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(
                f"Row {y} has width {len(row)}, expected {width}"
            )
        for x, glyph in enumerate(row):
            if glyph in FLOOR_GLYPHS:
                continue
            eid = next_eid
            next_eid += 1
            position[eid] = Position(x, y)
            if glyph == "#":
                blocking[eid] = Blocking()
            elif glyph == "P":
                player[eid] = Player()
            elif glyph in GHOST_GLYPHS:
                ghost[eid] = Ghost(type=GHOST_GLYPHS[glyph])
                if glyph.islower():
                    phasing[eid] = Phasing()
            else:
                raise ValueError(f"Unknown glyph {glyph!r} at {(x, y)}")

    return State(
        width=width,
        height=len(rows),
        traversal_fn=traversal_fn if traversal_fn is not None else default_traversal_fn,
        wrap=wrap,
        blocking=pmap(blocking),
        ghost=pmap(ghost),
        phasing=pmap(phasing),
        player=pmap(player),
        position=pmap(position),
        seed=seed,
    )


def to_ascii(state: State) -> List[str]:
    """Render ``state`` with the glyphs accepted by :func:`from_ascii`.

    When several entities share a tile the ghost wins over the player, and
    both win over a wall.
    """
    rows: List[str] = []
    for y in range(state.height):
        row: List[str] = []
        for x in range(state.width):
            row.append(_glyph(state, Position(x, y)))
        rows.append("".join(row))
    return rows


def _glyph(state: State, pos: Position) -> str:
    eids = sorted(entities_at(state, pos))
    for eid in eids:
        if eid in state.ghost:
            glyph = "C" if state.ghost[eid].type == GhostType.CLYDE else "B"
            return glyph.lower() if eid in state.phasing else glyph
    if any(eid in state.player for eid in eids):
        return "P"
    if any(eid in state.blocking for eid in eids):
        return "#"
    return "."
