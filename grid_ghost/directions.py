"""Cardinal directions.

``DIRECTIONS`` is the canonical search order (NORTH, SOUTH, EAST, WEST). Every
breadth-first expansion iterates it in this order, which is what makes ties
between equally short paths resolve the same way on every run.
"""

from enum import StrEnum, auto
from typing import Dict, Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap


class Direction(StrEnum):
    """Grid direction; ``y`` grows downward (SOUTH)."""

    NORTH = auto()
    SOUTH = auto()
    EAST = auto()
    WEST = auto()

    @property
    def delta(self) -> Tuple[int, int]:
        return DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return OPPOSITES[self]


DIRECTIONS = [Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST]

DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}

OPPOSITES: PMap[Direction, Direction] = pmap(
    {
        Direction.NORTH: Direction.SOUTH,
        Direction.SOUTH: Direction.NORTH,
        Direction.EAST: Direction.WEST,
        Direction.WEST: Direction.EAST,
    }
)


def opposite(direction: Direction) -> Direction:
    """Return the reverse of ``direction``."""
    return OPPOSITES[direction]
