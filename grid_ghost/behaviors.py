"""Per-personality move policies.

Every ghost shares the same locator and path solver; what differs is how the
first step of the path is turned into a move depending on distance. A
:class:`Personality` is a small record of rules selected by the ghost's
:class:`~grid_ghost.components.GhostType` tag:

* ``CLYDE`` heads for the player while more than ``near_threshold`` steps
  away and reverses once inside it. The reversal stands in for patrolling a
  home corner, which boards do not define.
* ``BLINKY`` always takes the first step of the shortest path.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Dict, Sequence

from grid_ghost.components import GhostType
from grid_ghost.directions import Direction


class MoveRule(StrEnum):
    PURSUE = auto()
    EVADE = auto()


@dataclass(frozen=True)
class Personality:
    """Rules applied when the target is far away / near.

    Attributes:
        far: Rule used when the path is longer than the near threshold.
        near: Rule used when the path length is within the near threshold.
    """

    far: MoveRule
    near: MoveRule

    def rule_for(self, length: int, threshold: int) -> MoveRule:
        return self.near if is_near(length, threshold) else self.far


PERSONALITIES: Dict[GhostType, Personality] = {
    GhostType.BLINKY: Personality(far=MoveRule.PURSUE, near=MoveRule.PURSUE),
    GhostType.CLYDE: Personality(far=MoveRule.PURSUE, near=MoveRule.EVADE),
}


def is_near(length: int, threshold: int) -> bool:
    """Return True for a non-empty path of at most ``threshold`` steps."""
    return 0 < length <= threshold


def apply_rule(rule: MoveRule, path: Sequence[Direction]) -> Direction:
    """Turn a non-empty path into a single move according to ``rule``."""
    if not path:
        raise ValueError("Cannot apply a move rule to an empty path")
    first = path[0]
    if rule == MoveRule.EVADE:
        return first.opposite
    return first
