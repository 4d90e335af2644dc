from dataclasses import dataclass
from enum import StrEnum, auto


class GhostType(StrEnum):
    """Personality tag selecting a policy in :mod:`grid_ghost.behaviors`."""

    BLINKY = auto()
    CLYDE = auto()


@dataclass(frozen=True)
class Ghost:
    """Non-player chaser driven by :func:`grid_ghost.decision.decide`.

    Attributes:
        type:
            Personality. ``CLYDE`` pursues the player while far away and backs
            off once within the near threshold; ``BLINKY`` always pursues.
    """

    type: GhostType = GhostType.CLYDE
