"""Per-tick ghost decision.

:func:`decide` is the single entry point the game loop calls for each ghost.
It chains the locator, the path solver and the ghost's personality into one
direction plus an advisory wait interval:

1. Locate the nearest player (``NO_TARGET`` if none).
2. Solve a path to it (``NO_PATH`` if unreachable, ``TARGET_AT_SELF`` if the
   player shares the ghost's tile).
3. Compare the path length with ``near_threshold`` and apply the matching
   personality rule (``TARGET_NEAR`` / ``TARGET_FAR``).

Every fallback case moves to a uniformly random walkable neighbor. If the
ghost is boxed in the decision carries ``direction=None`` (stay). None of
these cases raise; the reason is reported on the returned :class:`Decision`
and as a structlog debug event.
"""

import random
import time
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import List, Optional

import structlog

from grid_ghost.behaviors import PERSONALITIES, apply_rule, is_near
from grid_ghost.components import Position
from grid_ghost.config import DEFAULT_CONFIG, GhostConfig
from grid_ghost.directions import Direction
from grid_ghost.navigation import find_nearest, shortest_path
from grid_ghost.state import State
from grid_ghost.types import EntityID, RandomSource
from grid_ghost.utils.grid import traversable_neighbors

log = structlog.get_logger(__name__)


class DecisionReason(StrEnum):
    NO_TARGET = auto()
    NO_PATH = auto()
    TARGET_AT_SELF = auto()
    TARGET_NEAR = auto()
    TARGET_FAR = auto()


@dataclass(frozen=True)
class Decision:
    """Outcome of one ghost decision.

    Attributes:
        direction: Move to make, or ``None`` to stay put.
        interval: Milliseconds to wait before deciding again.
        reason: Which branch of the policy produced ``direction``.
        path_length: Steps to the target, if a path was found.
    """

    direction: Optional[Direction]
    interval: int
    reason: DecisionReason
    path_length: Optional[int] = None


def ghost_rng(state: State, ghost_id: EntityID) -> random.Random:
    """Deterministic RNG for one ghost on the current turn.

    Seeded from a string so the stream does not depend on the interpreter's
    hash algorithm.
    """
    base_seed = state.seed if state.seed is not None else 0
    return random.Random(f"{base_seed}:{state.turn}:{ghost_id}")


def next_interval(rng: RandomSource, config: GhostConfig = DEFAULT_CONFIG) -> int:
    """Base interval plus jitter drawn from ``[0, interval_variation)``."""
    return config.move_interval + rng.randrange(config.interval_variation)


def random_move(
    state: State, ghost_id: EntityID, pos: Position, rng: RandomSource
) -> Optional[Direction]:
    """Pick a walkable neighboring direction at random, or ``None`` if boxed in."""
    options = [d for d, _ in traversable_neighbors(state, ghost_id, pos)]
    if not options:
        return None
    return rng.choice(options)


def decide(
    state: State,
    ghost_id: EntityID,
    rng: Optional[RandomSource] = None,
    config: GhostConfig = DEFAULT_CONFIG,
) -> Decision:
    """Choose the next move for ``ghost_id``.

    The direction is settled before the interval jitter is drawn, so the
    interval settings never change which direction a given seed produces.

    Args:
        state (State): Board snapshot; not modified.
        ghost_id (EntityID): Entity holding a ``Ghost`` component and a position.
        rng (RandomSource | None): Randomness for the fallback move and the
            interval jitter. Defaults to :func:`ghost_rng`.
        config (GhostConfig): Timing and distance parameters.

    Returns:
        Decision: Direction (or ``None`` to stay), interval and reason.

    Raises:
        ValueError: If ``ghost_id`` is not a ghost or has no position.
    """
    ghost = state.ghost.get(ghost_id)
    if ghost is None:
        raise ValueError(f"Entity {ghost_id} is not a ghost")
    pos = state.position.get(ghost_id)
    if pos is None:
        raise ValueError(f"Ghost {ghost_id} has no position")
    if rng is None:
        rng = ghost_rng(state, ghost_id)

    t0 = time.perf_counter()
    path: Optional[List[Direction]] = None
    target = find_nearest(state, state.player, pos)
    if target is None:
        reason = DecisionReason.NO_TARGET
    else:
        path = shortest_path(state, pos, target, ghost_id)
        if path is None:
            reason = DecisionReason.NO_PATH
        elif not path:
            reason = DecisionReason.TARGET_AT_SELF
        elif is_near(len(path), config.near_threshold):
            reason = DecisionReason.TARGET_NEAR
        else:
            reason = DecisionReason.TARGET_FAR

    direction: Optional[Direction]
    if path:
        rule = PERSONALITIES[ghost.type].rule_for(len(path), config.near_threshold)
        direction = apply_rule(rule, path)
        log.debug(
            "Ghost decided",
            ghost_id=ghost_id,
            reason=str(reason),
            rule=str(rule),
            direction=str(direction),
            path_length=len(path),
            elapsed_ms=_elapsed_ms(t0),
        )
    else:
        direction = random_move(state, ghost_id, pos, rng)
        log.debug(
            "Ghost moving randomly",
            ghost_id=ghost_id,
            reason=str(reason),
            direction=None if direction is None else str(direction),
            elapsed_ms=_elapsed_ms(t0),
        )

    interval = next_interval(rng, config)
    return Decision(direction, interval, reason, None if path is None else len(path))


def _elapsed_ms(t0: float) -> float:
    return round((time.perf_counter() - t0) * 1000, 3)
