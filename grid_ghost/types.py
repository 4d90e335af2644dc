"""Common type aliases.

``TraversalFn`` is the pluggable walkability predicate stored on ``State``;
it lets a level decide per mover which tiles may be entered (walls, ghost
gates, phasing).
"""

from typing import Any, Callable, Protocol, Sequence, TYPE_CHECKING


# Forward declaration for TraversalFn typing to avoid circular imports:
if TYPE_CHECKING:
    from grid_ghost.state import State
    from grid_ghost.components import Position

EntityID = int

TraversalFn = Callable[["State", "EntityID", "Position"], bool]


class RandomSource(Protocol):
    """Subset of :class:`random.Random` consumed by the behavior policy."""

    def randrange(self, stop: int) -> int: ...

    def choice(self, seq: Sequence[Any]) -> Any: ...
