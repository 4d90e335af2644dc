"""Player marker component.

Presence of :class:`Player` designates the entity ghosts track. The locator
treats ``State.player`` as the target kind; removing the component (or the
entity) sends ghosts into their random fallback.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    """Marker (no fields)."""

    pass
