"""Blocking component.

Marks an entity as occupying its tile for purposes of movement and path
search. Ignored by movers holding :class:`Phasing`.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Blocking:
    """Marker (no data)."""

    pass
