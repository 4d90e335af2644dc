"""Ghost tuning constants.

:class:`GhostConfig` gathers the timing and distance parameters the behavior
policy uses. It is a frozen value object; derive variants with
``dataclasses.replace`` or build one from plain data (e.g. a parsed settings
file) with :meth:`GhostConfig.from_mapping`.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping


@dataclass(frozen=True)
class GhostConfig:
    """Timing and distance parameters.

    Attributes:
        move_interval: Base wait between decisions, in milliseconds.
        interval_variation: Exclusive upper bound of the random jitter added
            to ``move_interval``.
        near_threshold: Path length (in steps) at or below which the target
            counts as near.
    """

    move_interval: int = 250
    interval_variation: int = 50
    near_threshold: int = 8

    def __post_init__(self) -> None:
        if self.move_interval < 0:
            raise ValueError(f"move_interval must be >= 0, got {self.move_interval}")
        if self.interval_variation < 1:
            raise ValueError(
                f"interval_variation must be >= 1, got {self.interval_variation}"
            )
        if self.near_threshold < 0:
            raise ValueError(f"near_threshold must be >= 0, got {self.near_threshold}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> GhostConfig:
        """Build a config from a plain mapping; missing keys keep their defaults."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown ghost config keys: {', '.join(unknown)}")
        return cls(**{key: _as_int(key, value) for key, value in data.items()})


def _as_int(key: str, value: Any) -> int:
    """Accept ints and integer strings; reject bools, floats and anything else."""
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise ValueError(f"{key} must be an integer, got {value!r}") from None
    raise ValueError(f"{key} must be an integer, got {value!r}")


DEFAULT_CONFIG = GhostConfig()
