"""Engine configuration.

``GridConfig`` is a frozen value passed explicitly to the components that need
it. ``GridConfig.from_env`` lets a host process override the defaults through
``GRID_PATHING_*`` environment variables (e.g. ``GRID_PATHING_SIDE=11``).
"""

import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional


DEFAULT_SIDE = 11
DEFAULT_STRAIGHT_COST = 10
DEFAULT_DIAGONAL_COST = 14
DEFAULT_STEP_DURATION = 0.25
DEFAULT_MAX_LEVELS = 18

ENV_PREFIX = "GRID_PATHING_"

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class GridConfig:
    """Tunable constants for the grid, search and playback.

    Attributes:
        side: Side length of the square grid.
        straight_cost: Cost of an axis-aligned step.
        diagonal_cost: Cost of a diagonal step (~ ``straight_cost * sqrt(2)``).
        step_duration: Seconds between two playback steps.
        keep_backup: Snapshot the grid after each successful load so that
            ``reset`` can restore it (the development-build behavior).
        randomize_level: Pick a random level number instead of level 0.
        max_levels: Highest level number available to the random pick.
    """

    side: int = DEFAULT_SIDE
    straight_cost: int = DEFAULT_STRAIGHT_COST
    diagonal_cost: int = DEFAULT_DIAGONAL_COST
    step_duration: float = DEFAULT_STEP_DURATION
    keep_backup: bool = True
    randomize_level: bool = False
    max_levels: int = DEFAULT_MAX_LEVELS

    def __post_init__(self) -> None:
        if self.side <= 0:
            raise ValueError(f"Grid side must be positive, got {self.side}")
        if self.straight_cost <= 0 or self.diagonal_cost < self.straight_cost:
            raise ValueError(
                "Costs must satisfy 0 < straight_cost <= diagonal_cost, got "
                f"{self.straight_cost}/{self.diagonal_cost}"
            )
        if self.step_duration < 0:
            raise ValueError(
                f"Step duration cannot be negative, got {self.step_duration}"
            )
        if self.max_levels < 1:
            raise ValueError(f"max_levels must be at least 1, got {self.max_levels}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GridConfig":
        """Build a config from ``GRID_PATHING_<FIELD>`` variables.

        Unset variables keep their defaults. Booleans accept ``1/0``,
        ``true/false``, ``yes/no`` and ``on/off``.

        Raises:
            ValueError: If a variable cannot be converted to the field type.
        """
        if environ is None:
            environ = os.environ
        overrides: Dict[str, Any] = {}
        for field in fields(cls):
            raw = environ.get(ENV_PREFIX + field.name.upper())
            if raw is None:
                continue
            default = field.default
            if isinstance(default, bool):
                overrides[field.name] = _parse_bool(field.name, raw)
            elif isinstance(default, int):
                overrides[field.name] = int(raw)
            elif isinstance(default, float):
                overrides[field.name] = float(raw)
            else:
                overrides[field.name] = raw
        return cls(**overrides)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_STRINGS:
        return True
    if value in _FALSE_STRINGS:
        return False
    raise ValueError(f"Invalid boolean for {name}: {raw!r}")


DEFAULT_CONFIG = GridConfig()
