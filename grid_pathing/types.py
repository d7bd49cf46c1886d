"""Common type aliases and enumerations.

``MovementMode`` is the central extension point consulted by neighbor
generation (:mod:`grid_pathing.moves`) and by the distance heuristics
(:mod:`grid_pathing.heuristic`).
"""

from enum import StrEnum, auto
from typing import Callable, Tuple

Coordinate = Tuple[int, int]

# Four orthogonal passability flags in (up, right, down, left) order mapped to
# four diagonal eligibility flags in (up-left, up-right, down-right, down-left).
Passability = Tuple[bool, bool, bool, bool]
DiagonalRule = Callable[[Passability], Passability]


class TileKind(StrEnum):
    """Content of a single grid cell."""

    EMPTY = auto()
    WALL = auto()


class MovementMode(StrEnum):
    """Which neighbor directions are legal for the agent.

    Members:
        ORTHOGONAL: Only the four axis-aligned neighbors.
        DIAGONAL: Diagonals too, but never cutting a wall corner.
        DIAGONAL_HOP: All four diagonals regardless of the flanking tiles.
    """

    ORTHOGONAL = auto()
    DIAGONAL = auto()
    DIAGONAL_HOP = auto()
