"""Distance estimates for the path finder.

Both heuristics are admissible under the straight/diagonal cost model of
:func:`grid_pathing.moves.step_cost`: octile distance when diagonal steps are
available, Manhattan distance when they are not.
"""

from dataclasses import dataclass
from typing import Callable, Dict

from grid_pathing.config import DEFAULT_DIAGONAL_COST, DEFAULT_STRAIGHT_COST
from grid_pathing.tile import Tile
from grid_pathing.types import MovementMode

DistanceFn = Callable[[Tile, Tile, int, int], int]


def manhattan_distance(
    source: Tile,
    target: Tile,
    straight_cost: int = DEFAULT_STRAIGHT_COST,
    diagonal_cost: int = DEFAULT_DIAGONAL_COST,
) -> int:
    """``straight * (dx + dy)``; ``diagonal_cost`` is unused."""
    dx = abs(target.x - source.x)
    dy = abs(target.y - source.y)
    return straight_cost * (dx + dy)


def octile_distance(
    source: Tile,
    target: Tile,
    straight_cost: int = DEFAULT_STRAIGHT_COST,
    diagonal_cost: int = DEFAULT_DIAGONAL_COST,
) -> int:
    """``straight * max(dx, dy) + (diagonal - straight) * min(dx, dy)``.

    The diagonal cost is capped at ``2 * straight``.
    """
    dx = abs(target.x - source.x)
    dy = abs(target.y - source.y)
    diagonal_cost = min(diagonal_cost, 2 * straight_cost)
    return straight_cost * max(dx, dy) + (diagonal_cost - straight_cost) * min(dx, dy)


DISTANCE_FN_REGISTRY: Dict[MovementMode, DistanceFn] = {
    MovementMode.ORTHOGONAL: manhattan_distance,
    MovementMode.DIAGONAL: octile_distance,
    MovementMode.DIAGONAL_HOP: octile_distance,
}


@dataclass(frozen=True)
class HeuristicEstimator:
    """Lower-bound estimator bound to one movement mode.

    Attributes:
        mode: Movement mode the estimate must stay admissible for.
        straight_cost: Cost of an axis-aligned step.
        diagonal_cost: Cost of a diagonal step.
    """

    mode: MovementMode
    straight_cost: int = DEFAULT_STRAIGHT_COST
    diagonal_cost: int = DEFAULT_DIAGONAL_COST

    def estimate(self, source: Tile, target: Tile) -> int:
        distance_fn = DISTANCE_FN_REGISTRY[self.mode]
        return distance_fn(source, target, self.straight_cost, self.diagonal_cost)


def heuristic_for(
    mode: MovementMode,
    straight_cost: int = DEFAULT_STRAIGHT_COST,
    diagonal_cost: int = DEFAULT_DIAGONAL_COST,
) -> HeuristicEstimator:
    return HeuristicEstimator(mode, straight_cost, diagonal_cost)
