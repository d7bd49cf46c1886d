"""A* route search.

:class:`PathFinder` searches an immutable snapshot of the topology's grid, so
the result only depends on the layout at call time. Failures are reported as
a :class:`RouteResult` with a reason instead of raising.

Tie-breaking: frontier entries are ordered by ``(g + h, insertion counter)``,
so among equal estimates the first inserted tile is expanded first and the
returned route is identical across runs.
"""

import heapq
import itertools
import logging
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Dict, Iterator, List, Optional, Set, Tuple, Union

from grid_pathing.errors import GridErrorKind
from grid_pathing.heuristic import heuristic_for
from grid_pathing.moves import neighbors, step_cost
from grid_pathing.state import Grid
from grid_pathing.tile import Tile
from grid_pathing.topology import GridTopology
from grid_pathing.types import Coordinate, MovementMode

logger = logging.getLogger(__name__)

TileLike = Union[Tile, Coordinate]


class RouteStatus(StrEnum):
    SUCCESS = auto()
    INVALID_TILE = auto()
    NO_PATH = auto()

    @property
    def error(self) -> Optional[GridErrorKind]:
        if self == RouteStatus.SUCCESS:
            return None
        return GridErrorKind(self.value)


@dataclass(frozen=True)
class Route:
    """Ordered tiles from start to goal.

    Attributes:
        tiles: Start first, goal last; consecutive tiles are neighbors.
        cost: Sum of step costs along ``tiles``.
    """

    tiles: Tuple[Tile, ...]
    cost: int

    def __len__(self) -> int:
        return len(self.tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)


@dataclass(frozen=True)
class RouteResult:
    """Result of a search."""

    status: RouteStatus
    route: Optional[Route] = None
    message: str = ""
    expanded: int = 0

    @property
    def success(self) -> bool:
        return self.status == RouteStatus.SUCCESS

    def __bool__(self) -> bool:
        return self.success

    def __repr__(self) -> str:
        if self.route is not None:
            return f"RouteResult(route=[{len(self.route)} tiles], cost={self.route.cost})"
        return f"RouteResult(status={self.status.value}, message='{self.message}')"


def _resolve(grid: Grid, tile: TileLike) -> Optional[Tile]:
    """Return the grid's own tile for ``tile`` if it is in bounds and walkable."""
    x, y = (tile.x, tile.y) if isinstance(tile, Tile) else tile
    if not grid.is_walkable(x, y):
        return None
    return grid.tiles[x][y]


def reconstruct_route(came_from: Dict[Tile, Tile], goal: Tile) -> List[Tile]:
    """Walk predecessor links back from ``goal`` and return start-to-goal order."""
    path = [goal]
    current = goal
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


class PathFinder:
    def __init__(self, topology: GridTopology) -> None:
        self.topology = topology

    def find_route(
        self, start: TileLike, goal: TileLike, mode: MovementMode
    ) -> RouteResult:
        """Lowest-cost route from ``start`` to ``goal`` under ``mode``."""
        grid = self.topology.snapshot()
        if grid is None:
            return RouteResult(RouteStatus.INVALID_TILE, message="Grid is not initialized")

        source = _resolve(grid, start)
        target = _resolve(grid, goal)
        if source is None or target is None:
            bad = start if source is None else goal
            return RouteResult(
                RouteStatus.INVALID_TILE, message=f"Not a walkable tile: {bad}"
            )

        config = self.topology.config
        heuristic = heuristic_for(mode, config.straight_cost, config.diagonal_cost)

        counter = itertools.count()
        g_score: Dict[Tile, int] = {source: 0}
        came_from: Dict[Tile, Tile] = {}
        closed: Set[Tile] = set()
        open_heap: List[Tuple[int, int, Tile]] = [
            (heuristic.estimate(source, target), next(counter), source)
        ]

        while open_heap:
            _, _, current = heapq.heappop(open_heap)
            if current in closed:
                continue  # stale entry superseded by a cheaper one

            if current == target:
                route = Route(tuple(reconstruct_route(came_from, current)), g_score[current])
                logger.debug(
                    "Route %s -> %s (%s): %d tiles, cost %d, %d expanded",
                    source.coordinate,
                    target.coordinate,
                    mode,
                    len(route),
                    route.cost,
                    len(closed),
                )
                return RouteResult(RouteStatus.SUCCESS, route=route, expanded=len(closed))

            closed.add(current)
            for neighbor in neighbors(grid, current, mode):
                if neighbor in closed:
                    continue
                tentative_g = g_score[current] + step_cost(
                    current, neighbor, config.straight_cost, config.diagonal_cost
                )
                if tentative_g < g_score.get(neighbor, tentative_g + 1):
                    g_score[neighbor] = tentative_g
                    came_from[neighbor] = current
                    priority = tentative_g + heuristic.estimate(neighbor, target)
                    heapq.heappush(open_heap, (priority, next(counter), neighbor))

        logger.debug(
            "No route %s -> %s (%s), %d expanded",
            source.coordinate,
            target.coordinate,
            mode,
            len(closed),
        )
        return RouteResult(
            RouteStatus.NO_PATH,
            message=f"No route from {source.coordinate} to {target.coordinate}",
            expanded=len(closed),
        )
