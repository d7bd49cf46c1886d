"""grid_pathing
=================================

Grid topology, route search and route playback for a tile-based puzzle game.

The public surface is re-exported here so callers can write::

    from grid_pathing import GridTopology, PathFinder, MovementMode

Typical flow: ``GridTopology.load_walls`` -> ``PathFinder.find_route`` ->
``build_steps`` -> ``Choreographer.play``.
"""

from .choreographer import (
    Choreographer,
    MoveStep,
    PlaybackListener,
    PlaybackOutcome,
    build_steps,
)
from .config import DEFAULT_CONFIG, GridConfig
from .errors import (
    AlreadyPlayingError,
    EmptyRouteError,
    GridError,
    GridErrorKind,
    OutOfBoundsError,
)
from .heuristic import HeuristicEstimator, heuristic_for
from .pathfinding import PathFinder, Route, RouteResult, RouteStatus
from .state import EmptyTileIndex, Grid
from .tile import Tile
from .topology import GridTopology, LoadResult
from .types import MovementMode, TileKind

__all__ = [
    "AlreadyPlayingError",
    "Choreographer",
    "DEFAULT_CONFIG",
    "EmptyRouteError",
    "EmptyTileIndex",
    "Grid",
    "GridConfig",
    "GridError",
    "GridErrorKind",
    "GridTopology",
    "HeuristicEstimator",
    "LoadResult",
    "MoveStep",
    "MovementMode",
    "OutOfBoundsError",
    "PathFinder",
    "PlaybackListener",
    "PlaybackOutcome",
    "Route",
    "RouteResult",
    "RouteStatus",
    "Tile",
    "TileKind",
    "build_steps",
    "heuristic_for",
]
