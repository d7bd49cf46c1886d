"""Grid owner: layout edits, neighbors and costs.

:class:`GridTopology` is the single mutator of the wall layout. It holds a
reference to the current immutable :class:`grid_pathing.state.Grid` and swaps
it for a new value on every edit (load, reset, clear, single-tile edits). The
derived ``EmptyTileIndex`` is recomputed after each swap.

Failures of layout edits are returned as :class:`LoadResult` values rather
than raised; a failed edit never changes the grid.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from grid_pathing.config import DEFAULT_CONFIG, GridConfig
from grid_pathing.errors import GridErrorKind, OutOfBoundsError
from grid_pathing.moves import neighbors, step_cost
from grid_pathing.state import (
    EmptyTileIndex,
    Grid,
    cleared,
    empty_tile_index,
    new_grid,
    with_tile_kind,
    with_walls,
)
from grid_pathing.tile import Tile
from grid_pathing.types import MovementMode, TileKind
from grid_pathing.utils.grid import (
    CoordinateLike,
    format_coordinate,
    is_in_bounds,
    normalize_coordinates,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadResult:
    """Outcome of a layout edit.

    Attributes:
        empty_tiles: Refreshed empty-tile index on success, ``None`` on failure.
        error: Error kind on failure, ``None`` on success.
        message: Human readable detail for failures.
    """

    empty_tiles: Optional[EmptyTileIndex] = None
    error: Optional[GridErrorKind] = None
    message: str = ""

    @property
    def success(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.success


class GridTopology:
    config: GridConfig
    grid: Optional[Grid]
    backup: Optional[Grid]

    def __init__(self, config: GridConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self.grid = None
        self.backup = None
        self._empty_tiles: EmptyTileIndex = ()

    @property
    def side(self) -> int:
        return self.config.side

    @property
    def empty_tiles(self) -> EmptyTileIndex:
        """Per-row empty tiles of the current layout (empty if uninitialized)."""
        return self._empty_tiles

    def snapshot(self) -> Optional[Grid]:
        """Current immutable grid value, safe to hand to a search or renderer."""
        return self.grid

    def initialize(self) -> None:
        """Fill the grid with empty tiles."""
        self._replace(new_grid(self.side))

    def load_walls(self, coordinates: Iterable[CoordinateLike]) -> LoadResult:
        """Replace the layout with ``coordinates`` marked as walls.

        Every entry is validated first; a malformed or out-of-range entry
        rejects the whole load and leaves the grid as it was.
        """
        try:
            walls = normalize_coordinates(coordinates, self.side)
        except OutOfBoundsError as exc:
            logger.warning("Rejected wall layout: %s", exc)
            return LoadResult(error=exc.kind, message=str(exc))

        base = self.grid if self.grid is not None else new_grid(self.side)
        self._replace(with_walls(base, walls))
        if self.config.keep_backup:
            self.backup = self.grid
        logger.debug("Loaded %d walls", len(walls))
        return LoadResult(empty_tiles=self._empty_tiles)

    def set_tile(self, x: int, y: int, kind: TileKind) -> LoadResult:
        """Place or remove a single wall. The backup is left untouched."""
        if not is_in_bounds(self.side, x, y):
            message = f"Out of bounds: {(x, y)} for grid {self.side}x{self.side}"
            return LoadResult(error=GridErrorKind.OUT_OF_BOUNDS, message=message)
        base = self.grid if self.grid is not None else new_grid(self.side)
        self._replace(with_tile_kind(base, x, y, kind))
        return LoadResult(empty_tiles=self._empty_tiles)

    def reset(self) -> None:
        """Restore the last backup, if any."""
        if self.backup is None:
            return
        self._replace(self.backup)
        logger.debug("Grid reset from backup")

    def clear(self) -> None:
        """Make every tile empty; the backup is kept."""
        if self.grid is None:
            return
        self._replace(cleared(self.grid))
        logger.debug("Grid cleared")

    def serialize_walls(self) -> List[str]:
        """Wall coordinates as ``"x,y"`` strings in row-major order."""
        if self.grid is None:
            return []
        return [format_coordinate(coordinate) for coordinate in self.grid.walls()]

    def get_neighbors(self, tile: Tile, mode: MovementMode) -> List[Tile]:
        return neighbors(self.grid, tile, mode)

    def get_cost(self, source: Tile, destination: Tile) -> int:
        return step_cost(
            source,
            destination,
            straight_cost=self.config.straight_cost,
            diagonal_cost=self.config.diagonal_cost,
        )

    def _replace(self, grid: Grid) -> None:
        self.grid = grid
        self._empty_tiles = empty_tile_index(grid)
