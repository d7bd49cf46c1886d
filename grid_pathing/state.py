"""Immutable grid value.

This module defines the frozen :class:`Grid` object that represents the whole
wall layout at one moment. Edits never happen in place: every helper here
returns a *new* ``Grid``. A grid handed to the path finder or to the renderer
is therefore a stable snapshot even if the owning
:class:`grid_pathing.topology.GridTopology` is edited afterwards.

Design notes:

* Rows are **persistent vectors** (``pyrsistent.PVector``) of :class:`Tile`;
  ``tiles[x][y]`` is the tile at row ``x``, column ``y``.
* The grid is square; ``side`` is fixed when the grid is created.
* ``EmptyTileIndex`` is derived data (see :func:`empty_tile_index`) and is not
  stored here.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from grid_pathing.tile import Tile
from grid_pathing.types import Coordinate, TileKind

EmptyTileIndex = Tuple[Tuple[Tile, ...], ...]


@dataclass(frozen=True)
class Grid:
    """Immutable ``side`` x ``side`` matrix of tiles.

    Attributes:
        side (int): Number of rows (and columns).
        tiles (PVector[PVector[Tile]]): Row-major tile matrix.
    """

    side: int
    tiles: PVector[PVector[Tile]]

    def is_in_bounds(self, x: int, y: int) -> bool:
        """Return True if ``(x, y)`` lies within the grid."""
        return 0 <= x < self.side and 0 <= y < self.side

    def tile_at(self, x: int, y: int) -> Tile:
        """Return the tile at ``(x, y)``.

        Raises:
            IndexError: If the coordinate is outside the grid.
        """
        if not self.is_in_bounds(x, y):
            raise IndexError(f"Out of bounds: {(x, y)} for grid {self.side}x{self.side}")
        return self.tiles[x][y]

    def is_walkable(self, x: int, y: int) -> bool:
        """In bounds and not a wall."""
        return self.is_in_bounds(x, y) and not self.tiles[x][y].is_wall

    def __iter__(self) -> Iterator[Tile]:
        """Iterate tiles in row-major order."""
        for row in self.tiles:
            yield from row

    def walls(self) -> List[Coordinate]:
        """Coordinates of every wall tile in row-major order."""
        return [tile.coordinate for tile in self if tile.is_wall]


def new_grid(side: int) -> Grid:
    """Return an all-empty grid with coordinates assigned row-major."""
    return Grid(
        side=side,
        tiles=pvector(
            pvector(Tile(x, y, TileKind.EMPTY) for y in range(side))
            for x in range(side)
        ),
    )


def with_walls(grid: Grid, walls: Iterable[Coordinate]) -> Grid:
    """Return an all-empty copy of ``grid`` with ``walls`` marked.

    Coordinates must already be validated against ``grid.side``.
    """
    wall_set = set(walls)
    return Grid(
        side=grid.side,
        tiles=pvector(
            pvector(
                Tile(
                    x, y, TileKind.WALL if (x, y) in wall_set else TileKind.EMPTY
                )
                for y in range(grid.side)
            )
            for x in range(grid.side)
        ),
    )


def with_tile_kind(grid: Grid, x: int, y: int, kind: TileKind) -> Grid:
    """Return a copy of ``grid`` where the tile at ``(x, y)`` has ``kind``."""
    row = grid.tiles[x].set(y, Tile(x, y, kind))
    return Grid(side=grid.side, tiles=grid.tiles.set(x, row))


def cleared(grid: Grid) -> Grid:
    """Return a copy of ``grid`` with every tile empty."""
    return with_walls(grid, ())


def empty_tile_index(grid: Grid) -> EmptyTileIndex:
    """For each row, the empty tiles in column order."""
    return tuple(
        tuple(tile for tile in row if tile.kind == TileKind.EMPTY)
        for row in grid.tiles
    )
