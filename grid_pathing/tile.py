"""Tile value object.

Immutable grid cell. ``x`` is the row index (0 at top) and ``y`` the column
index (0 at left), matching the ``"x,y"`` level format.
"""

from dataclasses import dataclass

from grid_pathing.types import Coordinate, TileKind


@dataclass(frozen=True)
class Tile:
    """Grid cell.

    Attributes:
        x: Row index.
        y: Column index.
        kind: Whether the cell is walkable (``EMPTY``) or blocking (``WALL``).
    """

    x: int
    y: int
    kind: TileKind = TileKind.EMPTY

    @property
    def coordinate(self) -> Coordinate:
        return (self.x, self.y)

    @property
    def is_wall(self) -> bool:
        return self.kind == TileKind.WALL
