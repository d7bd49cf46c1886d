"""Neighbor generation and step costs.

Each movement mode is described by a *diagonal rule*: a pure function mapping
the passability of the four orthogonal neighbors (up, right, down, left) to the
eligibility of the four diagonal neighbors (up-left, up-right, down-right,
down-left). :func:`neighbors` evaluates the orthogonal directions first, feeds
their passability to the rule of the active mode, and then checks each eligible
diagonal tile on its own.

Contract (``DiagonalRule``):

* Must be pure and total over the 16 possible inputs.
* Eligibility only; the diagonal tile itself is still checked for bounds and
  walls by the caller.

Output order is fixed: up, right, down, left, up-left, up-right, down-right,
down-left (omitting those not included).
"""

from typing import Dict, List, Optional, Tuple

from grid_pathing.config import DEFAULT_DIAGONAL_COST, DEFAULT_STRAIGHT_COST
from grid_pathing.state import Grid
from grid_pathing.tile import Tile
from grid_pathing.types import DiagonalRule, MovementMode, Passability

# (dx, dy) offsets; x is the row so "up" decreases x.
ORTHOGONAL_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, 0),  # up
    (0, 1),  # right
    (1, 0),  # down
    (0, -1),  # left
)
DIAGONAL_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1),  # up-left
    (-1, 1),  # up-right
    (1, 1),  # down-right
    (1, -1),  # down-left
)


def no_diagonals(passable: Passability) -> Passability:
    """Orthogonal movement: no diagonal is ever eligible."""
    return (False, False, False, False)


def corner_safe_diagonals(passable: Passability) -> Passability:
    """A diagonal is eligible only if both flanking orthogonals are passable."""
    up, right, down, left = passable
    return (up and left, up and right, down and right, down and left)


def hop_diagonals(passable: Passability) -> Passability:
    """Every diagonal is eligible; wall corners may be cut."""
    return (True, True, True, True)


DIAGONAL_RULE_REGISTRY: Dict[MovementMode, DiagonalRule] = {
    MovementMode.ORTHOGONAL: no_diagonals,
    MovementMode.DIAGONAL: corner_safe_diagonals,
    MovementMode.DIAGONAL_HOP: hop_diagonals,
}


def neighbors(grid: Optional[Grid], tile: Tile, mode: MovementMode) -> List[Tile]:
    """Legal neighbor tiles of ``tile`` under ``mode``.

    Returns an empty list if the grid is missing or ``tile`` is out of bounds.
    """
    if grid is None or not grid.is_in_bounds(tile.x, tile.y):
        return []

    x, y = tile.x, tile.y
    result: List[Tile] = []
    passable: List[bool] = []
    for dx, dy in ORTHOGONAL_OFFSETS:
        walkable = grid.is_walkable(x + dx, y + dy)
        passable.append(walkable)
        if walkable:
            result.append(grid.tiles[x + dx][y + dy])

    up, right, down, left = passable
    eligible = DIAGONAL_RULE_REGISTRY[mode]((up, right, down, left))
    for allowed, (dx, dy) in zip(eligible, DIAGONAL_OFFSETS):
        if allowed and grid.is_walkable(x + dx, y + dy):
            result.append(grid.tiles[x + dx][y + dy])
    return result


def step_cost(
    source: Tile,
    destination: Tile,
    straight_cost: int = DEFAULT_STRAIGHT_COST,
    diagonal_cost: int = DEFAULT_DIAGONAL_COST,
) -> int:
    """Cost of moving between two adjacent tiles.

    Same row or same column is a straight step, anything else is diagonal.
    Adjacency is not checked.
    """
    if source.x == destination.x or source.y == destination.y:
        return straight_cost
    return diagonal_cost
