# tests/unit/test_moves.py

import itertools
from typing import List, Tuple

import pytest

from grid_pathing.moves import (
    DIAGONAL_RULE_REGISTRY,
    corner_safe_diagonals,
    hop_diagonals,
    neighbors,
    no_diagonals,
    step_cost,
)
from grid_pathing.state import new_grid
from grid_pathing.tile import Tile
from grid_pathing.types import MovementMode, TileKind
from tests.test_utils import make_topology, random_walls


def coords(tiles: List[Tile]) -> List[Tuple[int, int]]:
    return [t.coordinate for t in tiles]


@pytest.mark.parametrize(
    "mode, expected",
    [
        (MovementMode.ORTHOGONAL, [(4, 5), (5, 6), (6, 5), (5, 4)]),
        (
            MovementMode.DIAGONAL,
            [(4, 5), (5, 6), (6, 5), (5, 4), (4, 4), (4, 6), (6, 6), (6, 4)],
        ),
        (
            MovementMode.DIAGONAL_HOP,
            [(4, 5), (5, 6), (6, 5), (5, 4), (4, 4), (4, 6), (6, 6), (6, 4)],
        ),
    ],
)
def test_open_field_neighbor_order(
    mode: MovementMode, expected: List[Tuple[int, int]]
) -> None:
    topology = make_topology()
    assert coords(topology.get_neighbors(Tile(5, 5), mode)) == expected


@pytest.mark.parametrize(
    "tile, mode, expected",
    [
        ((0, 0), MovementMode.ORTHOGONAL, [(0, 1), (1, 0)]),
        ((0, 0), MovementMode.DIAGONAL, [(0, 1), (1, 0), (1, 1)]),
        ((10, 10), MovementMode.DIAGONAL_HOP, [(9, 10), (10, 9), (9, 9)]),
        ((0, 10), MovementMode.DIAGONAL, [(1, 10), (0, 9), (1, 9)]),
    ],
)
def test_corner_tiles_stay_in_bounds(
    tile: Tuple[int, int], mode: MovementMode, expected: List[Tuple[int, int]]
) -> None:
    topology = make_topology()
    assert coords(topology.get_neighbors(Tile(*tile), mode)) == expected


def test_diagonal_blocked_by_one_flanking_wall() -> None:
    # Wall above (4,5): up-left and up-right need "up" and are both dropped.
    topology = make_topology(walls=[(4, 5)])
    result = coords(topology.get_neighbors(Tile(5, 5), MovementMode.DIAGONAL))
    assert result == [(5, 6), (6, 5), (5, 4), (6, 6), (6, 4)]


def test_diagonal_hop_cuts_wall_corners() -> None:
    topology = make_topology(walls=[(4, 5), (5, 4)])
    result = coords(topology.get_neighbors(Tile(5, 5), MovementMode.DIAGONAL_HOP))
    assert result == [(5, 6), (6, 5), (4, 4), (4, 6), (6, 6), (6, 4)]
    diag = coords(topology.get_neighbors(Tile(5, 5), MovementMode.DIAGONAL))
    assert diag == [(5, 6), (6, 5), (6, 6)]


def test_diagonal_tile_itself_must_be_walkable() -> None:
    topology = make_topology(walls=[(6, 6)])
    for mode in (MovementMode.DIAGONAL, MovementMode.DIAGONAL_HOP):
        assert (6, 6) not in coords(topology.get_neighbors(Tile(5, 5), mode))


@pytest.mark.parametrize("mode", list(MovementMode))
def test_out_of_bounds_tile_has_no_neighbors(mode: MovementMode) -> None:
    topology = make_topology()
    assert topology.get_neighbors(Tile(11, 0), mode) == []
    assert topology.get_neighbors(Tile(-1, 3), mode) == []


def test_uninitialized_grid_has_no_neighbors() -> None:
    assert neighbors(None, Tile(0, 0), MovementMode.DIAGONAL) == []


@pytest.mark.parametrize("seed", range(5))
def test_neighbors_never_walls_or_out_of_bounds(seed: int) -> None:
    walls = random_walls(11, 0.3, seed)
    topology = make_topology(walls=walls)
    grid = topology.snapshot()
    assert grid is not None
    wall_set = set(walls)
    for tile in grid:
        for mode in MovementMode:
            for nb in topology.get_neighbors(tile, mode):
                assert grid.is_in_bounds(nb.x, nb.y)
                assert nb.coordinate not in wall_set
                assert nb.kind == TileKind.EMPTY


@pytest.mark.parametrize("seed", range(5))
def test_diagonal_mode_never_cuts_corners(seed: int) -> None:
    topology = make_topology(walls=random_walls(11, 0.35, seed))
    grid = topology.snapshot()
    assert grid is not None
    for tile in grid:
        for nb in topology.get_neighbors(tile, MovementMode.DIAGONAL):
            if nb.x == tile.x or nb.y == tile.y:
                continue
            assert grid.is_walkable(nb.x, tile.y)
            assert grid.is_walkable(tile.x, nb.y)


@pytest.mark.parametrize(
    "passable", list(itertools.product([False, True], repeat=4))
)
def test_diagonal_rules(passable: Tuple[bool, bool, bool, bool]) -> None:
    up, right, down, left = passable
    assert no_diagonals(passable) == (False, False, False, False)
    assert hop_diagonals(passable) == (True, True, True, True)
    assert corner_safe_diagonals(passable) == (
        up and left,
        up and right,
        down and right,
        down and left,
    )


def test_every_mode_has_a_rule() -> None:
    assert set(DIAGONAL_RULE_REGISTRY) == set(MovementMode)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ((3, 3), (2, 3), 10),
        ((3, 3), (3, 4), 10),
        ((3, 3), (4, 4), 14),
        ((3, 3), (2, 4), 14),
        # not adjacent: still only row/column matters
        ((0, 0), (0, 7), 10),
        ((0, 2), (5, 0), 14),
    ],
)
def test_step_cost(a: Tuple[int, int], b: Tuple[int, int], expected: int) -> None:
    assert step_cost(Tile(*a), Tile(*b)) == expected


def test_step_cost_custom_scale() -> None:
    assert step_cost(Tile(0, 0), Tile(1, 1), straight_cost=2, diagonal_cost=3) == 3
    assert step_cost(Tile(0, 0), Tile(0, 1), straight_cost=2, diagonal_cost=3) == 2


def test_neighbors_return_grid_tiles() -> None:
    grid = new_grid(3)
    result = neighbors(grid, Tile(1, 1), MovementMode.ORTHOGONAL)
    assert all(nb is grid.tiles[nb.x][nb.y] for nb in result)
