import heapq
import random
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from grid_pathing.choreographer import PlaybackOutcome
from grid_pathing.config import GridConfig
from grid_pathing.moves import neighbors, step_cost
from grid_pathing.state import Grid
from grid_pathing.tile import Tile
from grid_pathing.topology import GridTopology
from grid_pathing.types import Coordinate, MovementMode


def make_topology(
    walls: Iterable[Coordinate] = (),
    side: int = 11,
    keep_backup: bool = True,
) -> GridTopology:
    """Initialized topology with ``walls`` loaded."""
    topology = GridTopology(GridConfig(side=side, keep_backup=keep_backup))
    topology.initialize()
    result = topology.load_walls(list(walls))
    assert result.success, result.message
    return topology


def random_walls(side: int, density: float, seed: int) -> List[Coordinate]:
    rng = random.Random(seed)
    return [
        (x, y) for x in range(side) for y in range(side) if rng.random() < density
    ]


def dijkstra_costs(
    grid: Grid,
    source: Tile,
    mode: MovementMode,
    straight_cost: int = 10,
    diagonal_cost: int = 14,
) -> Dict[Coordinate, int]:
    """Reference single-source optimal costs, independent of the A* code."""
    best: Dict[Coordinate, int] = {source.coordinate: 0}
    heap: List[Tuple[int, Coordinate]] = [(0, source.coordinate)]
    while heap:
        cost, (x, y) = heapq.heappop(heap)
        if cost > best[(x, y)]:
            continue
        current = grid.tiles[x][y]
        for nb in neighbors(grid, current, mode):
            candidate = cost + step_cost(current, nb, straight_cost, diagonal_cost)
            if candidate < best.get(nb.coordinate, candidate + 1):
                best[nb.coordinate] = candidate
                heapq.heappush(heap, (candidate, nb.coordinate))
    return best


def route_cost(tiles: Sequence[Tile]) -> int:
    return sum(step_cost(a, b) for a, b in zip(tiles, tiles[1:]))


def is_adjacent(a: Tile, b: Tile) -> bool:
    return max(abs(a.x - b.x), abs(a.y - b.y)) == 1


class RecordingListener:
    """Playback listener that keeps every notification."""

    def __init__(self) -> None:
        self.arrived: List[Tile] = []
        self.finished: List[PlaybackOutcome] = []

    def on_arrived(self, tile: Tile) -> None:
        self.arrived.append(tile)

    def on_finished(self, outcome: PlaybackOutcome) -> None:
        self.finished.append(outcome)

    @property
    def outcome(self) -> Optional[PlaybackOutcome]:
        return self.finished[-1] if self.finished else None
