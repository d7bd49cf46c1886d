from typing import Iterable, Optional, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw

from grid_pathing.state import Grid
from grid_pathing.tile import Tile

DEFAULT_CELL_SIZE = 48

RGBA = Tuple[int, int, int, int]
UInt8Array = npt.NDArray[np.uint8]
BoolArray = npt.NDArray[np.bool_]

EMPTY_COLOR: RGBA = (236, 236, 228, 255)
WALL_COLOR: RGBA = (70, 62, 56, 255)
GRID_LINE_COLOR: RGBA = (190, 190, 180, 255)
ROUTE_COLOR: RGBA = (40, 120, 220, 255)
AGENT_COLOR: RGBA = (220, 70, 50, 255)


def wall_mask(grid: Grid) -> BoolArray:
    """Boolean ``side x side`` array, True where the tile is a wall."""
    return np.array([[tile.is_wall for tile in row] for row in grid.tiles], dtype=np.bool_)


def _cell_center(tile: Tile, cell_size: int) -> Tuple[int, int]:
    # Rows run down the image, columns across.
    return (tile.y * cell_size + cell_size // 2, tile.x * cell_size + cell_size // 2)


def render_grid(
    grid: Optional[Grid],
    route: Optional[Iterable[Tile]] = None,
    agent: Optional[Tile] = None,
    cell_size: int = DEFAULT_CELL_SIZE,
) -> Image.Image:
    """
    Rasterize the grid as an RGBA image, with the optional route drawn through
    cell centres and the agent drawn as a disc on top.
    """
    if grid is None:
        raise ValueError("Cannot render an uninitialized grid")
    if cell_size < 2:
        raise ValueError(f"cell_size must be at least 2, got {cell_size}")

    mask = wall_mask(grid)
    cells: UInt8Array = np.where(
        mask[..., None],
        np.array(WALL_COLOR, dtype=np.uint8),
        np.array(EMPTY_COLOR, dtype=np.uint8),
    ).astype(np.uint8)
    pixels: UInt8Array = np.repeat(np.repeat(cells, cell_size, axis=0), cell_size, axis=1)

    # Grid lines on the top/left edge of every cell
    line = np.array(GRID_LINE_COLOR, dtype=np.uint8)
    pixels[::cell_size, :, :] = line
    pixels[:, ::cell_size, :] = line

    img = Image.fromarray(np.ascontiguousarray(pixels))
    draw = ImageDraw.Draw(img)

    if route is not None:
        points = [_cell_center(tile, cell_size) for tile in route]
        if len(points) >= 2:
            draw.line(points, fill=ROUTE_COLOR, width=max(1, cell_size // 8), joint="curve")
        radius = max(1, cell_size // 10)
        for cx, cy in points:
            draw.ellipse((cx - radius, cy - radius, cx + radius, cy + radius), fill=ROUTE_COLOR)

    if agent is not None:
        cx, cy = _cell_center(agent, cell_size)
        radius = max(1, cell_size // 3)
        draw.ellipse(
            (cx - radius, cy - radius, cx + radius, cy + radius),
            fill=AGENT_COLOR,
            outline=(0, 0, 0, 255),
        )

    return img


class GridRenderer:
    cell_size: int

    def __init__(self, cell_size: int = DEFAULT_CELL_SIZE):
        self.cell_size = cell_size

    def render(
        self,
        grid: Optional[Grid],
        route: Optional[Iterable[Tile]] = None,
        agent: Optional[Tile] = None,
    ) -> Image.Image:
        return render_grid(grid, route=route, agent=agent, cell_size=self.cell_size)
