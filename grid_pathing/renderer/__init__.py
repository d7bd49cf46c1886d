"""Rendering subpackage.

Turns immutable :class:`grid_pathing.state.Grid` snapshots (optionally with a
route and the agent position) into still RGBA images, built with NumPy and
drawn with Pillow. Meant for debugging and for UI layers that need a static
picture of the board.

See :mod:`grid_pathing.renderer.image` for the drawing routines.
"""

from .image import DEFAULT_CELL_SIZE, GridRenderer, render_grid, wall_mask

__all__ = ["DEFAULT_CELL_SIZE", "GridRenderer", "render_grid", "wall_mask"]
