"""Level codec and loader.

The ``"x,y"`` JSON array format consumed by
:meth:`grid_pathing.topology.GridTopology.load_walls` and produced by
:meth:`grid_pathing.topology.GridTopology.serialize_walls`, plus the helpers
that pick and read level files. This is the only package that touches the
filesystem.
"""

from .convert import dump_level, format_coordinate, parse_coordinate, parse_level
from .loader import (
    choose_level_number,
    level_path,
    load_level_file,
    load_level_into,
)

__all__ = [
    "choose_level_number",
    "dump_level",
    "format_coordinate",
    "level_path",
    "load_level_file",
    "load_level_into",
    "parse_coordinate",
    "parse_level",
]
