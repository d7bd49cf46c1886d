from __future__ import annotations

import json
from typing import Iterable, List, Optional

from grid_pathing.errors import OutOfBoundsError
from grid_pathing.types import Coordinate
from grid_pathing.utils.grid import format_coordinate, parse_coordinate

__all__ = [
    "parse_coordinate",
    "format_coordinate",
    "parse_level",
    "dump_level",
]


def parse_level(text: str, side: Optional[int] = None) -> List[str]:
    """
    Parse level JSON: an array of "x,y" wall strings.
    - Each entry is validated with parse_coordinate (bounds-checked if side is given).
    - Entries are returned unchanged, in file order.
    Raises OutOfBoundsError when the payload is not an array of valid coordinates.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise OutOfBoundsError(f"Level is not valid JSON: {exc}") from None
    if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
        raise OutOfBoundsError("Level must be a JSON array of \"x,y\" strings")
    for item in data:
        parse_coordinate(item, side)
    return data


def dump_level(walls: Iterable[str | Coordinate]) -> str:
    """
    Serialize walls (strings or (x, y) pairs) to the level JSON text.
    """
    return json.dumps(
        [w if isinstance(w, str) else format_coordinate(w) for w in walls],
        separators=(",", ":"),
    )
