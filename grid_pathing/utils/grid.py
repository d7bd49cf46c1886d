"""Coordinate helpers.

Conversion between the ``"x,y"`` wall format and integer coordinate pairs,
plus bounds validation. Functions here are pure.
"""

import re
from numbers import Integral
from typing import Iterable, List, Optional, Union

from grid_pathing.errors import OutOfBoundsError
from grid_pathing.types import Coordinate

CoordinateLike = Union[str, Coordinate]

_INTEGER = re.compile(r"\s*-?\d+\s*", re.ASCII)


def is_in_bounds(side: int, x: int, y: int) -> bool:
    """Return True if ``(x, y)`` lies within a ``side`` x ``side`` grid."""
    return 0 <= x < side and 0 <= y < side


def parse_coordinate(text: str, side: Optional[int] = None) -> Coordinate:
    """Parse an ``"x,y"`` string.

    Surrounding whitespace around either number is tolerated; anything else
    that is not exactly two base-10 integers is rejected.

    Raises:
        OutOfBoundsError: If ``text`` is malformed, or if ``side`` is given and
            the coordinate lies outside the grid.
    """
    parts = text.split(",")
    if len(parts) != 2 or not all(_INTEGER.fullmatch(part) for part in parts):
        raise OutOfBoundsError(f"Malformed coordinate: {text!r}")
    x, y = int(parts[0]), int(parts[1])
    if side is not None and not is_in_bounds(side, x, y):
        raise OutOfBoundsError(f"Out of bounds: {(x, y)} for grid {side}x{side}")
    return (x, y)


def format_coordinate(coordinate: Coordinate) -> str:
    """Inverse of :func:`parse_coordinate`."""
    x, y = coordinate
    return f"{x},{y}"


def normalize_coordinates(items: Iterable[CoordinateLike], side: int) -> List[Coordinate]:
    """Validate a mixed sequence of ``"x,y"`` strings and ``(x, y)`` pairs.

    All entries are checked before anything is returned, so a caller can apply
    the result atomically.

    Raises:
        OutOfBoundsError: On the first malformed or out-of-range entry.
    """
    result: List[Coordinate] = []
    for item in items:
        if isinstance(item, str):
            result.append(parse_coordinate(item, side))
            continue
        try:
            x, y = item
        except (TypeError, ValueError):
            raise OutOfBoundsError(f"Malformed coordinate: {item!r}") from None
        # bool is an int subclass but never a valid coordinate
        if not all(isinstance(v, Integral) and not isinstance(v, bool) for v in (x, y)):
            raise OutOfBoundsError(f"Malformed coordinate: {item!r}")
        x, y = int(x), int(y)
        if not is_in_bounds(side, x, y):
            raise OutOfBoundsError(f"Out of bounds: {(x, y)} for grid {side}x{side}")
        result.append((x, y))
    return result
