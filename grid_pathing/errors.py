"""Error kinds and exceptions.

Layout edits and searches report failures as result values carrying a
:class:`GridErrorKind` (see ``LoadResult`` and ``RouteResult``). Step building
and playback raise the typed exceptions below, each exposing the same ``kind``
so callers can map every failure to a single notification table.
"""

from enum import StrEnum, auto


class GridErrorKind(StrEnum):
    OUT_OF_BOUNDS = auto()
    INVALID_TILE = auto()
    NO_PATH = auto()
    EMPTY_ROUTE = auto()
    ALREADY_PLAYING = auto()
    LEVEL_UNAVAILABLE = auto()


class GridError(Exception):
    """Base class for recoverable engine errors."""

    kind: GridErrorKind

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.kind.value)


class OutOfBoundsError(GridError, ValueError):
    """A coordinate is malformed or lies outside the grid."""

    kind = GridErrorKind.OUT_OF_BOUNDS


class EmptyRouteError(GridError, ValueError):
    """A route has fewer than two tiles, so there is nothing to animate."""

    kind = GridErrorKind.EMPTY_ROUTE


class AlreadyPlayingError(GridError, RuntimeError):
    """``play`` was called while a playback is still running."""

    kind = GridErrorKind.ALREADY_PLAYING
