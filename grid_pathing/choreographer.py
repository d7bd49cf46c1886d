"""Route playback.

:func:`build_steps` turns a :class:`grid_pathing.pathfinding.Route` into one
:class:`MoveStep` per consecutive tile pair. :class:`Choreographer` then plays
those steps on an asyncio timer, notifying listeners each time the agent
arrives on a tile and once more when playback ends.

Playback rules:

* One playback at a time; a second ``play`` while running raises
  :class:`grid_pathing.errors.AlreadyPlayingError` without touching the first.
* Steps are atomic. ``cancel`` during a step's wait discards that step; tiles
  already reported stay reported.
* ``pause`` holds the agent on its current tile and stops the step clock;
  ``resume`` lets the current step finish its remaining time.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Iterable, List, Optional, Protocol, Sequence, Tuple

from grid_pathing.config import DEFAULT_CONFIG, GridConfig
from grid_pathing.errors import AlreadyPlayingError, EmptyRouteError
from grid_pathing.moves import step_cost
from grid_pathing.tile import Tile

logger = logging.getLogger(__name__)


class PlaybackOutcome(StrEnum):
    FINISHED = auto()
    CANCELLED = auto()


@dataclass(frozen=True)
class MoveStep:
    """One animated move.

    Attributes:
        dx: Row displacement.
        dy: Column displacement.
        tile: Destination tile.
        duration: Seconds to wait before the agent arrives on ``tile``.
        weight: Step cost (straight or diagonal).
    """

    dx: int
    dy: int
    tile: Tile
    duration: float
    weight: int

    @property
    def vector(self) -> Tuple[int, int]:
        return (self.dx, self.dy)


class PlaybackListener(Protocol):
    def on_arrived(self, tile: Tile) -> None: ...

    def on_finished(self, outcome: PlaybackOutcome) -> None: ...


def build_steps(
    route: Iterable[Tile], config: GridConfig = DEFAULT_CONFIG
) -> List[MoveStep]:
    """Convert consecutive route tiles to move steps.

    Every step lasts ``config.step_duration`` seconds and is weighted with the
    configured straight or diagonal cost.

    Raises:
        EmptyRouteError: If the route has fewer than two tiles.
    """
    tiles = list(route)
    if len(tiles) < 2:
        raise EmptyRouteError(f"Route has {len(tiles)} tile(s); nothing to animate")
    return [
        MoveStep(
            dx=dst.x - src.x,
            dy=dst.y - src.y,
            tile=dst,
            duration=config.step_duration,
            weight=step_cost(src, dst, config.straight_cost, config.diagonal_cost),
        )
        for src, dst in zip(tiles, tiles[1:])
    ]


class Choreographer:
    """Plays move steps on a fixed cadence."""

    def __init__(self, listeners: Optional[Sequence[PlaybackListener]] = None) -> None:
        self._listeners: List[PlaybackListener] = list(listeners or [])
        self._playing = False
        self._position: Optional[Tile] = None
        self._resumed = asyncio.Event()
        self._resumed.set()
        self._cancelled = asyncio.Event()
        # set by pause and cancel to stop the running step clock
        self._interrupted = asyncio.Event()

    @property
    def is_playing(self) -> bool:
        return self._playing

    @property
    def is_paused(self) -> bool:
        return self._playing and not self._resumed.is_set()

    @property
    def position(self) -> Optional[Tile]:
        """Last tile the agent arrived on, ``None`` before the first step."""
        return self._position

    def add_listener(self, listener: PlaybackListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: PlaybackListener) -> None:
        self._listeners.remove(listener)

    async def play(self, steps: Sequence[MoveStep]) -> PlaybackOutcome:
        """Play ``steps`` to completion or until cancelled.

        Raises:
            AlreadyPlayingError: If another playback is running.
        """
        if self._playing:
            raise AlreadyPlayingError("Playback already in progress")
        self._playing = True
        self._cancelled.clear()
        self._interrupted.clear()
        self._resumed.set()
        logger.info("Playback started: %d steps", len(steps))
        try:
            outcome = PlaybackOutcome.FINISHED
            for step in steps:
                if not await self._wait_step(step.duration):
                    outcome = PlaybackOutcome.CANCELLED
                    break
                self._position = step.tile
                for listener in list(self._listeners):
                    listener.on_arrived(step.tile)
        finally:
            self._playing = False
            self._interrupted.clear()
            self._resumed.set()
        logger.info("Playback %s at %s", outcome, self._position)
        for listener in list(self._listeners):
            listener.on_finished(outcome)
        return outcome

    def pause(self) -> None:
        if self._playing:
            self._resumed.clear()
            self._interrupted.set()

    def resume(self) -> None:
        self._interrupted.clear()
        self._resumed.set()

    def cancel(self) -> None:
        if not self._playing:
            return
        self._cancelled.set()
        self._interrupted.set()
        # wake a paused loop so it can observe the cancellation
        self._resumed.set()

    async def _wait_step(self, duration: float) -> bool:
        """Sleep for one step; False if cancelled before the step completes.

        The step clock only runs while not paused: a pause stops it and
        ``resume`` restarts it with whatever time was left.
        """
        loop = asyncio.get_running_loop()
        remaining = duration
        while not self._cancelled.is_set():
            if not self._resumed.is_set():
                await self._resumed.wait()
                continue
            if remaining <= 0:
                return True
            started = loop.time()
            try:
                await asyncio.wait_for(self._interrupted.wait(), timeout=remaining)
            except asyncio.TimeoutError:
                pass
            remaining -= loop.time() - started
        return False
