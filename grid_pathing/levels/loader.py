"""Level file selection and loading.

Levels live in a directory as ``<number>.json`` files, each holding a JSON
array of ``"x,y"`` wall strings. Level ``0`` is the default; when
``GridConfig.randomize_level`` is set a level in ``[1, max_levels]`` is drawn
from the supplied RNG (seed it for reproducible picks).
"""

import logging
import random
from pathlib import Path
from typing import List, Optional, Union

from grid_pathing.config import DEFAULT_CONFIG, GridConfig
from grid_pathing.errors import GridErrorKind, OutOfBoundsError
from grid_pathing.levels.convert import parse_level
from grid_pathing.topology import GridTopology, LoadResult

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def choose_level_number(
    config: GridConfig = DEFAULT_CONFIG, rng: Optional[random.Random] = None
) -> int:
    if not config.randomize_level:
        return 0
    rng = rng or random.Random()
    return rng.randint(1, config.max_levels)


def level_path(root: PathLike, number: int) -> Path:
    return Path(root) / f"{number}.json"


def load_level_file(path: PathLike, side: Optional[int] = None) -> List[str]:
    """Read and validate one level file.

    Raises:
        OSError: If the file cannot be read.
        OutOfBoundsError: If the content is not a valid level.
    """
    return parse_level(Path(path).read_text(encoding="utf-8"), side)


def load_level_into(
    topology: GridTopology,
    root: PathLike,
    rng: Optional[random.Random] = None,
    number: Optional[int] = None,
) -> LoadResult:
    """Pick a level (or use ``number``), read it and load it into ``topology``.

    Unreadable files give a ``LEVEL_UNAVAILABLE`` result and invalid content an
    ``OUT_OF_BOUNDS`` result; the topology is unchanged in both cases.
    """
    if number is None:
        number = choose_level_number(topology.config, rng)
    path = level_path(root, number)
    try:
        walls = load_level_file(path, topology.side)
    except OSError as exc:
        logger.warning("Level %d unavailable at %s: %s", number, path, exc)
        return LoadResult(error=GridErrorKind.LEVEL_UNAVAILABLE, message=str(exc))
    except OutOfBoundsError as exc:
        logger.warning("Level %d at %s is invalid: %s", number, path, exc)
        return LoadResult(error=exc.kind, message=str(exc))
    logger.debug("Loading level %d from %s", number, path)
    return topology.load_walls(walls)
