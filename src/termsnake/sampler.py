# sampler.py
from __future__ import annotations

import logging
from typing import Collection, Iterable, Optional

import numpy as np  # type: ignore

from .config import CFG, GROWTH_PLACEHOLDER
from .errors import BoardFullError
from .grid import Coordinate, Grid

logger = logging.getLogger(__name__)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Seeded generator so a game can be replayed with --seed."""
    return np.random.default_rng(seed)


def sample_center(grid: Grid) -> Coordinate:
    return grid.center()


def sample_free_position(
    grid: Grid,
    snake: Collection[Coordinate],
    blocks: Collection[Coordinate],
    rng: np.random.Generator,
    also_excluded: Iterable[Coordinate] = (),
    max_tries: int = CFG.max_sample_tries,
) -> Coordinate:
    """
    Rejection-sample a uniformly random interior cell that is not on the
    snake, not a block, not in `also_excluded` and not the growth placeholder.

    After `max_tries` rejections the free cells are enumerated and one is
    picked uniformly, so the call always terminates. Raises BoardFullError
    when no free cell exists.
    """
    extra = set(also_excluded)

    def taken(c: Coordinate) -> bool:
        return c == GROWTH_PLACEHOLDER or c in snake or c in blocks or c in extra

    for _ in range(max_tries):
        c = Coordinate(
            int(rng.integers(2, grid.rows)),   # high is exclusive -> rows-1
            int(rng.integers(2, grid.cols)),
        )
        if not taken(c):
            return c

    free = [c for c in grid.interior() if not taken(c)]
    logger.debug("sampler gave up after %d tries, %d free cells left", max_tries, len(free))
    if not free:
        raise BoardFullError(f"no free cell left on a {grid.rows}x{grid.cols} board")
    return free[int(rng.integers(len(free)))]
