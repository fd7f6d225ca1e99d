# state.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Set

import numpy as np  # type: ignore

from .config import CFG, Config
from .grid import Coordinate, Grid
from .sampler import make_rng, sample_center, sample_free_position
from .snake import Heading, Snake


class Status(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game over"


class EndReason(Enum):
    WALL = "hit the wall"
    BLOCK = "hit a block"
    SELF = "bit itself"
    QUIT = "quit"
    BOARD_FULL = "filled the board"

    @property
    def is_collision(self) -> bool:
        return self in (EndReason.WALL, EndReason.BLOCK, EndReason.SELF)


# ---------- State ----------
@dataclass
class GameState:
    grid: Grid
    snake: Snake
    food: Coordinate
    rng: np.random.Generator
    blocks: Set[Coordinate] = field(default_factory=set)
    score: int = 0
    danger: bool = False
    max_sample_tries: int = CFG.max_sample_tries
    status: Status = Status.RUNNING
    end_reason: Optional[EndReason] = None
    turns: int = 0

    @property
    def over(self) -> bool:
        return self.status is Status.GAME_OVER

    def end(self, reason: EndReason) -> None:
        """Move to GAME_OVER; the first reason recorded wins."""
        if self.status is Status.GAME_OVER:
            return
        self.status = Status.GAME_OVER
        self.end_reason = reason


def new_game_state(grid: Grid, cfg: Config = CFG) -> GameState:
    rng = make_rng(cfg.seed)
    snake = Snake([sample_center(grid)], heading=Heading.RIGHT)
    food = sample_free_position(grid, snake, (), rng, max_tries=cfg.max_sample_tries)
    return GameState(
        grid=grid,
        snake=snake,
        food=food,
        rng=rng,
        danger=cfg.danger,
        max_sample_tries=cfg.max_sample_tries,
    )
