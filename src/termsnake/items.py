# items.py
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .grid import Coordinate
from .sampler import sample_free_position

if TYPE_CHECKING:
    from .state import GameState

logger = logging.getLogger(__name__)


def spawn_food(state: GameState) -> Coordinate:
    """Move the food to a fresh free cell."""
    state.food = sample_free_position(
        state.grid, state.snake, state.blocks, state.rng,
        max_tries=state.max_sample_tries,
    )
    logger.debug("food at %s", state.food)
    return state.food


def add_block(state: GameState) -> Coordinate:
    """Drop a permanent block (danger mode), never on top of the food."""
    block = sample_free_position(
        state.grid, state.snake, state.blocks, state.rng,
        also_excluded=(state.food,),
        max_tries=state.max_sample_tries,
    )
    state.blocks.add(block)
    logger.debug("block at %s (%d total)", block, len(state.blocks))
    return block
