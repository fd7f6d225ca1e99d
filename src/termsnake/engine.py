# engine.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .errors import BoardFullError
from .grid import Coordinate
from .items import add_block, spawn_food
from .state import EndReason, GameState

logger = logging.getLogger(__name__)


@dataclass
class TurnReport:
    """What changed on the board during one turn, for the renderer."""
    head: Coordinate
    vacated: Optional[Coordinate] = None
    ate: bool = False
    food: Optional[Coordinate] = None    # new food cell when ate
    block: Optional[Coordinate] = None   # new block cell (danger mode)


def find_collision(state: GameState) -> Optional[EndReason]:
    """Wall, then block, then self. Returns None when the head is safe."""
    head = state.snake.head
    if state.grid.is_wall(head):
        return EndReason.WALL
    if head in state.blocks:
        return EndReason.BLOCK
    if state.snake.hits_itself():
        return EndReason.SELF
    return None


def eat_food(state: GameState, report: TurnReport) -> None:
    state.score += 1
    report.ate = True
    try:
        report.food = spawn_food(state)
        if state.danger:
            report.block = add_block(state)
    except BoardFullError:
        logger.info("no room left after eating, score=%d", state.score)
        state.end(EndReason.BOARD_FULL)
        return
    finally:
        state.snake.grow()
    logger.info("ate food, score=%d", state.score)


def resolve_move(state: GameState, report: TurnReport) -> TurnReport:
    """
    Run the post-move checks in order: wall, block, self, food.
    A collision ends the game and skips the food check.
    """
    reason = find_collision(state)
    if reason is not None:
        logger.info("game over: %s at %s, score=%d", reason.value, report.head, state.score)
        state.end(reason)
        return report
    if report.head == state.food:
        eat_food(state, report)
    return report


def play_turn(state: GameState) -> TurnReport:
    """Advance the snake one cell and resolve what it ran into."""
    step = state.snake.advance()
    state.turns += 1
    return resolve_move(state, TurnReport(head=step.head, vacated=step.vacated))
