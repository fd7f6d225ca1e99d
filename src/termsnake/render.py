# render.py
from __future__ import annotations

import sys
from enum import Enum
from typing import TYPE_CHECKING, Optional, TextIO, Tuple

from .config import (
    WALL_GLYPH, HEAD_GLYPH, BODY_GLYPH, FOOD_GLYPH, BLOCK_GLYPH,
    GREEN, BRIGHT_GREEN, RED, BRIGHT_RED, YELLOW, BLUE, TEXT,
)
from .grid import Coordinate, Grid

if TYPE_CHECKING:
    from .state import GameState

CSI = "\x1b["
RESET = CSI + "0m"
CLEAR_SCREEN = CSI + "2J"
HIDE_CURSOR = CSI + "?25l"
SHOW_CURSOR = CSI + "?25h"
ALT_SCREEN_ON = CSI + "?1049h"
ALT_SCREEN_OFF = CSI + "?1049l"


class Sprite(Enum):
    WALL = (WALL_GLYPH, BLUE)
    HEAD = (HEAD_GLYPH, BRIGHT_GREEN)
    BODY = (BODY_GLYPH, GREEN)
    FOOD = (FOOD_GLYPH, YELLOW)
    BLOCK = (BLOCK_GLYPH, RED)
    ALERT_WALL = (WALL_GLYPH, BRIGHT_RED)
    ALERT_HEAD = (HEAD_GLYPH, BRIGHT_RED)

    @property
    def glyph(self) -> str:
        return self.value[0]

    @property
    def color(self) -> str:
        return self.value[1]


def move_to(c: Tuple[int, int]) -> str:
    # terminal cursor addressing is 1-indexed, same as Coordinate
    return f"{CSI}{c[0]};{c[1]}H"


def paint(text: str, color: str) -> str:
    return f"{CSI}{color}m{text}{RESET}"


class AnsiRenderer:
    """
    Draws single cells with cursor addressing. Each public call writes its
    escape sequences and flushes, so a turn only touches the cells that
    changed instead of repainting the board.
    """

    def __init__(self, grid: Grid, out: Optional[TextIO] = None):
        self.grid = grid
        self.out = out if out is not None else sys.stdout

    def _flush(self, chunks) -> None:
        self.out.write("".join(chunks))
        self.out.flush()

    def _cell(self, c: Coordinate, sprite: Sprite) -> str:
        return move_to(c) + paint(sprite.glyph, sprite.color)

    def _walls(self, sprite: Sprite):
        return [self._cell(c, sprite) for c in self.grid.walls()]

    def _score_line(self, score: int, paused: bool) -> str:
        # fits between the two top corners; shorter forms keep the number visible
        width = self.grid.cols - 2
        forms = [f" Score: {score} ", f"Score: {score}", f"S:{score}", str(score)]
        if paused:
            forms.insert(0, f" Score: {score} PAUSED ")
        text = next((f for f in forms if len(f) <= width), str(score)[-width:])
        return move_to((1, 2)) + paint(text, TEXT)

    # ---------- Public API ----------
    def draw_cell(self, c: Coordinate, sprite: Sprite) -> None:
        self._flush([self._cell(c, sprite)])

    def clear_cell(self, c: Coordinate) -> None:
        self._flush([move_to(c), " "])

    def draw_score(self, score: int, paused: bool = False) -> None:
        # repaint the top wall first so a shorter line leaves no leftovers
        top = [self._cell(Coordinate(1, col), Sprite.WALL) for col in range(2, self.grid.cols)]
        self._flush(top + [self._score_line(score, paused)])

    def draw_board(self, state: GameState) -> None:
        chunks = [RESET, CLEAR_SCREEN]
        chunks += self._walls(Sprite.WALL)
        chunks += [self._cell(b, Sprite.BLOCK) for b in state.blocks]
        chunks.append(self._cell(state.food, Sprite.FOOD))
        chunks += [self._cell(c, Sprite.BODY) for c in state.snake.segments_excluding_head()]
        chunks.append(self._cell(state.snake.head, Sprite.HEAD))
        chunks.append(self._score_line(state.score, paused=False))
        self._flush(chunks)

    def flash_alert(self, score: int, head: Coordinate) -> None:
        """Repaint walls and the fatal head in the alert colour."""
        chunks = self._walls(Sprite.ALERT_WALL)
        chunks.append(self._cell(head, Sprite.ALERT_HEAD))
        chunks.append(self._score_line(score, paused=False))
        self._flush(chunks)
