# loop.py
from __future__ import annotations

import logging

from .engine import TurnReport, play_turn
from .keys import Command, InputDecoder
from .render import Sprite
from .state import EndReason, GameState, Status

logger = logging.getLogger(__name__)


class GameLoop:
    """
    One iteration per turn: move (unless paused), draw what changed, then
    wait for at most one key. There is no separate clock; the key read's
    timeout paces the game, so buffered keystrokes speed the snake up.
    """

    def __init__(self, state: GameState, decoder: InputDecoder, renderer):
        self.state = state
        self.decoder = decoder
        self.renderer = renderer
        self._quit_requested = False

    def request_quit(self) -> None:
        """Ask the loop to stop at the next check; safe to call from a signal handler."""
        self._quit_requested = True

    # ---------- Input ----------
    def apply(self, command: Command) -> None:
        state = self.state
        if command is Command.NONE:
            return
        if command is Command.QUIT:
            self._quit()
        elif command is Command.PAUSE:
            self._toggle_pause()
        elif command.heading is not None:
            state.snake.set_heading(command.heading)
        else:
            raise ValueError(f"unhandled command {command!r}")

    def _quit(self) -> None:
        logger.info("quit, score=%d", self.state.score)
        self.state.end(EndReason.QUIT)

    def _toggle_pause(self) -> None:
        state = self.state
        state.status = Status.RUNNING if state.status is Status.PAUSED else Status.PAUSED
        logger.debug("status -> %s", state.status.value)
        self.renderer.draw_score(state.score, paused=state.status is Status.PAUSED)

    # ---------- Drawing ----------
    def _draw_turn(self, report: TurnReport) -> None:
        snake = self.state.snake
        if report.vacated is not None:
            self.renderer.clear_cell(report.vacated)
        if len(snake) > 1:
            self.renderer.draw_cell(snake.segments[1], Sprite.BODY)
        self.renderer.draw_cell(report.head, Sprite.HEAD)
        if report.ate:
            if report.food is not None:
                self.renderer.draw_cell(report.food, Sprite.FOOD)
            if report.block is not None:
                self.renderer.draw_cell(report.block, Sprite.BLOCK)
            self.renderer.draw_score(self.state.score)

    # ---------- Loop ----------
    def tick(self) -> bool:
        """Play one turn. Returns False once the game is over."""
        state = self.state
        if self._quit_requested:
            self._quit()
            return False

        if state.status is Status.RUNNING:
            report = play_turn(state)
            self._draw_turn(report)
            if state.over:
                if state.end_reason.is_collision:
                    self.renderer.flash_alert(state.score, state.snake.head)
                return False

        self.apply(self.decoder.next_command())
        if self._quit_requested:
            self._quit()
        return not state.over

    def run(self) -> GameState:
        logger.info(
            "game start: %dx%d grid, danger=%s",
            self.state.grid.rows, self.state.grid.cols, self.state.danger,
        )
        self.renderer.draw_board(self.state)
        while self.tick():
            pass
        return self.state
