# main.py
from __future__ import annotations

import argparse
import dataclasses
import logging
import signal
import sys
from typing import List, Optional

from .config import CFG, Config
from .errors import TerminalError
from .grid import Grid
from .keys import InputDecoder
from .loop import GameLoop
from .render import AnsiRenderer
from .state import EndReason, GameState, new_game_state
from .terminal import Terminal

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termsnake",
        description="Snake in your terminal. Arrow keys steer, p pauses, q quits.",
    )
    parser.add_argument(
        "-d", "--danger",
        action="store_true",
        help="Danger mode: every food eaten leaves a block behind.",
    )
    parser.add_argument(
        "-t", "--turn-ms",
        type=int,
        default=CFG.turn_ms,
        help="Milliseconds to wait for a key each turn (default: %(default)s).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=CFG.seed,
        help="Seed for food/block placement, for reproducible games.",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Write a debug log here (nothing is logged to the terminal).",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def config_from_args(args: argparse.Namespace) -> Config:
    return dataclasses.replace(CFG, danger=args.danger, turn_ms=args.turn_ms, seed=args.seed)


def setup_logging(log_file: Optional[str], level: str) -> None:
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def summary(state: GameState) -> str:
    if state.end_reason is EndReason.QUIT:
        return f"Bye! Final score: {state.score}"
    reason = state.end_reason.value if state.end_reason else "game over"
    return f"Game over, the snake {reason}. Final score: {state.score}"


def play(terminal: Terminal, cfg: Config) -> GameState:
    rows, cols = terminal.check()
    state = new_game_state(Grid(rows, cols), cfg)
    loop = GameLoop(
        state,
        InputDecoder(terminal, timeout=cfg.turn_seconds),
        AnsiRenderer(state.grid, terminal.stdout),
    )

    def on_interrupt(signum, frame):
        loop.request_quit()

    previous = signal.signal(signal.SIGINT, on_interrupt)
    try:
        with terminal:
            loop.run()
    finally:
        signal.signal(signal.SIGINT, previous)
    return state


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_file, args.log_level)
    try:
        cfg = config_from_args(args)
    except ValueError as e:
        print(f"termsnake: {e}", file=sys.stderr)
        return 2

    try:
        state = play(Terminal(), cfg)
    except TerminalError as e:
        logger.error("cannot start: %s", e)
        print(f"termsnake: {e}", file=sys.stderr)
        return 1

    print(summary(state))
    return 0


if __name__ == "__main__":
    sys.exit(main())
