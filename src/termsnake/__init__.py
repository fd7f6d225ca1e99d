"""Snake for the terminal: ANSI cursor drawing, one key read per turn."""

import logging

from .config import CFG, Config
from .errors import BoardFullError, SnakeError, TerminalError
from .grid import Coordinate, Grid
from .keys import Command, InputDecoder
from .loop import GameLoop
from .snake import Heading, Snake
from .state import EndReason, GameState, Status, new_game_state

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CFG",
    "Config",
    "BoardFullError",
    "SnakeError",
    "TerminalError",
    "Coordinate",
    "Grid",
    "Command",
    "InputDecoder",
    "GameLoop",
    "Heading",
    "Snake",
    "EndReason",
    "GameState",
    "Status",
    "new_game_state",
]
