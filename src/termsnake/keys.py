# keys.py
from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Protocol

from .config import (
    CFG, ESC, KEY_QUIT, KEY_PAUSE,
    ARROW_UP, ARROW_DOWN, ARROW_LEFT, ARROW_RIGHT,
)
from .snake import Heading


class Command(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"
    PAUSE = "pause"
    NONE = "none"

    @property
    def heading(self) -> Optional[Heading]:
        return _HEADINGS.get(self)


_HEADINGS: Dict[Command, Heading] = {
    Command.UP: Heading.UP,
    Command.DOWN: Heading.DOWN,
    Command.LEFT: Heading.LEFT,
    Command.RIGHT: Heading.RIGHT,
}

KEYS: Dict[bytes, Command] = {
    KEY_QUIT: Command.QUIT,
    KEY_PAUSE: Command.PAUSE,
}

ARROWS: Dict[bytes, Command] = {
    ARROW_UP: Command.UP,
    ARROW_DOWN: Command.DOWN,
    ARROW_RIGHT: Command.RIGHT,
    ARROW_LEFT: Command.LEFT,
}


class ByteSource(Protocol):
    def read(self, n: int, timeout: float) -> bytes:
        """Return up to n bytes, or b"" if nothing arrived within timeout seconds."""
        ...


class InputDecoder:
    """
    Turns raw key bytes into Commands, one command per call.

    A lone key is looked up directly; after ESC the next two bytes are read
    in one go and only the last one matters, so ESC [ A decodes to UP.
    The read timeout is also the game's tick: with keys already buffered
    the call returns at once.
    """

    def __init__(self, source: ByteSource, timeout: float = CFG.turn_seconds):
        self.source = source
        self.timeout = timeout

    def next_command(self) -> Command:
        key = self.source.read(1, self.timeout)
        if not key:
            return Command.NONE
        key = key[:1]
        if key == ESC:
            return self._escape_sequence()
        return KEYS.get(key, Command.NONE)

    def _escape_sequence(self) -> Command:
        rest = self.source.read(2, self.timeout)
        if not rest:
            return Command.NONE
        return ARROWS.get(rest[-1:], Command.NONE)
