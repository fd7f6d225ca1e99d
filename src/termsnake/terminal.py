# terminal.py
from __future__ import annotations

import logging
import os
import select
import shutil
import sys
import termios
import tty
from typing import Optional, TextIO, Tuple

from .config import MIN_ROWS, MIN_COLS
from .errors import NotATerminalError, TerminalTooSmallError
from .render import ALT_SCREEN_OFF, ALT_SCREEN_ON, CLEAR_SCREEN, HIDE_CURSOR, RESET, SHOW_CURSOR

logger = logging.getLogger(__name__)


class Terminal:
    """
    The real terminal: reports its size, reads keys with a timeout and,
    as a context manager, switches into cbreak mode on the alternate screen
    and restores everything on the way out.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._saved_attrs = None

    # ---------- Size / preconditions ----------
    def size(self) -> Tuple[int, int]:
        cols, rows = shutil.get_terminal_size()
        return rows, cols

    def check(self, min_rows: int = MIN_ROWS, min_cols: int = MIN_COLS) -> Tuple[int, int]:
        """Return (rows, cols) or raise if this terminal cannot host a game."""
        if not (self.stdin.isatty() and self.stdout.isatty()):
            raise NotATerminalError("stdin and stdout must be a terminal")
        rows, cols = self.size()
        if rows < min_rows or cols < min_cols:
            raise TerminalTooSmallError(rows, cols, min_rows, min_cols)
        return rows, cols

    # ---------- Byte source ----------
    def read(self, n: int, timeout: float) -> bytes:
        fd = self.stdin.fileno()
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return b""
        return os.read(fd, n)

    # ---------- Lifecycle ----------
    def __enter__(self) -> "Terminal":
        fd = self.stdin.fileno()
        self._saved_attrs = termios.tcgetattr(fd)
        # cbreak keeps ISIG, so Ctrl-C still arrives as SIGINT
        tty.setcbreak(fd)
        self.stdout.write(ALT_SCREEN_ON + HIDE_CURSOR + CLEAR_SCREEN)
        self.stdout.flush()
        logger.debug("terminal in cbreak mode")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._saved_attrs is not None:
            termios.tcsetattr(self.stdin.fileno(), termios.TCSADRAIN, self._saved_attrs)
            self._saved_attrs = None
        self.stdout.write(RESET + SHOW_CURSOR + ALT_SCREEN_OFF)
        self.stdout.flush()
        logger.debug("terminal restored")
