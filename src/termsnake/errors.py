class SnakeError(Exception):
    """Base class for termsnake errors."""


class BoardFullError(SnakeError):
    """No free interior cell is left to place food or a block on."""


class TerminalError(SnakeError):
    """The terminal cannot host a game."""


class NotATerminalError(TerminalError):
    pass


class TerminalTooSmallError(TerminalError):
    def __init__(self, rows: int, cols: int, min_rows: int, min_cols: int):
        super().__init__(
            f"terminal is {rows}x{cols}, need at least {min_rows}x{min_cols} (rows x columns)"
        )
        self.rows = rows
        self.cols = cols
