from dataclasses import dataclass
from typing import Optional

# ----- Grid -----
MIN_ROWS, MIN_COLS = 10, 10
# Never handed out for food or blocks
GROWTH_PLACEHOLDER = (2, 2)

# ----- Directions (drow, dcol) -----
UP, DOWN, LEFT, RIGHT = (-1, 0), (1, 0), (0, -1), (0, 1)

# ----- Keys -----
ESC = b"\x1b"
KEY_QUIT = b"q"
KEY_PAUSE = b"p"
ARROW_UP, ARROW_DOWN, ARROW_RIGHT, ARROW_LEFT = b"A", b"B", b"C", b"D"

# ----- Glyphs -----
WALL_GLYPH = "#"
HEAD_GLYPH = "@"
BODY_GLYPH = "o"
FOOD_GLYPH = "*"
BLOCK_GLYPH = "X"

# ----- Colors (SGR codes) -----
GREEN = "32"
BRIGHT_GREEN = "1;32"
RED = "31"
BRIGHT_RED = "1;31"
YELLOW = "33"
BLUE = "34"
TEXT = "37"


# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    turn_ms: int = 100              # bounded wait per key read, doubles as the tick
    danger: bool = False            # drop a block every time food is eaten
    max_sample_tries: int = 1000    # rejections before enumerating free cells

    @property
    def turn_seconds(self) -> float:
        return self.turn_ms / 1000.0

    def __post_init__(self):
        if self.turn_ms <= 0:
            raise ValueError(f"turn_ms must be positive, got {self.turn_ms}")
        if self.max_sample_tries < 1:
            raise ValueError(f"max_sample_tries must be >= 1, got {self.max_sample_tries}")
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must be non-negative, got {self.seed}")


CFG = Config()
