# grid.py
from dataclasses import dataclass
from typing import Iterator, NamedTuple, Tuple

from .config import MIN_ROWS, MIN_COLS


class Coordinate(NamedTuple):
    """1-indexed (row, col) cell; row 1 / col 1 is the top-left wall corner."""
    row: int
    col: int

    def shifted(self, delta: Tuple[int, int]) -> "Coordinate":
        return Coordinate(self.row + delta[0], self.col + delta[1])


@dataclass(frozen=True)
class Grid:
    """
    Rectangular board of `rows` x `cols` cells, including a 1-cell wall border.
    Interior cells are rows 2..rows-1 and columns 2..cols-1.
    """
    rows: int
    cols: int

    def __post_init__(self):
        if self.rows < MIN_ROWS or self.cols < MIN_COLS:
            raise ValueError(
                f"grid must be at least {MIN_ROWS}x{MIN_COLS}, got {self.rows}x{self.cols}"
            )

    def is_wall(self, c: Tuple[int, int]) -> bool:
        return c[0] in (1, self.rows) or c[1] in (1, self.cols)

    def is_interior(self, c: Tuple[int, int]) -> bool:
        return 2 <= c[0] <= self.rows - 1 and 2 <= c[1] <= self.cols - 1

    def interior(self) -> Iterator[Coordinate]:
        for row in range(2, self.rows):
            for col in range(2, self.cols):
                yield Coordinate(row, col)

    def walls(self) -> Iterator[Coordinate]:
        for col in range(1, self.cols + 1):
            yield Coordinate(1, col)
            yield Coordinate(self.rows, col)
        for row in range(2, self.rows):
            yield Coordinate(row, 1)
            yield Coordinate(row, self.cols)

    def center(self) -> Coordinate:
        return Coordinate(self.rows // 2, self.cols // 2)

    @property
    def interior_size(self) -> int:
        return (self.rows - 2) * (self.cols - 2)
