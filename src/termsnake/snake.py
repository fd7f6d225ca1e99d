# snake.py
from collections import Counter, deque
from enum import Enum
from itertools import islice
from typing import Deque, Iterable, List, NamedTuple, Optional

from . import config
from .grid import Coordinate


class Heading(Enum):
    UP = config.UP
    DOWN = config.DOWN
    LEFT = config.LEFT
    RIGHT = config.RIGHT

    @property
    def delta(self):
        return self.value


class Step(NamedTuple):
    head: Coordinate                # cell to draw
    vacated: Optional[Coordinate]   # cell to erase, None if nothing was freed


class Snake:
    """
    Ordered segments, head at index 0, plus the heading of the next move.

    Growth never invents a segment position: grow() only makes the next
    advance() skip dropping the tail.
    """

    def __init__(self, segments: Iterable[Coordinate], heading: Heading = Heading.RIGHT):
        self.segments: Deque[Coordinate] = deque(Coordinate(*c) for c in segments)
        if not self.segments:
            raise ValueError("a snake needs at least one segment")
        self.heading = heading
        self.grow_pending = False
        self._occupied = Counter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __contains__(self, c) -> bool:
        return self._occupied[c] > 0

    def __iter__(self):
        return iter(self.segments)

    @property
    def head(self) -> Coordinate:
        return self.segments[0]

    @property
    def tail(self) -> Coordinate:
        return self.segments[-1]

    def segments_excluding_head(self) -> List[Coordinate]:
        return list(islice(self.segments, 1, None))

    def set_heading(self, heading: Heading) -> None:
        # No reversal guard: turning back into the neck is caught by the self check
        self.heading = heading

    def grow(self) -> None:
        self.grow_pending = True

    def advance(self) -> Step:
        new_head = self.head.shifted(self.heading.delta)
        self.segments.appendleft(new_head)
        self._occupied[new_head] += 1

        if self.grow_pending:
            self.grow_pending = False
            return Step(new_head, None)

        vacated = self.segments.pop()
        self._occupied[vacated] -= 1
        if self._occupied[vacated]:
            # another segment (usually the new head) still covers that cell
            return Step(new_head, None)
        del self._occupied[vacated]
        return Step(new_head, vacated)

    def hits_itself(self) -> bool:
        if len(self.segments) < 2:
            return False
        return self._occupied[self.head] > 1
