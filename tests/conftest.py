from collections import deque

import pytest

from termsnake.grid import Coordinate, Grid
from termsnake.sampler import make_rng
from termsnake.snake import Heading, Snake
from termsnake.state import GameState


class ScriptedSource:
    """Byte source that hands out pre-recorded chunks; b"" stands for a timeout."""

    def __init__(self, chunks=()):
        self.chunks = deque(chunks)
        self.reads = []

    def read(self, n, timeout):
        self.reads.append((n, timeout))
        if not self.chunks:
            return b""
        chunk = self.chunks.popleft()
        if len(chunk) > n:
            self.chunks.appendleft(chunk[n:])
            chunk = chunk[:n]
        return chunk


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def draw_board(self, state):
        self.calls.append(("board",))

    def draw_cell(self, c, sprite):
        self.calls.append(("cell", c, sprite))

    def clear_cell(self, c):
        self.calls.append(("clear", c))

    def draw_score(self, score, paused=False):
        self.calls.append(("score", score, paused))

    def flash_alert(self, score, head):
        self.calls.append(("alert", score, head))

    def named(self, name):
        return [c for c in self.calls if c[0] == name]


@pytest.fixture
def grid():
    return Grid(10, 10)


@pytest.fixture
def renderer():
    return RecordingRenderer()


def make_state(grid, segments, heading=Heading.RIGHT, food=(8, 8), **kwargs):
    return GameState(
        grid=grid,
        snake=Snake([Coordinate(*c) for c in segments], heading=heading),
        food=Coordinate(*food),
        rng=make_rng(0),
        **kwargs,
    )
