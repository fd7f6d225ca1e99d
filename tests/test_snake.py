import pytest

from termsnake.grid import Coordinate
from termsnake.snake import Heading, Snake


@pytest.mark.parametrize(
    "heading, neck, expected",
    [
        (Heading.UP, (6, 5), (4, 5)),
        (Heading.DOWN, (4, 5), (6, 5)),
        (Heading.LEFT, (5, 6), (5, 4)),
        (Heading.RIGHT, (5, 4), (5, 6)),
    ],
)
def test_advance_moves_head_one_cell_and_keeps_length(heading, neck, expected):
    snake = Snake([(5, 5), neck], heading=heading)
    before = len(snake)
    step = snake.advance()
    assert step.head == expected
    assert snake.head == expected
    assert len(snake) == before


def test_advance_reports_vacated_tail():
    snake = Snake([(5, 5), (5, 4), (5, 3)])
    step = snake.advance()
    assert step.vacated == (5, 3)
    assert list(snake) == [(5, 6), (5, 5), (5, 4)]
    assert (5, 3) not in snake


def test_grow_skips_one_tail_removal():
    snake = Snake([(5, 5), (5, 4)])
    snake.grow()
    step = snake.advance()
    assert step.vacated is None
    assert len(snake) == 3
    assert snake.tail == (5, 4)

    step = snake.advance()
    assert len(snake) == 3
    assert step.vacated == (5, 4)


def test_set_heading_allows_reversal():
    snake = Snake([(5, 5), (5, 4)], heading=Heading.RIGHT)
    snake.set_heading(Heading.LEFT)
    assert snake.heading is Heading.LEFT


def test_reversal_into_neck_is_a_self_hit():
    snake = Snake([(5, 5), (5, 6), (5, 7)], heading=Heading.LEFT)
    snake.set_heading(Heading.RIGHT)
    step = snake.advance()
    assert step.head == (5, 6)
    assert snake.hits_itself()


def test_single_segment_never_hits_itself():
    for heading in Heading:
        snake = Snake([(5, 5)], heading=heading)
        snake.advance()
        assert not snake.hits_itself()


def test_moving_into_old_tail_cell_is_safe():
    # square loop: head steps onto the cell the tail just left
    snake = Snake([(5, 5), (6, 5), (6, 6), (5, 6)], heading=Heading.RIGHT)
    step = snake.advance()
    assert step.head == (5, 6)
    assert step.vacated is None
    assert not snake.hits_itself()
    assert len(snake) == 4


def test_segments_excluding_head():
    snake = Snake([Coordinate(5, 5), Coordinate(5, 4)])
    assert snake.segments_excluding_head() == [(5, 4)]
    assert Snake([(5, 5)]).segments_excluding_head() == []


def test_empty_snake_rejected():
    with pytest.raises(ValueError):
        Snake([])
