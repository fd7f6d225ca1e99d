import pytest

from termsnake.grid import Coordinate, Grid


@pytest.mark.parametrize("cell", [(1, 5), (10, 5), (5, 1), (5, 10), (1, 1), (10, 10)])
def test_border_cells_are_walls(grid, cell):
    assert grid.is_wall(cell)
    assert not grid.is_interior(cell)


def test_middle_cell_is_interior(grid):
    assert not grid.is_wall((5, 5))
    assert grid.is_interior((5, 5))


def test_interior_covers_inner_rectangle(grid):
    cells = list(grid.interior())
    assert len(cells) == grid.interior_size == 64
    assert cells[0] == (2, 2)
    assert cells[-1] == (9, 9)
    assert all(grid.is_interior(c) for c in cells)


def test_walls_are_listed_once():
    g = Grid(10, 12)
    walls = list(g.walls())
    assert len(walls) == len(set(walls)) == 2 * 12 + 2 * 8
    assert all(g.is_wall(c) for c in walls)


def test_center_rounds_down():
    assert Grid(11, 15).center() == (5, 7)


def test_coordinate_shift_and_tuple_equality():
    c = Coordinate(5, 5)
    assert c.shifted((-1, 0)) == (4, 5)
    assert c == (5, 5)
    assert hash(c) == hash((5, 5))


@pytest.mark.parametrize("rows, cols", [(9, 10), (10, 9), (3, 3)])
def test_small_grid_rejected(rows, cols):
    with pytest.raises(ValueError):
        Grid(rows, cols)
