import pytest

from advent2024.grid import Grid
from advent2024.pos import Pos


@pytest.fixture
def grid():
    return Grid([[1, 2, 3], [4, 5, 6]])


def test_dimensions(grid):
    assert grid.width == 3
    assert grid.height == 2


def test_empty_grid():
    empty = Grid()
    assert (empty.width, empty.height) == (0, 0)
    assert empty.get(Pos(0, 0)) is None


def test_get_inside_and_outside(grid):
    assert grid.get(Pos(1, 1)) == 5
    assert grid.get(Pos(-1, 0)) is None
    assert grid.get(Pos(3, 0)) is None
    assert grid.get(Pos(0, 2)) is None


def test_indexing_by_pos_and_tuple(grid):
    assert grid[Pos(2, 0)] == grid[(2, 0)] == 3
    grid[Pos(0, 1)] = 9
    assert grid[(0, 1)] == 9


def test_indexing_outside_raises(grid):
    with pytest.raises(IndexError):
        grid[Pos(-1, 0)]
    with pytest.raises(IndexError):
        grid[(0, 5)] = 1


def test_cells_cover_grid(grid):
    cells = list(grid.cells())
    assert len(cells) == grid.width * grid.height
    assert all(grid[pos] == value for value, pos in cells)
    assert cells[0][1] == Pos(0, 0)


def test_adjacent_cardinal_in_corner(grid):
    assert list(grid.adjacent_cardinal(Pos(0, 0))) == [(2, Pos(1, 0)), (4, Pos(0, 1))]


def test_adjacent_counts(grid):
    assert all(grid.is_inside(p) for _, p in grid.adjacent(Pos(1, 0)))
    assert len(list(grid.adjacent(Pos(1, 0)))) == len(list(grid.adjacent_cardinal(Pos(1, 0)))) + len(
        list(grid.adjacent_diagonal(Pos(1, 0)))
    )
    assert [p for _, p in grid.adjacent_diagonal(Pos(0, 0))] == [Pos(1, 1)]


def test_swap_twice_is_identity(grid):
    original = Grid(grid.data)
    grid.swap(Pos(0, 0), Pos(2, 1))
    assert grid[Pos(0, 0)] == original[Pos(2, 1)]
    grid.swap(Pos(0, 0), Pos(2, 1))
    assert grid == original


def test_str_and_char_grid(grid):
    assert str(grid) == "123\n456"
    chars = grid.to_char_grid()
    assert str(chars) == str(grid)
    assert chars[Pos(0, 0)] == "1"