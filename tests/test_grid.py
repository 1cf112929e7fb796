import pytest
from hypothesis import given
from hypothesis import strategies as st

from snakegrid.grid import Grid
from snakegrid.types import CellType, Dim


def test_dims_might_include_walls():
    grid = Grid(Dim(12, 10))
    assert grid.dim().width == 14
    assert grid.dim().height == 12


def test_debug_lines_show_walls_around_empty_cells():
    grid = Grid(Dim(4, 3))
    assert grid.debug_lines() == [
        "* * * * * * ",
        "* 0 0 0 0 * ",
        "* 0 0 0 0 * ",
        "* 0 0 0 0 * ",
        "* * * * * * ",
    ]


@given(st.integers(min_value=0, max_value=20), st.integers(min_value=0, max_value=20))
def test_border_is_wall_and_inside_is_empty(width, height):
    grid = Grid(Dim(width, height))
    dim = grid.dim()
    assert dim == Dim(width + 2, height + 2)
    for y in range(dim.height):
        for x in range(dim.width):
            on_border = x in (0, dim.width - 1) or y in (0, dim.height - 1)
            expected = CellType.WALL if on_border else CellType.EMPTY
            assert grid.cell(x, y) is expected


@given(st.integers(min_value=0, max_value=20), st.integers(min_value=0, max_value=20))
def test_debug_lines_match_cells(width, height):
    grid = Grid(Dim(width, height))
    lines = grid.debug_lines()
    assert len(lines) == grid.dim().height
    for y, line in enumerate(lines):
        symbols = line.split()
        assert len(symbols) == grid.dim().width
        for x, symbol in enumerate(symbols):
            assert symbol == ("*" if grid.cell(x, y) is CellType.WALL else "0")


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (14, 0), (0, 12), (100, 100)])
def test_cell_outside_grid_raises(x, y):
    grid = Grid(Dim(12, 10))
    with pytest.raises(IndexError):
        grid.cell(x, y)