import pytest

from snakegrid.grid import Grid
from snakegrid.types import Dim
from snakegrid.world_grid import GridVisual
from snakegrid.world_types import BLUE, GREEN, RED, YELLOW, SnakeColors

MESH_SIZE = (100.0, 100.0, 100.0)


@pytest.fixture
def setup():
    dims = Dim(10, 10)
    cell_size = 20
    model = Grid(dims)
    visual = GridVisual(MESH_SIZE)
    visual.set_model(model, cell_size)
    return visual, model, cell_size


def test_static_grid_might_have_correct_transform(setup):
    visual, model, cell_size = setup
    size_x, size_y, size_z = MESH_SIZE
    world_width = model.dim().width * cell_size
    world_height = model.dim().height * cell_size
    assert tuple(visual.relative_location) == pytest.approx(
        (0.5 * world_width, 0.5 * world_height, 0.5 * -size_z), abs=1e-4
    )
    assert tuple(visual.relative_scale) == pytest.approx(
        (world_height / size_x, world_width / size_y, 1.0), abs=1e-4
    )


def test_colors_might_be_setup_correctly(setup):
    visual, _, _ = setup
    colors = SnakeColors(
        grid_background_color=RED,
        grid_line_color=YELLOW,
        grid_wall_color=BLUE,
        sky_atmosphere_color=GREEN,
    )
    visual.update_colors(colors)
    assert visual.vector_parameter("BackgroundColor").equals(colors.grid_background_color)
    assert visual.vector_parameter("WallColor").equals(colors.grid_wall_color)
    assert visual.vector_parameter("LineColor").equals(colors.grid_line_color)


def test_division_matches_grid_dims():
    model = Grid(Dim(12, 10))
    visual = GridVisual(MESH_SIZE)
    visual.set_model(model, 10)
    assert visual.vector_parameter("Division") == (
        model.dim().height,
        model.dim().width,
        0.0,
    )


def test_non_square_transform_uses_height_along_x():
    model = Grid(Dim(12, 10))
    visual = GridVisual((50.0, 25.0, 10.0))
    visual.set_model(model, 10)
    assert visual.world_width == model.dim().width * 10
    assert visual.world_height == model.dim().height * 10
    assert tuple(visual.relative_scale) == pytest.approx(
        (visual.world_height / 50.0, visual.world_width / 25.0, 1.0), abs=1e-4
    )
    assert tuple(visual.relative_location) == pytest.approx(
        (visual.world_height / 2, visual.world_width / 2, -10.0 / 2), abs=1e-4
    )


def test_missing_grid_aborts():
    with pytest.raises(ValueError):
        GridVisual(MESH_SIZE).set_model(None, 10)


@pytest.mark.parametrize("size", [(0.0, 10.0, 10.0), (10.0, 0.0, 10.0)])
def test_degenerate_mesh_rejected(size):
    with pytest.raises(ValueError):
        GridVisual(size).set_model(Grid(Dim(10, 10)), 10)


def test_colors_before_model_are_ignored():
    visual = GridVisual(MESH_SIZE)
    visual.update_colors(SnakeColors(grid_background_color=RED))
    with pytest.raises(KeyError):
        visual.vector_parameter("BackgroundColor")


def test_unknown_parameter_raises(setup):
    visual, _, _ = setup
    with pytest.raises(KeyError):
        visual.vector_parameter("NoSuchParameter")


def test_grid_lines_cover_every_row_and_column():
    model = Grid(Dim(12, 10))
    visual = GridVisual(MESH_SIZE)
    visual.set_model(model, 20)
    lines = visual.grid_lines()
    dim = model.dim()
    assert len(lines) == (dim.height + 1) + (dim.width + 1)
    row_lines = lines[: dim.height + 1]
    col_lines = lines[dim.height + 1 :]
    assert all(end[1] - start[1] == visual.world_width for start, end in row_lines)
    assert all(end[0] - start[0] == visual.world_height for start, end in col_lines)
    assert row_lines[-1][0][0] == visual.world_height
    assert col_lines[-1][0][1] == visual.world_width


def test_grid_lines_empty_without_model():
    assert GridVisual(MESH_SIZE).grid_lines() == []