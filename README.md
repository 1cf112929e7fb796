# snakegrid

The model and scene layout for a grid-based snake game, in plain Python with no
dependencies.

## Modules

- `snakegrid.types` holds the basic game types. `Dim` is a frozen width/height pair and rejects negative values with `ValueError`. `CellType` has the members `EMPTY` and `WALL`. `Settings` carries the `grid_dims` that a game is created with.
- `snakegrid.grid` provides `Grid`, which builds the playing field with a one-cell wall border around the requested size:
  - `dim()` returns the size including the walls, which is width + 2 by height + 2.
  - `cell(x, y)` returns the `CellType` at a position. It raises `IndexError` if the position is outside the grid.
  - `debug_lines()` renders each row as text. The rows are also written to the `snakegrid.grid` logger at debug level when the grid is built.
- `snakegrid.game` provides `Game`, which keeps its `settings` and builds the `Grid` they describe. `grid()` returns that grid.
- `snakegrid.world_types` holds the colour types:
  - `LinearColor` is an RGBA colour. `equals(other, tolerance)` compares it with another colour component by component; the default tolerance is `1e-4`.
  - `RED`, `GREEN`, `BLUE` and `YELLOW` are ready-made colours.
  - `SnakeColors` is one colour theme. It holds the grid background, wall and line colours and the sky-atmosphere colour.
- `snakegrid.world_grid` provides `GridVisual`, which lays out a grid mesh. You give it the mesh's bounding-box size.
  - `set_model(grid, cell_size)` works out `relative_scale`, `relative_location`, `world_width` and `world_height`. It also sets the `"Division"` material parameter. It raises `ValueError` if the grid is `None`, and also if the mesh has a zero x or y size.
  - `update_colors(color_set)` sets the `"BackgroundColor"`, `"LineColor"` and `"WallColor"` parameters.
  - `vector_parameter(name)` reads a parameter back. It raises `KeyError` if that parameter is not set.
  - `grid_lines()` returns the `(start, end)` segments that outline every cell.
- `snakegrid.pawn` provides `Pawn`, a top-down camera:
  - `update_location(dim, cell_size, grid_origin, viewport_size)` stores the grid placement and then fits the camera.
  - `on_viewport_resized(viewport_size)` raises the camera's `location` until the grid, plus a margin of two cells, fits the viewport. If the viewport size is `None`, or its height is zero, the location is left unchanged.
  - The helper `fov_tan` does the angle maths, as does `vertical_fov`.
- `snakegrid.game_mode` provides `GameMode`, which ties the parts together:
  - It checks that the grid width, grid height and cell size are each between 10 and 100. If any is not, it raises `ValueError`.
  - `start_play()` builds the `Game`, the `GridVisual` and the `Pawn`. It then picks a random theme from the colour table. It raises `ValueError` if the table is empty.
  - `next_color()` moves on to the next theme, wrapping around at the end.
  - `update_colors()` applies the current theme to the grid visual and to an optional `Fog`. It raises `RuntimeError` if the game has not been started.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from snakegrid.types import Dim, Settings
from snakegrid.game import Game

game = Game(Settings(Dim(12, 10)))
grid = game.grid()
print(grid.dim())          # Dim(width=14, height=12): walls included
for line in grid.debug_lines():
    print(line)
```

`debug_lines()` marks walls with `*` and empty cells with `0`:

```
* * * * * * * * * * * * * *
* 0 0 0 0 0 0 0 0 0 0 0 0 *
...
```

A full scene set-up:

```python
import random

from snakegrid.game_mode import Fog, GameMode
from snakegrid.types import Dim
from snakegrid.world_types import BLUE, GREEN, RED, YELLOW, SnakeColors

themes = {
    "warm": SnakeColors(RED, YELLOW, YELLOW, RED),
    "cool": SnakeColors(BLUE, GREEN, GREEN, BLUE),
}
fog = Fog()
mode = GameMode(
    themes,
    grid_dims=Dim(12, 10),
    cell_size=20,
    viewport_size=(1920, 1080),
    fog=fog,
    rng=random.Random(0),
)
mode.start_play()
print(mode.pawn.location)                              # camera position
print(mode.grid_visual.vector_parameter("Division"))   # (12.0, 14.0, 0.0)
mode.next_color()
print(fog.sky_atmosphere_ambient_contribution_color_scale)
```

## What it does not do

This package computes the layout and the state of a scene. It does not do the following:

- open a window or draw anything;
- read keyboard input or run a game loop;
- have a snake, food or scoring. A cell is either `EMPTY` or `WALL`.

The mesh, material and fog are plain Python objects whose values you read back and pass to a renderer of your own.