"""Game mode: wires the core game, the world grid, the camera and the colours together."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Mapping, Optional, Protocol

from .game import Game
from .pawn import Pawn
from .types import Dim, Settings
from .world_grid import GridVisual, Vector
from .world_types import LinearColor, SnakeColors

_MIN_SIZE = 10
_MAX_SIZE = 100


class _RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


@dataclass
class Fog:
    """Height fog whose ambient colour tints the scene."""

    sky_atmosphere_ambient_contribution_color_scale: LinearColor = field(
        default_factory=LinearColor
    )
    render_state_dirty: bool = False

    def mark_render_state_dirty(self) -> None:
        """Flag that the fog must be redrawn."""
        self.render_state_dirty = True


def _check_range(name: str, value: int) -> None:
    if not _MIN_SIZE <= value <= _MAX_SIZE:
        raise ValueError(f"{name} must be between {_MIN_SIZE} and {_MAX_SIZE}, got {value}")


class GameMode:
    """Starts a game and keeps the grid and scene colours in sync with a colour table."""

    def __init__(
        self,
        colors_table: Mapping[str, SnakeColors],
        grid_dims: Dim = Dim(10, 10),
        cell_size: int = 10,
        mesh_size: Vector = (100.0, 100.0, 100.0),
        field_of_view: float = 90.0,
        viewport_size: Optional[tuple[int, int]] = None,
        fog: Optional[Fog] = None,
        rng: Optional[_RandomSource] = None,
    ) -> None:
        _check_range("grid width", grid_dims.width)
        _check_range("grid height", grid_dims.height)
        _check_range("cell size", cell_size)
        self.colors_table = colors_table
        self.grid_dims = grid_dims
        self.cell_size = cell_size
        self.mesh_size = mesh_size
        self.field_of_view = field_of_view
        self.viewport_size = viewport_size
        self.fog = fog
        self.rng: _RandomSource = rng if rng is not None else random.Random()
        self.game: Optional[Game] = None
        self.grid_visual: Optional[GridVisual] = None
        self.pawn: Optional[Pawn] = None
        self.color_table_index = 0

    def start_play(self) -> None:
        """Create the game, place grid and camera, and pick a random colour row."""
        self.game = Game(Settings(self.grid_dims))

        grid_origin: Vector = (0.0, 0.0, 0.0)
        self.grid_visual = GridVisual(self.mesh_size)
        self.grid_visual.set_model(self.game.grid(), self.cell_size)

        self.pawn = Pawn(self.field_of_view)
        self.pawn.update_location(
            self.game.grid().dim(), self.cell_size, grid_origin, self.viewport_size
        )

        row_names = list(self.colors_table)
        if not row_names:
            raise ValueError("colour table has no rows")
        self.color_table_index = self.rng.randint(0, len(row_names) - 1)
        self.update_colors()

    def next_color(self) -> None:
        """Switch to the next row of the colour table, wrapping around."""
        if self.colors_table:
            self.color_table_index = (self.color_table_index + 1) % len(self.colors_table)
            self.update_colors()

    def update_colors(self) -> None:
        """Apply the current colour row to the grid and the fog."""
        if self.grid_visual is None:
            raise RuntimeError("the game has not been started")
        row_name = list(self.colors_table)[self.color_table_index]
        color_set = self.colors_table.get(row_name)
        if color_set is None:
            return
        self.grid_visual.update_colors(color_set)
        if self.fog is not None:
            self.fog.sky_atmosphere_ambient_contribution_color_scale = (
                color_set.sky_atmosphere_color
            )
            self.fog.mark_render_state_dirty()