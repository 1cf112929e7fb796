"""The core game, owning the grid model."""

from __future__ import annotations

from .grid import Grid
from .types import Settings


class Game:
    """Core game state created from settings."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._grid = Grid(settings.grid_dims)

    def grid(self) -> Grid:
        """Return the grid object."""
        return self._grid