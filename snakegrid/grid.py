"""The game grid: a rectangle of cells bordered by walls."""

from __future__ import annotations

import logging

from .types import CellType, Dim

logger = logging.getLogger(__name__)

_SYMBOLS = {CellType.EMPTY: "0", CellType.WALL: "*"}


class Grid:
    """A grid of cells with a one-cell wall around the playable area."""

    def __init__(self, dim: Dim) -> None:
        self._dim = Dim(dim.width + 2, dim.height + 2)
        self._cells = [
            [
                CellType.WALL if self._is_border(x, y) else CellType.EMPTY
                for x in range(self._dim.width)
            ]
            for y in range(self._dim.height)
        ]
        for line in self.debug_lines():
            logger.debug("%s", line)

    def _is_border(self, x: int, y: int) -> bool:
        return x in (0, self._dim.width - 1) or y in (0, self._dim.height - 1)

    def dim(self) -> Dim:
        """Return the grid dimensions including walls (width + 2, height + 2)."""
        return self._dim

    def cell(self, x: int, y: int) -> CellType:
        """Return the type of the cell at column ``x`` and row ``y``."""
        if not (0 <= x < self._dim.width and 0 <= y < self._dim.height):
            raise IndexError(
                f"cell ({x}, {y}) is outside a {self._dim.width}x{self._dim.height} grid"
            )
        return self._cells[y][x]

    def debug_lines(self) -> list[str]:
        """Return one text line per row: '*' for walls, '0' for empty cells."""
        return ["".join(f"{_SYMBOLS[cell]} " for cell in row) for row in self._cells]