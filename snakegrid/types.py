"""Core value types shared by the game model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Dim:
    """Width and height of a grid, in cells."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"dimensions must be non-negative, got {self.width}x{self.height}"
            )


class CellType(Enum):
    """What occupies a single grid cell."""

    EMPTY = 0
    WALL = 1


@dataclass(frozen=True)
class Settings:
    """Settings the core game is created with."""

    grid_dims: Dim