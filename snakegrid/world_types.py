"""Colour types used to style the world."""

from __future__ import annotations

from dataclasses import dataclass, field

KINDA_SMALL_NUMBER = 1.0e-4


@dataclass(frozen=True)
class LinearColor:
    """An RGBA colour with floating-point components."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    def equals(self, other: LinearColor, tolerance: float = KINDA_SMALL_NUMBER) -> bool:
        """Return True if every component differs from ``other`` by less than ``tolerance``."""
        return all(
            abs(mine - theirs) < tolerance
            for mine, theirs in zip(
                (self.r, self.g, self.b, self.a), (other.r, other.g, other.b, other.a)
            )
        )


RED = LinearColor(1.0, 0.0, 0.0, 1.0)
GREEN = LinearColor(0.0, 1.0, 0.0, 1.0)
BLUE = LinearColor(0.0, 0.0, 1.0, 1.0)
YELLOW = LinearColor(1.0, 1.0, 0.0, 1.0)


@dataclass
class SnakeColors:
    """One row of the colour table: the colours for grid and sky."""

    grid_background_color: LinearColor = field(default_factory=LinearColor)
    grid_wall_color: LinearColor = field(default_factory=LinearColor)
    grid_line_color: LinearColor = field(default_factory=LinearColor)
    sky_atmosphere_color: LinearColor = field(default_factory=LinearColor)