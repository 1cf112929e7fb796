"""The camera pawn that frames the grid in the viewport."""

from __future__ import annotations

import math
from typing import Optional

from .types import Dim

Vector = tuple[float, float, float]

GRID_MARGIN = 2.0


def fov_tan(fov_degrees: float) -> float:
    """Return the tangent of half of a field of view given in degrees."""
    return math.tan(math.radians(fov_degrees * 0.5))


def vertical_fov(hor_fov_degrees: float, viewport_aspect_hw: float) -> float:
    """Return the vertical field of view for a horizontal one and a height/width aspect."""
    return math.degrees(
        2.0 * math.atan(math.tan(math.radians(hor_fov_degrees) * 0.5) * viewport_aspect_hw)
    )


class Pawn:
    """A top-down camera positioned so that the whole grid fits the viewport."""

    def __init__(self, field_of_view: float = 90.0) -> None:
        self.field_of_view = field_of_view
        self.location: Vector = (0.0, 0.0, 0.0)
        self.dim: Optional[Dim] = None
        self.cell_size = 0
        self.grid_origin: Vector = (0.0, 0.0, 0.0)

    def update_location(
        self,
        dim: Dim,
        cell_size: int,
        grid_origin: Vector,
        viewport_size: Optional[tuple[int, int]],
    ) -> None:
        """Remember the grid placement and refit the camera to ``viewport_size``."""
        self.dim = dim
        self.cell_size = cell_size
        self.grid_origin = grid_origin
        self.on_viewport_resized(viewport_size)

    def on_viewport_resized(self, viewport_size: Optional[tuple[int, int]]) -> None:
        """Move the camera so the grid with its margin fits a viewport of the given size."""
        if viewport_size is None or self.dim is None:
            return
        size_x, size_y = viewport_size
        if size_y == 0 or self.dim.height == 0:
            return

        world_width = self.dim.width * self.cell_size
        world_height = self.dim.height * self.cell_size

        viewport_aspect = size_x / size_y
        grid_aspect = self.dim.width / self.dim.height

        if viewport_aspect <= grid_aspect:
            margin_width = (self.dim.width + GRID_MARGIN) * self.cell_size
            location_z = margin_width / fov_tan(self.field_of_view)
        else:
            vfov = vertical_fov(self.field_of_view, 1.0 / viewport_aspect)
            margin_height = (self.dim.height + GRID_MARGIN) * self.cell_size
            location_z = margin_height / fov_tan(vfov)

        ox, oy, oz = self.grid_origin
        self.location = (
            ox + 0.5 * world_height,
            oy + 0.5 * world_width,
            oz + 0.5 * location_z,
        )