"""The world representation of the grid: mesh placement, material and lines."""

from __future__ import annotations

from typing import Optional

from .grid import Grid
from .types import Dim
from .world_types import LinearColor, SnakeColors

Vector = tuple[float, float, float]
MaterialValue = "LinearColor | Vector"

_FORWARD: Vector = (1.0, 0.0, 0.0)
_RIGHT: Vector = (0.0, 1.0, 0.0)


def _add(a: Vector, b: Vector) -> Vector:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _scale(v: Vector, k: float) -> Vector:
    return (v[0] * k, v[1] * k, v[2] * k)


class GridVisual:
    """Places a grid mesh in the world to match a grid model and styles it.

    ``mesh_size`` is the size of the mesh's bounding box along x, y and z.
    """

    def __init__(self, mesh_size: Vector) -> None:
        self.mesh_size: Vector = tuple(float(c) for c in mesh_size)  # type: ignore[assignment]
        self.location: Vector = (0.0, 0.0, 0.0)
        self.relative_scale: Vector = (1.0, 1.0, 1.0)
        self.relative_location: Vector = (0.0, 0.0, 0.0)
        self.grid_dim: Optional[Dim] = None
        self.cell_size = 0
        self.world_width = 0
        self.world_height = 0
        self._material: Optional[dict[str, object]] = None

    def set_model(self, grid: Optional[Grid], cell_size: int) -> None:
        """Fit the mesh to ``grid`` with cells of ``cell_size`` world units."""
        if grid is None:
            raise ValueError("Grid is null, game aborted!")
        self.grid_dim = grid.dim()
        self.cell_size = cell_size
        self.world_width = self.grid_dim.width * cell_size
        self.world_height = self.grid_dim.height * cell_size

        size_x, size_y, size_z = self.mesh_size
        if not size_x or not size_y:
            raise ValueError(f"mesh size must be non-zero in x and y, got {self.mesh_size}")

        self.relative_scale = (self.world_height / size_x, self.world_width / size_y, 1.0)
        self.relative_location = _scale(
            (
                float(self.world_height),
                float(self.world_width),
                -size_z * self.relative_scale[2],
            ),
            0.5,
        )

        self._material = {
            "Division": (float(self.grid_dim.height), float(self.grid_dim.width), 0.0)
        }

    def update_colors(self, color_set: SnakeColors) -> None:
        """Apply the grid colours of ``color_set`` to the material, if there is one."""
        if self._material is None:
            return
        self._material["BackgroundColor"] = color_set.grid_background_color
        self._material["LineColor"] = color_set.grid_line_color
        self._material["WallColor"] = color_set.grid_wall_color

    def vector_parameter(self, name: str) -> LinearColor | Vector:
        """Return the material parameter ``name``; raise KeyError if it is not set."""
        if self._material is None or name not in self._material:
            raise KeyError(name)
        return self._material[name]  # type: ignore[return-value]

    def grid_lines(self) -> list[tuple[Vector, Vector]]:
        """Return the (start, end) segments outlining every cell of the grid."""
        if self.grid_dim is None:
            return []
        lines: list[tuple[Vector, Vector]] = []
        for i in range(self.grid_dim.height + 1):
            start = _add(self.location, _scale(_FORWARD, self.cell_size * i))
            lines.append((start, _add(start, _scale(_RIGHT, self.world_width))))
        for i in range(self.grid_dim.width + 1):
            start = _add(self.location, _scale(_RIGHT, self.cell_size * i))
            lines.append((start, _add(start, _scale(_FORWARD, self.world_height))))
        return lines