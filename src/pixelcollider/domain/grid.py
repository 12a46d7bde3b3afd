"""Boolean occupancy grid derived from a pixel buffer."""

from dataclasses import dataclass

import numpy as np


@dataclass
class OccupancyGrid:
    """Width x height grid of solid/empty cells.

    Cells are indexed ``cells[y, x]`` with y growing upwards, matching
    PixelBuffer. A grid is built per extraction and never shared.

    Attributes:
        cells: Boolean array of shape (height, width)
    """

    cells: np.ndarray

    def __post_init__(self) -> None:
        self.cells = np.asarray(self.cells, dtype=bool)
        if self.cells.ndim != 2:
            raise ValueError(f"Occupancy grid must be 2D, got {self.cells.ndim}D")

    @classmethod
    def from_rows(cls, rows: list[list[int]] | list[list[bool]]) -> "OccupancyGrid":
        """Build a grid from bottom-up rows of truthy values."""
        return cls(np.asarray(rows, dtype=bool))

    @property
    def width(self) -> int:
        return int(self.cells.shape[1])

    @property
    def height(self) -> int:
        return int(self.cells.shape[0])

    @property
    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.cells))

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_occupied(self, x: int, y: int) -> bool:
        """Whether (x, y) is solid. Cells outside the grid are empty."""
        if not self.in_bounds(x, y):
            return False
        return bool(self.cells[y, x])

    def copy(self) -> "OccupancyGrid":
        return OccupancyGrid(self.cells.copy())

    def row_string(self, y: int, limit: int = 10) -> str:
        """Render the first ``limit`` cells of a row as filled/empty squares."""
        return "".join("■" if c else "□" for c in self.cells[y, :limit])
