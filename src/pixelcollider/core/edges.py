"""Edge cell detection on occupancy grids."""

import numpy as np

from pixelcollider.domain import EdgePixelSet, OccupancyGrid

ORTHOGONAL_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def is_edge_cell(grid: OccupancyGrid, x: int, y: int) -> bool:
    """Whether (x, y) is solid and touches the border or an empty cell.

    Only the four orthogonal neighbours are considered; a solid cell with
    an empty diagonal neighbour alone is not an edge cell.
    """
    if not grid.is_occupied(x, y):
        return False
    if x == 0 or y == 0 or x == grid.width - 1 or y == grid.height - 1:
        return True
    return any(not grid.is_occupied(x + dx, y + dy) for dx, dy in ORTHOGONAL_OFFSETS)


def find_edge_cells(grid: OccupancyGrid) -> EdgePixelSet:
    """Collect every edge cell of the grid.

    Cells outside the grid count as empty, so solid cells on the border are
    always edges.

    Returns:
        Unordered set of (x, y) positions
    """
    cells = grid.cells
    if cells.size == 0:
        return frozenset()

    padded = np.pad(cells, 1, mode="constant", constant_values=False)
    interior = (
        padded[1:-1, :-2]
        & padded[1:-1, 2:]
        & padded[:-2, 1:-1]
        & padded[2:, 1:-1]
    )
    edges = cells & ~interior
    ys, xs = np.nonzero(edges)
    return frozenset((int(x), int(y)) for x, y in zip(xs, ys, strict=True))
