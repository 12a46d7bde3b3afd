"""Alpha thresholding into occupancy grids.

All functions are pure: they return new grids and never modify their input.
"""

import numpy as np

from pixelcollider.domain import OccupancyGrid, PixelBuffer


def build_occupancy(buffer: PixelBuffer, threshold: int) -> OccupancyGrid:
    """Mark every pixel whose alpha is strictly above ``threshold`` as solid.

    Args:
        buffer: Sampled alpha values
        threshold: Alpha cut-off in 0-255

    Returns:
        Grid with the same width and height as the buffer

    Raises:
        ValueError: If threshold is outside 0-255
    """
    if not 0 <= threshold <= 255:
        raise ValueError(f"Alpha threshold must be within 0-255, got {threshold}")
    return OccupancyGrid(buffer.as_array() > threshold)


def fill_single_holes(grid: OccupancyGrid) -> OccupancyGrid:
    """Fill empty cells whose four orthogonal neighbours are all solid.

    This is a single pass that reads only the input grid, so cells filled
    here never help fill their neighbours. Cells on the grid border are
    never filled. Holes wider than one cell stay open.
    """
    cells = grid.cells
    result = cells.copy()
    if grid.width < 3 or grid.height < 3:
        return OccupancyGrid(result)

    center = cells[1:-1, 1:-1]
    enclosed = (
        ~center
        & cells[1:-1, :-2]  # left
        & cells[1:-1, 2:]  # right
        & cells[:-2, 1:-1]  # below
        & cells[2:, 1:-1]  # above
    )
    result[1:-1, 1:-1] = np.logical_or(center, enclosed)
    return OccupancyGrid(result)


def build_mask(buffer: PixelBuffer, threshold: int, fill_holes: bool = False) -> OccupancyGrid:
    """Threshold a buffer and optionally fill single-cell holes."""
    grid = build_occupancy(buffer, threshold)
    if fill_holes:
        grid = fill_single_holes(grid)
    return grid
