"""Greedy ordering of edge cells into a contour.

The tracer walks from the lowest-leftmost edge cell, always stepping to the
first unvisited edge cell found in a fixed clockwise probe order. This is
not a general boundary follower: on shapes with one-pixel bottlenecks,
branches or several separate outlines the walk can stop before it returns
to the start. Such contours are reported through ``Contour.is_closed``
rather than patched up here.
"""

from collections.abc import Collection

from pixelcollider.domain import Contour, GridPoint

# Clockwise probe order in screen terms, where "down" is one row further
# from the start row (+y): right, down-right, down, down-left, left,
# up-left, up, up-right. On a y-up grid the walk therefore runs
# counter-clockwise around the shape.
NEIGHBOR_OFFSETS: tuple[GridPoint, ...] = (
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
    (0, -1),
    (1, -1),
)


def find_start_cell(edge_cells: Collection[GridPoint]) -> GridPoint:
    """Return the cell with the smallest y, ties broken by smallest x.

    Raises:
        ValueError: If there are no cells
    """
    if not edge_cells:
        raise ValueError("Cannot pick a start cell from an empty edge set")
    return min(edge_cells, key=lambda p: (p[1], p[0]))


def next_cell(
    current: GridPoint,
    edge_cells: Collection[GridPoint],
    visited: set[GridPoint],
) -> GridPoint | None:
    """First unvisited edge cell around ``current`` in probe order."""
    x, y = current
    for dx, dy in NEIGHBOR_OFFSETS:
        candidate = (x + dx, y + dy)
        if candidate in edge_cells and candidate not in visited:
            return candidate
    return None


def trace_contour(edge_cells: Collection[GridPoint]) -> Contour:
    """Order edge cells into a contour by greedy neighbour walking.

    Args:
        edge_cells: Unordered edge cells of one occupancy grid

    Returns:
        Contour starting at the lowest-leftmost cell. With fewer than three
        edge cells no walk is attempted; the cells are returned start first.
    """
    cells = frozenset(edge_cells)
    if not cells:
        return Contour(points=[], edge_count=0)

    start = find_start_cell(cells)
    if len(cells) < 3:
        rest = sorted((p for p in cells if p != start), key=lambda p: (p[1], p[0]))
        return Contour(points=[start, *rest], edge_count=len(cells))

    ordered: list[GridPoint] = [start]
    visited: set[GridPoint] = {start}
    current = start

    while len(ordered) < len(cells):
        candidate = next_cell(current, cells, visited)
        if candidate is None:
            break
        ordered.append(candidate)
        visited.add(candidate)
        current = candidate

    return Contour(points=ordered, edge_count=len(cells))
