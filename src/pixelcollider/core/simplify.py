"""Contour point reduction.

Two passes shrink a traced contour before it becomes a collider:

- optimize_corners: drops points sitting on straight runs, treating the
  contour as a closed ring
- douglas_peucker: classic polyline simplification over the contour as an
  open chain from its first to its last point

The closing edge (last point back to first) is never simplified by
Douglas-Peucker, so the first and last points always survive.
"""

from collections.abc import Sequence
from typing import TypeVar

from pixelcollider.core.geometry import point_segment_distance, turn

P = TypeVar("P", tuple[int, int], tuple[float, float])

DEFAULT_COLLINEAR_EPSILON = 0.1


def optimize_corners(
    points: Sequence[P], epsilon: float = DEFAULT_COLLINEAR_EPSILON
) -> list[P]:
    """Remove points that are collinear with their cyclic neighbours.

    Args:
        points: Closed ring of points (last connects back to first)
        epsilon: Turn magnitude below which a point is dropped

    Returns:
        The corner points, or an unchanged copy of ``points`` when the
        input has fewer than 4 points or fewer than 3 would remain
    """
    n = len(points)
    if n < 4:
        return list(points)

    corners = [
        points[i]
        for i in range(n)
        if abs(turn(points[i - 1], points[i], points[(i + 1) % n])) >= epsilon
    ]

    return corners if len(corners) >= 3 else list(points)


def douglas_peucker(points: Sequence[P], tolerance: float) -> list[P]:
    """Simplify an open polyline with the Douglas-Peucker algorithm.

    A run between two kept points keeps its farthest point when that point
    lies more than ``tolerance`` from the chord joining the run's ends;
    otherwise the run collapses to its endpoints.

    Args:
        points: Polyline vertices, first to last
        tolerance: Maximum allowed deviation, in the points' units

    Returns:
        Subsequence of ``points`` that always keeps the first and last
        point. A copy of the input when tolerance <= 0 or fewer than 3
        points are given.
    """
    n = len(points)
    if tolerance <= 0 or n < 3:
        return list(points)

    keep = [False] * n
    keep[0] = keep[n - 1] = True

    stack: list[tuple[int, int]] = [(0, n - 1)]
    while stack:
        start, end = stack.pop()
        max_distance = 0.0
        max_index = start

        for i in range(start + 1, end):
            distance = point_segment_distance(points[i], points[start], points[end])
            if distance > max_distance:
                max_distance = distance
                max_index = i

        if max_distance > tolerance:
            keep[max_index] = True
            stack.append((start, max_index))
            stack.append((max_index, end))

    return [p for p, kept in zip(points, keep, strict=True) if kept]


def simplify_contour(points: Sequence[P], tolerance: float) -> list[P]:
    """Douglas-Peucker over a contour treated as an open chain."""
    return douglas_peucker(points, tolerance)
