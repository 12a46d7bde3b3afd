"""Geometric operations for contour and collider calculations.

This module provides core mathematical utilities for:
- Signed area calculation (shoelace formula)
- Winding direction detection
- Turn (cross product) of three consecutive points
- Point-to-segment distance with clamped projection
- Bounding boxes of point sequences

Points are plain (x, y) tuples so the same helpers serve integer grid
points and float local points. All functions are pure and stateless.
"""

import math
from collections.abc import Sequence

from pixelcollider.domain import WindingDirection

Vec = tuple[float, float]


def signed_area(points: Sequence[Vec]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The sign of the area indicates winding direction (y pointing up):
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    Args:
        points: Polygon vertices, closing edge implied

    Returns:
        Signed area in square units. Returns 0.0 for fewer than 3 points.

    Examples:
        >>> signed_area([(0, 0), (1, 0), (1, 1), (0, 1)])  # CCW square
        1.0
        >>> signed_area([(0, 0), (0, 1), (1, 1), (1, 0)])  # CW square
        -1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i][0] * points[j][1]
        area -= points[j][0] * points[i][1]

    return area / 2.0


def winding_direction(points: Sequence[Vec]) -> WindingDirection | None:
    """Winding of a polygon, or None when its area is zero."""
    area = signed_area(points)
    if area > 0:
        return WindingDirection.COUNTER_CLOCKWISE
    if area < 0:
        return WindingDirection.CLOCKWISE
    return None


def turn(prev: Vec, curr: Vec, nxt: Vec) -> float:
    """Cross product of (curr - prev) and (nxt - curr).

    Zero when the three points are collinear; the sign gives the turn
    direction at ``curr``.
    """
    ax = curr[0] - prev[0]
    ay = curr[1] - prev[1]
    bx = nxt[0] - curr[0]
    by = nxt[1] - curr[1]
    return ax * by - ay * bx


def point_segment_distance(point: Vec, seg_start: Vec, seg_end: Vec) -> float:
    """Distance from a point to the closest point of a line segment.

    Projects the point onto the segment's line and clamps the projection
    to the segment, so points beyond either end measure to that endpoint.

    Examples:
        >>> point_segment_distance((1.0, 1.0), (0.0, 0.0), (2.0, 0.0))
        1.0
        >>> point_segment_distance((3.0, 0.0), (0.0, 0.0), (2.0, 0.0))
        1.0
    """
    dx = seg_end[0] - seg_start[0]
    dy = seg_end[1] - seg_start[1]

    segment_length_sq = dx * dx + dy * dy
    if segment_length_sq == 0:
        return math.hypot(point[0] - seg_start[0], point[1] - seg_start[1])

    # t = dot(point - start, end - start) / ||end - start||^2
    t = ((point[0] - seg_start[0]) * dx + (point[1] - seg_start[1]) * dy) / segment_length_sq
    t = max(0.0, min(1.0, t))

    nearest_x = seg_start[0] + t * dx
    nearest_y = seg_start[1] + t * dy
    return math.hypot(point[0] - nearest_x, point[1] - nearest_y)


def bounding_box(points: Sequence[Vec]) -> tuple[float, float, float, float]:
    """Return (min_x, min_y, max_x, max_y), all zero for no points."""
    if not points:
        return (0.0, 0.0, 0.0, 0.0)
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return (min(xs), min(ys), max(xs), max(ys))
