"""Tests for geometry helpers and contour point reduction."""

import math

import pytest

from pixelcollider.core.geometry import (
    bounding_box,
    point_segment_distance,
    signed_area,
    turn,
    winding_direction,
)
from pixelcollider.core.simplify import douglas_peucker, optimize_corners, simplify_contour
from pixelcollider.domain import WindingDirection


class TestGeometry:
    """Tests for geometry helper functions."""

    def test_signed_area_ccw(self):
        assert signed_area([(0, 0), (1, 0), (1, 1), (0, 1)]) == 1.0

    def test_signed_area_cw(self):
        assert signed_area([(0, 0), (0, 1), (1, 1), (1, 0)]) == -1.0

    def test_signed_area_too_few_points(self):
        assert signed_area([(0, 0), (5, 5)]) == 0.0

    def test_winding_direction(self):
        assert winding_direction([(0, 0), (1, 0), (0, 1)]) == WindingDirection.COUNTER_CLOCKWISE
        assert winding_direction([(0, 0), (0, 1), (1, 0)]) == WindingDirection.CLOCKWISE
        assert winding_direction([(0, 0), (1, 0), (2, 0)]) is None

    def test_turn_sign(self):
        assert turn((0, 0), (1, 0), (1, 1)) > 0  # left turn
        assert turn((0, 0), (1, 0), (1, -1)) < 0  # right turn
        assert turn((0, 0), (1, 0), (2, 0)) == 0

    def test_distance_perpendicular(self):
        assert point_segment_distance((1.0, 1.0), (0.0, 0.0), (2.0, 0.0)) == 1.0

    def test_distance_clamped_to_endpoint(self):
        assert point_segment_distance((3.0, 0.0), (0.0, 0.0), (2.0, 0.0)) == 1.0
        assert point_segment_distance((-3.0, 4.0), (0.0, 0.0), (2.0, 0.0)) == 5.0

    def test_distance_zero_length_segment(self):
        assert point_segment_distance((3.0, 4.0), (0.0, 0.0), (0.0, 0.0)) == 5.0

    def test_bounding_box(self):
        assert bounding_box([(1, 5), (-2, 3), (4, -1)]) == (-2, -1, 4, 5)
        assert bounding_box([]) == (0.0, 0.0, 0.0, 0.0)


class TestOptimizeCorners:
    """Tests for optimize_corners function."""

    def test_square_ring_keeps_corners(self):
        ring = [
            (0, 0), (1, 0), (2, 0), (3, 0),
            (3, 1), (3, 2), (3, 3),
            (2, 3), (1, 3), (0, 3),
            (0, 2), (0, 1),
        ]
        assert optimize_corners(ring) == [(0, 0), (3, 0), (3, 3), (0, 3)]

    def test_wraparound_neighbours(self):
        """The first point is judged against the last one."""
        ring = [(1, 0), (2, 0), (2, 2), (0, 2), (0, 0)]
        assert optimize_corners(ring) == [(2, 0), (2, 2), (0, 2), (0, 0)]

    def test_fewer_than_four_points_unchanged(self):
        points = [(0, 0), (1, 0), (2, 0)]
        result = optimize_corners(points)
        assert result == points
        assert result is not points

    def test_never_below_three_points(self):
        points = [(0, 0), (1, 0), (2, 0), (3, 0)]
        assert optimize_corners(points) == points

    def test_epsilon_threshold(self):
        ring = [(0.0, 0.0), (1.0, 0.05), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0)]
        assert (1.0, 0.05) not in optimize_corners(ring, epsilon=0.5)
        assert (1.0, 0.05) in optimize_corners(ring, epsilon=0.01)


class TestDouglasPeucker:
    """Tests for douglas_peucker function."""

    def test_zero_tolerance_is_identity(self):
        points = [(0, 0), (1, 0), (2, 0), (3, 1)]
        result = douglas_peucker(points, 0.0)
        assert result == points
        assert result is not points

    def test_negative_tolerance_is_identity(self):
        points = [(0, 0), (1, 0), (2, 0)]
        assert douglas_peucker(points, -1.0) == points

    def test_short_input_unchanged(self):
        assert douglas_peucker([(0, 0), (5, 5)], 10.0) == [(0, 0), (5, 5)]

    def test_flat_run_collapses(self):
        points = [(0.0, 0.0), (1.0, 0.1), (2.0, 0.0), (3.0, 0.1), (4.0, 0.0)]
        assert douglas_peucker(points, 0.5) == [(0.0, 0.0), (4.0, 0.0)]

    def test_keeps_peak(self):
        points = [(0, 0), (1, 0), (2, 3), (3, 0), (4, 0)]
        assert douglas_peucker(points, 1.0) == [(0, 0), (2, 3), (4, 0)]

    def test_result_is_subsequence_with_endpoints(self):
        points = [(float(i), math.sin(i / 3.0) * 4.0) for i in range(40)]
        result = douglas_peucker(points, 0.3)

        assert result[0] == points[0]
        assert result[-1] == points[-1]
        positions = [points.index(p) for p in result]
        assert positions == sorted(positions)

    def test_closing_edge_not_simplified(self):
        """The last point survives even when it lies on the closing edge."""
        ring = [(0, 0), (2, 0), (2, 2), (0, 2), (0, 1)]
        result = douglas_peucker(ring, 0.5)
        assert result == ring

    def test_long_input(self):
        points = [(float(i), 0.0) for i in range(5000)]
        assert douglas_peucker(points, 0.1) == [(0.0, 0.0), (4999.0, 0.0)]

    @pytest.mark.parametrize("tolerance", [0.0, 0.2, 2.0])
    def test_simplify_contour_delegates(self, tolerance):
        points = [(0, 0), (1, 0), (2, 1), (3, 0), (4, 0)]
        assert simplify_contour(points, tolerance) == douglas_peucker(points, tolerance)
