"""Tests for domain models to verify they work correctly."""

import numpy as np
import pytest

from pixelcollider.domain import (
    BoxCollider,
    Contour,
    EdgeLoopCollider,
    OccupancyGrid,
    PixelBuffer,
    PolygonCollider,
    SpriteGeometry,
    SpriteRegion,
    collider_from_dict,
    is_adjacent,
)
from pixelcollider.exceptions import (
    ColliderFormatError,
    InvalidGeometryError,
    InvalidRegionError,
)


class TestSpriteRegion:
    """Tests for SpriteRegion class."""

    def test_region_creation(self):
        region = SpriteRegion(2, 3, 16, 8)
        assert region.to_tuple() == (2, 3, 16, 8)

    def test_full_region(self):
        assert SpriteRegion.full(32, 16).to_tuple() == (0, 0, 32, 16)

    def test_parse(self):
        assert SpriteRegion.parse("1, 2,3 ,4").to_tuple() == (1, 2, 3, 4)

    @pytest.mark.parametrize("text", ["1,2,3", "a,b,c,d", "1,2,3,4,5"])
    def test_parse_rejects_malformed(self, text):
        with pytest.raises(InvalidRegionError):
            SpriteRegion.parse(text)

    def test_empty_region_rejected(self):
        with pytest.raises(InvalidRegionError):
            SpriteRegion(0, 0, 0, 4)

    def test_negative_origin_rejected(self):
        with pytest.raises(InvalidRegionError):
            SpriteRegion(-1, 0, 4, 4)

    def test_region_immutable(self):
        region = SpriteRegion(0, 0, 4, 4)
        with pytest.raises(AttributeError):
            region.x = 3  # type: ignore


class TestSpriteGeometry:
    """Tests for SpriteGeometry class."""

    def test_centered_pivot(self):
        geometry = SpriteGeometry.centered(32, 16, pixels_per_unit=16)
        assert geometry.pivot == (16.0, 8.0)

    def test_bounds_and_half_extents(self):
        geometry = SpriteGeometry.centered(32, 16, pixels_per_unit=16)
        assert geometry.bounds_size == (2.0, 1.0)
        assert geometry.half_extents == (1.0, 0.5)

    def test_for_region_with_pivot(self):
        region = SpriteRegion(10, 10, 8, 8)
        geometry = SpriteGeometry.for_region(region, pixels_per_unit=8, pivot=(0.0, 0.0))
        assert geometry.pivot == (0.0, 0.0)
        assert (geometry.width, geometry.height) == (8, 8)

    def test_for_region_defaults_to_center(self):
        geometry = SpriteGeometry.for_region(SpriteRegion(0, 0, 6, 4))
        assert geometry.pivot == (3.0, 2.0)
        assert geometry.pixels_per_unit == 100.0

    def test_non_positive_ppu_rejected(self):
        with pytest.raises(InvalidGeometryError):
            SpriteGeometry(4, 4, (2.0, 2.0), pixels_per_unit=0)


class TestPixelBuffer:
    """Tests for PixelBuffer class."""

    def test_from_rows_bottom_up(self):
        buffer = PixelBuffer.from_rows([[1, 2, 3], [4, 5, 6]])
        assert (buffer.width, buffer.height) == (3, 2)
        assert buffer.alpha_at(0, 0) == 1
        assert buffer.alpha_at(2, 1) == 6

    def test_as_array_indexed_y_x(self):
        buffer = PixelBuffer.from_rows([[1, 2, 3], [4, 5, 6]])
        array = buffer.as_array()
        assert array.shape == (2, 3)
        assert array[1, 0] == 4

    def test_size_mismatch_rejected(self):
        with pytest.raises(InvalidRegionError):
            PixelBuffer(width=2, height=2, alpha=np.zeros(3, dtype=np.uint8))

    @pytest.mark.parametrize("width, height", [(4, 0), (0, 4)])
    def test_empty_buffer_rejected(self, width, height):
        with pytest.raises(InvalidRegionError, match="must be positive"):
            PixelBuffer(width=width, height=height, alpha=np.zeros(0, dtype=np.uint8))

    def test_pixel_count(self):
        buffer = PixelBuffer(width=4, height=3, alpha=np.zeros(12, dtype=np.uint8))
        assert buffer.pixel_count == 12
        assert buffer.origin == (0, 0)


class TestOccupancyGrid:
    """Tests for OccupancyGrid class."""

    def test_dimensions(self):
        grid = OccupancyGrid.from_rows([[1, 0, 1], [0, 1, 0]])
        assert (grid.width, grid.height) == (3, 2)
        assert grid.occupied_count == 3

    def test_outside_cells_are_empty(self):
        grid = OccupancyGrid.from_rows([[1, 1], [1, 1]])
        assert grid.is_occupied(1, 1)
        assert not grid.is_occupied(-1, 0)
        assert not grid.is_occupied(0, 2)

    def test_copy_is_independent(self):
        grid = OccupancyGrid.from_rows([[1, 1], [1, 1]])
        clone = grid.copy()
        clone.cells[0, 0] = False
        assert grid.is_occupied(0, 0)

    def test_row_string(self):
        grid = OccupancyGrid.from_rows([[1, 0, 1]])
        assert grid.row_string(0) == "■□■"


class TestContour:
    """Tests for Contour class."""

    def test_adjacency(self):
        assert is_adjacent((0, 0), (1, 1))
        assert is_adjacent((0, 0), (0, 1))
        assert not is_adjacent((0, 0), (0, 0))
        assert not is_adjacent((0, 0), (2, 0))

    def test_closed_ring(self):
        contour = Contour(points=[(0, 0), (1, 0), (1, 1), (0, 1)], edge_count=4)
        assert contour.is_complete
        assert contour.is_closed

    def test_incomplete_walk_is_not_closed(self):
        contour = Contour(points=[(0, 0), (1, 0), (1, 1)], edge_count=5)
        assert not contour.is_complete
        assert not contour.is_closed

    def test_complete_walk_ending_far_from_start(self):
        contour = Contour(points=[(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)], edge_count=5)
        assert contour.is_complete
        assert not contour.is_closed


class TestColliders:
    """Tests for collider specifications."""

    def test_polygon_to_dict(self):
        polygon = PolygonCollider(points=((0.0, 0.0), (1.0, 0.0), (0.0, 1.0)))
        assert polygon.to_dict() == {
            "kind": "polygon",
            "points": [[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]],
        }

    def test_edge_loop_from_dict(self):
        data = {"kind": "edge_loop", "points": [[0, 0], [1, 0], [0, 1], [0, 0]]}
        loop = collider_from_dict(data)
        assert isinstance(loop, EdgeLoopCollider)
        assert loop.points[0] == loop.points[-1]

    def test_box_from_dict(self):
        box = collider_from_dict({"kind": "box", "half_extents": [0.5, 0.25]})
        assert box == BoxCollider(half_extents=(0.5, 0.25))
        assert box.size == (1.0, 0.5)

    def test_unknown_kind_rejected(self):
        with pytest.raises(ColliderFormatError, match="unknown collider kind"):
            collider_from_dict({"kind": "circle"})

    def test_missing_field_rejected(self):
        with pytest.raises(ColliderFormatError):
            collider_from_dict({"kind": "polygon"})

    def test_non_dict_rejected(self):
        with pytest.raises(ColliderFormatError):
            collider_from_dict([1, 2, 3])  # type: ignore[arg-type]

    def test_collider_immutable(self):
        box = BoxCollider(half_extents=(1.0, 1.0))
        with pytest.raises(AttributeError):
            box.half_extents = (2.0, 2.0)  # type: ignore
