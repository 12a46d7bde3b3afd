"""Grid to sprite-local coordinate conversion."""

from collections.abc import Sequence

from pixelcollider.domain import LocalPoint, SpriteGeometry


def to_local(point: Sequence[float], geometry: SpriteGeometry) -> LocalPoint:
    """Map one grid point into local units.

    local = (grid - pivot) / pixels_per_unit on each axis, no rotation.
    """
    pivot_x, pivot_y = geometry.pivot
    ppu = geometry.pixels_per_unit
    return ((point[0] - pivot_x) / ppu, (point[1] - pivot_y) / ppu)


def grid_to_local(points: Sequence[Sequence[float]], geometry: SpriteGeometry) -> list[LocalPoint]:
    """Map a sequence of grid points into local units, preserving order."""
    return [to_local(p, geometry) for p in points]
