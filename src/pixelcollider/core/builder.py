"""Collider synthesis from local-space outlines.

Key functions:
- ensure_counter_clockwise: Normalize winding by signed area
- fallback_box: Box covering the whole sprite
- build_collider: Choose polygon, edge loop or fallback box
"""

from collections.abc import Sequence

from pixelcollider.config import ColliderKind
from pixelcollider.core.geometry import signed_area
from pixelcollider.domain import (
    BoxCollider,
    ColliderSpec,
    EdgeLoopCollider,
    LocalPoint,
    PolygonCollider,
    SpriteGeometry,
)

MIN_POLYGON_POINTS = 3
AREA_EPSILON = 1e-12


def ensure_counter_clockwise(points: Sequence[LocalPoint]) -> list[LocalPoint]:
    """Return the points in counter-clockwise order.

    Clockwise sequences (negative signed area) are reversed; everything
    else is returned as a copy in its original order.
    """
    ordered = list(points)
    if signed_area(ordered) < 0:
        ordered.reverse()
    return ordered


def is_usable_outline(points: Sequence[LocalPoint]) -> bool:
    """At least three points enclosing a non-zero area."""
    return len(points) >= MIN_POLYGON_POINTS and abs(signed_area(points)) > AREA_EPSILON


def fallback_box(geometry: SpriteGeometry) -> BoxCollider:
    """Axis-aligned box sized to the full sprite, centered at the origin."""
    return BoxCollider(half_extents=geometry.half_extents)


def build_collider(
    points: Sequence[LocalPoint],
    kind: ColliderKind,
    geometry: SpriteGeometry,
) -> ColliderSpec:
    """Build the collider for an outline.

    Args:
        points: Outline in local units, any winding
        kind: Shape to emit for a usable outline
        geometry: Sprite geometry, used for the fallback box

    Returns:
        PolygonCollider or EdgeLoopCollider wound counter-clockwise, or a
        BoxCollider when the outline has fewer than three points or no area
    """
    if not is_usable_outline(points):
        return fallback_box(geometry)

    ordered = ensure_counter_clockwise(points)
    if kind == ColliderKind.EDGE_LOOP:
        return EdgeLoopCollider(points=(*ordered, ordered[0]))
    return PolygonCollider(points=tuple(ordered))
