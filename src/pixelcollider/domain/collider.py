"""Collision shape specifications produced by the pipeline.

A collider is one of three shapes:
- PolygonCollider: Closed polygon, counter-clockwise, at least 3 points
- EdgeLoopCollider: Open chain closed by repeating its first point
- BoxCollider: Axis-aligned fallback box centered at the origin
"""

from dataclasses import dataclass
from typing import Any, TypeAlias

from pixelcollider.domain.contour import LocalPoint
from pixelcollider.exceptions import ColliderFormatError


def _points_to_list(points: tuple[LocalPoint, ...]) -> list[list[float]]:
    return [[x, y] for x, y in points]


def _points_from_list(data: Any) -> tuple[LocalPoint, ...]:
    try:
        return tuple((float(p[0]), float(p[1])) for p in data)
    except (TypeError, ValueError, IndexError) as e:
        raise ColliderFormatError(f"bad point list: {e}") from e


@dataclass(frozen=True, slots=True)
class PolygonCollider:
    """Closed polygon in sprite-local units.

    Attributes:
        points: Vertices in counter-clockwise order, last != first
    """

    points: tuple[LocalPoint, ...]

    kind = "polygon"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "points": _points_to_list(self.points)}


@dataclass(frozen=True, slots=True)
class EdgeLoopCollider:
    """Chain of edges whose last point repeats the first.

    Attributes:
        points: Vertices in counter-clockwise order, last == first
    """

    points: tuple[LocalPoint, ...]

    kind = "edge_loop"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "points": _points_to_list(self.points)}


@dataclass(frozen=True, slots=True)
class BoxCollider:
    """Axis-aligned box covering the whole sprite.

    Attributes:
        half_extents: Half width and half height in local units
        center: Box center in local units
    """

    half_extents: tuple[float, float]
    center: tuple[float, float] = (0.0, 0.0)

    kind = "box"

    @property
    def size(self) -> tuple[float, float]:
        return (self.half_extents[0] * 2.0, self.half_extents[1] * 2.0)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "half_extents": list(self.half_extents),
            "center": list(self.center),
        }


ColliderSpec: TypeAlias = PolygonCollider | EdgeLoopCollider | BoxCollider


def collider_from_dict(data: dict[str, Any]) -> ColliderSpec:
    """Deserialize a collider produced by ``to_dict``.

    Raises:
        ColliderFormatError: If the kind is unknown or fields are missing
    """
    if not isinstance(data, dict):
        raise ColliderFormatError(f"expected an object, got {type(data).__name__}")
    kind = data.get("kind")
    try:
        if kind == PolygonCollider.kind:
            return PolygonCollider(points=_points_from_list(data["points"]))
        if kind == EdgeLoopCollider.kind:
            return EdgeLoopCollider(points=_points_from_list(data["points"]))
        if kind == BoxCollider.kind:
            hx, hy = data["half_extents"]
            cx, cy = data.get("center", (0.0, 0.0))
            return BoxCollider(half_extents=(float(hx), float(hy)), center=(float(cx), float(cy)))
    except (KeyError, TypeError, ValueError) as e:
        raise ColliderFormatError(f"missing or malformed field for '{kind}': {e}") from e
    raise ColliderFormatError(f"unknown collider kind '{kind}'")
