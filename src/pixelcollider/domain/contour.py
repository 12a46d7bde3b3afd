"""Core geometric types for contour representation.

This module defines the geometric types passed between pipeline stages:
- GridPoint: An integer (x, y) cell position
- LocalPoint: A float (x, y) position in sprite-local units
- Contour: An ordered walk over edge cells
- WindingDirection: Enum for polygon winding direction
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import TypeAlias

GridPoint: TypeAlias = tuple[int, int]
LocalPoint: TypeAlias = tuple[float, float]
EdgePixelSet: TypeAlias = frozenset[GridPoint]


class WindingDirection(Enum):
    """Polygon winding direction.

    With y pointing up, a positive shoelace area means counter-clockwise.
    Emitted colliders always wind counter-clockwise.
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


def is_adjacent(a: GridPoint, b: GridPoint) -> bool:
    """Whether two distinct cells touch orthogonally or diagonally."""
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    return max(dx, dy) == 1


@dataclass
class Contour:
    """An ordered sequence of edge cells approximating a silhouette.

    The walk that produces a contour may stop before every edge cell is
    visited; ``is_complete`` and ``is_closed`` report how far it got.

    Attributes:
        points: Cells in walk order, starting at the lowest-leftmost cell
        edge_count: Size of the edge set the walk ran over
    """

    points: list[GridPoint]
    edge_count: int = 0

    def __len__(self) -> int:
        return len(self.points)

    @property
    def is_complete(self) -> bool:
        """Every edge cell was visited."""
        return len(self.points) == self.edge_count

    @property
    def is_closed(self) -> bool:
        """Complete walk whose last cell touches the first."""
        if len(self.points) < 3 or not self.is_complete:
            return False
        return is_adjacent(self.points[-1], self.points[0])
