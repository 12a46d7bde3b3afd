"""Domain models for pixelcollider.

This module contains the data passed between pipeline stages: sprite
regions and geometry, sampled pixel buffers, occupancy grids, contours and
the collider shapes that come out at the end. Models are:

- Immutable where possible (using frozen dataclasses)
- Created per extraction and discarded afterwards
- Independent of Pillow implementation details

Key classes:
- SpriteRegion / SpriteGeometry: Where the sprite lives and how it maps to units
- PixelBuffer: Sampled alpha values
- OccupancyGrid: Thresholded solid/empty cells
- Contour: Ordered edge cells
- PolygonCollider / EdgeLoopCollider / BoxCollider: Output shapes
"""

from pixelcollider.domain.collider import (
    BoxCollider,
    ColliderSpec,
    EdgeLoopCollider,
    PolygonCollider,
    collider_from_dict,
)
from pixelcollider.domain.contour import (
    Contour,
    EdgePixelSet,
    GridPoint,
    LocalPoint,
    WindingDirection,
    is_adjacent,
)
from pixelcollider.domain.grid import OccupancyGrid
from pixelcollider.domain.sprite import PixelBuffer, SpriteGeometry, SpriteRegion

__all__: list[str] = [
    # Enums
    "WindingDirection",
    # Aliases
    "GridPoint",
    "LocalPoint",
    "EdgePixelSet",
    "ColliderSpec",
    # Core types
    "SpriteRegion",
    "SpriteGeometry",
    "PixelBuffer",
    "OccupancyGrid",
    "Contour",
    "PolygonCollider",
    "EdgeLoopCollider",
    "BoxCollider",
    # Helpers
    "collider_from_dict",
    "is_adjacent",
]
