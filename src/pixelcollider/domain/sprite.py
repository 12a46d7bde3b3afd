"""Sprite-side input types.

This module defines what the pipeline reads from a sprite asset:
- SpriteRegion: The sub-rectangle of a texture occupied by the sprite
- SpriteGeometry: Pivot, pixel density and size used for local coordinates
- PixelBuffer: The sampled alpha values of a region
"""

from dataclasses import dataclass, field

import numpy as np

from pixelcollider.exceptions import InvalidGeometryError, InvalidRegionError


@dataclass(frozen=True, slots=True)
class SpriteRegion:
    """Rectangle of texture pixels holding one sprite.

    Coordinates use a y-up texture space: (x, y) is the bottom-left
    corner of the rectangle, measured from the bottom-left of the texture.

    Attributes:
        x: Left edge in texture pixels
        y: Bottom edge in texture pixels
        width: Rectangle width in pixels
        height: Rectangle height in pixels
    """

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidRegionError(
                f"width and height must be positive, got {self.width}x{self.height}"
            )
        if self.x < 0 or self.y < 0:
            raise InvalidRegionError(f"origin must be non-negative, got ({self.x}, {self.y})")

    @classmethod
    def full(cls, width: int, height: int) -> "SpriteRegion":
        """Region covering a whole texture."""
        return cls(0, 0, width, height)

    @classmethod
    def parse(cls, text: str) -> "SpriteRegion":
        """Parse an ``x,y,width,height`` string.

        Raises:
            InvalidRegionError: If the text is not four integers
        """
        parts = [p.strip() for p in text.split(",")]
        if len(parts) != 4:
            raise InvalidRegionError(f"expected 'x,y,width,height', got '{text}'")
        try:
            x, y, width, height = (int(p) for p in parts)
        except ValueError as e:
            raise InvalidRegionError(f"non-integer value in '{text}'") from e
        return cls(x, y, width, height)

    def to_tuple(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.width, self.height)


@dataclass(frozen=True, slots=True)
class SpriteGeometry:
    """Mapping data owned by the sprite asset.

    Attributes:
        width: Sprite width in pixels
        height: Sprite height in pixels
        pivot: Pivot in pixels, measured from the sprite's bottom-left
        pixels_per_unit: Pixel density of the sprite
    """

    width: int
    height: int
    pivot: tuple[float, float]
    pixels_per_unit: float = 100.0

    def __post_init__(self) -> None:
        if self.pixels_per_unit <= 0:
            raise InvalidGeometryError(
                f"pixels_per_unit must be positive, got {self.pixels_per_unit}"
            )
        if self.width <= 0 or self.height <= 0:
            raise InvalidGeometryError(
                f"sprite size must be positive, got {self.width}x{self.height}"
            )

    @classmethod
    def centered(
        cls, width: int, height: int, pixels_per_unit: float = 100.0
    ) -> "SpriteGeometry":
        """Geometry with the pivot at the sprite's center."""
        return cls(width, height, (width / 2.0, height / 2.0), pixels_per_unit)

    @classmethod
    def for_region(
        cls,
        region: SpriteRegion,
        pixels_per_unit: float = 100.0,
        pivot: tuple[float, float] | None = None,
    ) -> "SpriteGeometry":
        """Geometry for a region, centered unless a pivot is given."""
        if pivot is None:
            return cls.centered(region.width, region.height, pixels_per_unit)
        return cls(region.width, region.height, pivot, pixels_per_unit)

    @property
    def bounds_size(self) -> tuple[float, float]:
        """Rendered sprite size in local units."""
        return (self.width / self.pixels_per_unit, self.height / self.pixels_per_unit)

    @property
    def half_extents(self) -> tuple[float, float]:
        """Half of the rendered sprite size."""
        size_x, size_y = self.bounds_size
        return (size_x * 0.5, size_y * 0.5)


@dataclass
class PixelBuffer:
    """Alpha values of one sprite region.

    Values are stored row-major with row 0 at the bottom of the sprite,
    so ``alpha[y * width + x]`` is the pixel at grid position (x, y).

    Attributes:
        width: Buffer width in pixels
        height: Buffer height in pixels
        alpha: Flat uint8 array of ``width * height`` alpha values
        origin: Texture position of the region's bottom-left pixel
    """

    width: int
    height: int
    alpha: np.ndarray
    origin: tuple[int, int] = field(default=(0, 0))

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidRegionError(
                f"buffer size must be positive, got {self.width}x{self.height}"
            )
        self.alpha = np.asarray(self.alpha, dtype=np.uint8).reshape(-1)
        expected = self.width * self.height
        if self.alpha.size != expected:
            raise InvalidRegionError(
                f"buffer holds {self.alpha.size} values, expected {expected}"
            )

    @classmethod
    def from_rows(
        cls, rows: list[list[int]], origin: tuple[int, int] = (0, 0)
    ) -> "PixelBuffer":
        """Build a buffer from bottom-up rows of alpha values.

        ``rows[0]`` is the bottom row of the sprite.
        """
        array = np.asarray(rows, dtype=np.uint8)
        if array.ndim != 2:
            raise InvalidRegionError("rows must form a rectangular 2D array")
        height, width = array.shape
        return cls(width=width, height=height, alpha=array.reshape(-1), origin=origin)

    def alpha_at(self, x: int, y: int) -> int:
        """Alpha value at grid position (x, y)."""
        return int(self.alpha[y * self.width + x])

    def as_array(self) -> np.ndarray:
        """Alpha values as a (height, width) view indexed ``[y, x]``."""
        return self.alpha.reshape(self.height, self.width)

    @property
    def pixel_count(self) -> int:
        return self.width * self.height
