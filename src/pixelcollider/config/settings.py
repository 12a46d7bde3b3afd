"""Configuration settings for PixelCollider."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class ColliderKind(str, Enum):
    """Shape emitted for a successfully traced outline."""

    POLYGON = "polygon"
    EDGE_LOOP = "edge_loop"


class OpenContourPolicy(str, Enum):
    """What to do when the contour walk ends before closing the ring."""

    ACCEPT = "accept"
    FALLBACK = "fallback"


class ExtractionConfig(BaseModel):
    """Configuration for outline extraction and collider synthesis.

    Thresholds are in 0-255 alpha units. The simplification tolerance is in
    sprite-local units and is scaled by pixels-per-unit before being applied
    to the pixel contour.
    """

    threshold_alpha: int = Field(
        default=200,
        ge=0,
        le=255,
        description="Pixels with alpha strictly above this value are solid",
    )
    fill_holes: bool = Field(
        default=True,
        description="Fill isolated single-pixel gaps before edge detection",
    )
    corner_optimization: bool = Field(
        default=True,
        description="Drop contour points lying on straight runs",
    )
    simplification_tolerance: float = Field(
        default=0.01,
        ge=0.0,
        description=(
            "Douglas-Peucker tolerance in local units (0 disables); multiplied by "
            "pixels_per_unit, so 0.01 at 100 ppu allows one pixel of deviation and "
            "sprites only a few pixels wide may simplify down to the fallback box"
        ),
    )
    collider_kind: ColliderKind = Field(
        default=ColliderKind.POLYGON,
        description="Emit a polygon or a closed edge loop",
    )
    open_contour_policy: OpenContourPolicy = Field(
        default=OpenContourPolicy.ACCEPT,
        description="Keep an unclosed contour (flagged) or use the fallback box",
    )
    collinear_epsilon: float = Field(
        default=0.1,
        gt=0.0,
        le=1.0,
        description="Cross product magnitude below which a point counts as collinear",
    )

    @classmethod
    def precise(cls) -> "ExtractionConfig":
        """High threshold, fine tolerance."""
        return cls(
            threshold_alpha=220,
            simplification_tolerance=0.005,
            corner_optimization=True,
            fill_holes=True,
        )

    @classmethod
    def fast(cls) -> "ExtractionConfig":
        """Looser threshold and tolerance, no optional passes."""
        return cls(
            threshold_alpha=180,
            simplification_tolerance=0.02,
            corner_optimization=False,
            fill_holes=False,
        )

    @classmethod
    def debug(cls) -> "ExtractionConfig":
        """Default extraction values; pair with LoggingConfig(debug=True)."""
        return cls(
            threshold_alpha=200,
            simplification_tolerance=0.01,
            corner_optimization=True,
            fill_holes=True,
        )


class Preset(str, Enum):
    """Named extraction presets."""

    PRECISE = "precise"
    FAST = "fast"
    DEBUG = "debug"

    def to_config(self) -> ExtractionConfig:
        """Build the extraction config for this preset."""
        if self is Preset.FAST:
            return ExtractionConfig.fast()
        if self is Preset.DEBUG:
            return ExtractionConfig.debug()
        return ExtractionConfig.precise()


class SpriteConfig(BaseModel):
    """Defaults describing how pixels map into sprite-local space."""

    pixels_per_unit: float = Field(
        default=100.0,
        gt=0.0,
        description="Texture pixels per local unit",
    )
    pivot: tuple[float, float] | None = Field(
        default=None,
        description="Pivot in pixels from the sprite's bottom-left (None = center)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    debug: bool = Field(
        default=False,
        description="Log per-stage diagnostics (counts, bounds)",
    )
    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PixelColliderSettings(BaseModel):
    """Main application settings."""

    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    sprite: SpriteConfig = Field(default_factory=SpriteConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PixelColliderSettings:
    """Get default application settings."""
    return PixelColliderSettings()
