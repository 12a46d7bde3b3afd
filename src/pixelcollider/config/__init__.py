"""Configuration management for pixelcollider.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, presets or defaults.

Key classes:
- ExtractionConfig: Threshold, hole filling, simplification and shape kind
- SpriteConfig: Pixel density and pivot defaults
- LoggingConfig: Logging settings
- PixelColliderSettings: Main application settings
"""

from pixelcollider.config.settings import (
    ColliderKind,
    ExtractionConfig,
    LoggingConfig,
    OpenContourPolicy,
    PixelColliderSettings,
    Preset,
    SpriteConfig,
    get_default_settings,
)

__all__ = [
    "ColliderKind",
    "ExtractionConfig",
    "LoggingConfig",
    "OpenContourPolicy",
    "PixelColliderSettings",
    "Preset",
    "SpriteConfig",
    "get_default_settings",
]
