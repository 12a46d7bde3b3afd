"""Utility functions for pixelcollider.

This module provides utility functions including:

- Logging setup and configuration
- Stage diagnostics and generation statistics
"""

from pixelcollider.utils.logging import (
    ExtractionStats,
    PipelineLogger,
    configure_logging,
)

__all__ = [
    "ExtractionStats",
    "PipelineLogger",
    "configure_logging",
]
