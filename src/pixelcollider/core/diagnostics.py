"""Sprite diagnostics for tuning extraction settings.

- analyze_alpha: Distribution of alpha values in a buffer
- sweep_thresholds: Contour size for a range of alpha thresholds
"""

from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from pixelcollider.config import ExtractionConfig
from pixelcollider.core.pipeline import ColliderPipeline
from pixelcollider.domain import PixelBuffer, SpriteGeometry

DEFAULT_SWEEP_THRESHOLDS: tuple[int, ...] = (0, 50, 100, 150, 200, 250)


@dataclass(frozen=True, slots=True)
class AlphaStats:
    """Alpha distribution of a pixel buffer."""

    minimum: int
    maximum: int
    mean: float
    transparent_count: int
    semi_transparent_count: int
    opaque_count: int
    total: int


def analyze_alpha(buffer: PixelBuffer) -> AlphaStats:
    """Summarize alpha values: range, mean and transparency classes.

    Transparent means alpha 0, opaque means alpha 255, everything in
    between is semi-transparent.
    """
    alpha = buffer.alpha
    transparent = int(np.count_nonzero(alpha == 0))
    opaque = int(np.count_nonzero(alpha == 255))
    return AlphaStats(
        minimum=int(alpha.min()),
        maximum=int(alpha.max()),
        mean=float(alpha.mean()),
        transparent_count=transparent,
        semi_transparent_count=int(alpha.size) - transparent - opaque,
        opaque_count=opaque,
        total=int(alpha.size),
    )


def sweep_thresholds(
    buffer: PixelBuffer,
    geometry: SpriteGeometry,
    thresholds: Iterable[int] = DEFAULT_SWEEP_THRESHOLDS,
    fill_holes: bool = True,
) -> dict[int, int]:
    """Count contour points for each threshold.

    Corner optimization and simplification are disabled, so the counts
    are the raw traced contour lengths.

    Returns:
        Mapping of threshold to contour point count, in input order
    """
    results: dict[int, int] = {}
    for threshold in thresholds:
        config = ExtractionConfig(
            threshold_alpha=threshold,
            fill_holes=fill_holes,
            corner_optimization=False,
            simplification_tolerance=0.0,
        )
        extraction = ColliderPipeline(config).extract(buffer, geometry)
        results[threshold] = len(extraction.points)
    return results
