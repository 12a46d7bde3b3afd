"""Core processing algorithms for pixelcollider.

This module contains the pipeline stages, leaves first:

- Sampling (alpha values of a sprite region, via a readable copy if needed)
- Masking (alpha threshold, single-pass hole fill)
- Edge detection (solid cells touching empty cells or the border)
- Tracing (greedy eight-neighbour walk over edge cells)
- Simplification (collinear point removal, Douglas-Peucker)
- Mapping (grid cells to sprite-local units)
- Building (winding normalization, polygon / edge loop / fallback box)

All stages are designed to be:
- Stateless (a fresh grid and edge set per call)
- Pure (no side effects besides logging)
- Deterministic for the same pixels and settings

Key classes:
- PixelSampler: Reads a region of an image into a PixelBuffer
- ColliderPipeline: Runs every stage and attaches the result to a host
- InMemoryColliderHost: Dictionary-backed ColliderHost
"""

from pixelcollider.core.builder import (
    build_collider,
    ensure_counter_clockwise,
    fallback_box,
    is_usable_outline,
)
from pixelcollider.core.diagnostics import AlphaStats, analyze_alpha, sweep_thresholds
from pixelcollider.core.edges import find_edge_cells, is_edge_cell
from pixelcollider.core.geometry import (
    bounding_box,
    point_segment_distance,
    signed_area,
    turn,
    winding_direction,
)
from pixelcollider.core.host import ColliderHost, InMemoryColliderHost
from pixelcollider.core.mapper import grid_to_local, to_local
from pixelcollider.core.mask import build_mask, build_occupancy, fill_single_holes
from pixelcollider.core.pipeline import (
    ColliderPipeline,
    ColliderResult,
    ContourExtraction,
    StageCounts,
    extract_outline,
    generate_collider,
)
from pixelcollider.core.sampler import PixelSampler, readable_copy, sample_alpha
from pixelcollider.core.simplify import douglas_peucker, optimize_corners, simplify_contour
from pixelcollider.core.tracer import NEIGHBOR_OFFSETS, find_start_cell, trace_contour

__all__ = [
    # Pipeline classes
    "AlphaStats",
    "ColliderHost",
    "ColliderPipeline",
    "ColliderResult",
    "ContourExtraction",
    "InMemoryColliderHost",
    "NEIGHBOR_OFFSETS",
    "PixelSampler",
    "StageCounts",
    # Stage functions
    "analyze_alpha",
    "bounding_box",
    "build_collider",
    "build_mask",
    "build_occupancy",
    "douglas_peucker",
    "ensure_counter_clockwise",
    "extract_outline",
    "fallback_box",
    "fill_single_holes",
    "find_edge_cells",
    "find_start_cell",
    "generate_collider",
    "grid_to_local",
    "is_edge_cell",
    "is_usable_outline",
    "optimize_corners",
    "point_segment_distance",
    "readable_copy",
    "sample_alpha",
    "signed_area",
    "simplify_contour",
    "sweep_thresholds",
    "to_local",
    "trace_contour",
    "turn",
    "winding_direction",
]
