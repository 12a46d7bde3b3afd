"""Collider generation orchestration.

This module chains the pipeline stages for one sprite:

    sample -> mask -> edges -> trace -> corners -> simplify -> map -> build

and hands the result to a ColliderHost. Every failure along the way
degrades to the fallback box; the only failure reported back to the caller
is that no pixel data could be read at all.

Key components:
- ColliderPipeline: Runs the stages with one ExtractionConfig
- generate_collider: One-shot convenience wrapper
"""

from collections.abc import Hashable
from dataclasses import dataclass, field

from PIL import Image

from pixelcollider.config import ExtractionConfig, OpenContourPolicy
from pixelcollider.core.builder import build_collider, fallback_box, is_usable_outline
from pixelcollider.core.edges import find_edge_cells
from pixelcollider.core.geometry import bounding_box
from pixelcollider.core.host import ColliderHost
from pixelcollider.core.mapper import grid_to_local
from pixelcollider.core.mask import build_mask
from pixelcollider.core.sampler import PixelSampler
from pixelcollider.core.simplify import optimize_corners, simplify_contour
from pixelcollider.core.tracer import trace_contour
from pixelcollider.domain import (
    BoxCollider,
    ColliderSpec,
    Contour,
    LocalPoint,
    PixelBuffer,
    SpriteGeometry,
    SpriteRegion,
)
from pixelcollider.exceptions import InvalidRegionError
from pixelcollider.utils import PipelineLogger


@dataclass
class StageCounts:
    """Point counts after each stage of one extraction."""

    edge_cells: int = 0
    ordered: int = 0
    after_corners: int = 0
    after_simplify: int = 0


@dataclass
class ContourExtraction:
    """Outline extracted from one pixel buffer.

    Attributes:
        points: Final outline in local units, walk order
        contour: The traced contour in grid cells
        counts: Point counts per stage
    """

    points: list[LocalPoint]
    contour: Contour
    counts: StageCounts = field(default_factory=StageCounts)

    @property
    def closed(self) -> bool:
        return self.contour.is_closed


@dataclass
class ColliderResult:
    """Outcome of one collider generation.

    Attributes:
        success: False only when no pixel data could be read
        collider: The shape attached to the host
        closed: Whether the traced contour formed a closed ring
        used_fallback: Whether the fallback box was attached
        counts: Point counts per stage (all zero when sampling failed)
    """

    success: bool
    collider: ColliderSpec
    closed: bool = False
    used_fallback: bool = False
    counts: StageCounts = field(default_factory=StageCounts)


class ColliderPipeline:
    """Turns sprite pixels into a collider with one configuration.

    Example:
        pipeline = ColliderPipeline(ExtractionConfig.precise())
        result = pipeline.generate(image, host, "hero", region=region)
        if not result.success:
            ...  # no readable pixels, a fallback box was attached
    """

    def __init__(
        self,
        config: ExtractionConfig | None = None,
        logger: PipelineLogger | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            config: Extraction settings (defaults if None)
            logger: Pipeline logger (a non-debug logger if None)
        """
        self.config = config if config is not None else ExtractionConfig()
        self.logger = logger if logger is not None else PipelineLogger()
        self.sampler = PixelSampler(self.logger)

    def extract(
        self,
        buffer: PixelBuffer,
        geometry: SpriteGeometry,
        name: str = "sprite",
    ) -> ContourExtraction:
        """Extract a local-space outline from a pixel buffer.

        Args:
            buffer: Sampled alpha values, row 0 at the bottom
            geometry: Pivot and pixel density of the sprite
            name: Sprite name used in log events

        Returns:
            ContourExtraction; its points list is empty when nothing
            passed the alpha threshold
        """
        config = self.config
        counts = StageCounts()

        self.logger.log_buffer(
            name, buffer.width, buffer.height, buffer.origin, config.threshold_alpha
        )

        grid = build_mask(buffer, config.threshold_alpha, config.fill_holes)
        self.logger.log_mask(name, grid, buffer.pixel_count)

        edge_cells = find_edge_cells(grid)
        counts.edge_cells = len(edge_cells)
        self.logger.log_stage(name, "edges", counts.edge_cells)

        if not edge_cells:
            self.logger.log_no_edges(name, config.threshold_alpha)
            return ContourExtraction(points=[], contour=Contour(points=[]), counts=counts)

        contour = trace_contour(edge_cells)
        counts.ordered = len(contour)
        self.logger.log_stage(name, "trace", counts.ordered)
        if len(contour) >= 3 and not contour.is_closed:
            self.logger.log_open_contour(name, len(contour), contour.edge_count)

        points = list(contour.points)
        if config.corner_optimization:
            points = optimize_corners(points, config.collinear_epsilon)
        counts.after_corners = len(points)
        self.logger.log_stage(name, "corners", counts.after_corners)

        if config.simplification_tolerance > 0:
            grid_tolerance = config.simplification_tolerance * geometry.pixels_per_unit
            points = simplify_contour(points, grid_tolerance)
        counts.after_simplify = len(points)
        self.logger.log_stage(name, "simplify", counts.after_simplify)

        local_points = grid_to_local(points, geometry)
        if local_points:
            self.logger.log_bounds(name, bounding_box(local_points), geometry.half_extents)

        return ContourExtraction(points=local_points, contour=contour, counts=counts)

    def build(self, extraction: ContourExtraction, geometry: SpriteGeometry) -> ColliderSpec:
        """Build the collider for an extraction, applying the open-contour policy."""
        if (
            self.config.open_contour_policy == OpenContourPolicy.FALLBACK
            and not extraction.closed
        ):
            return fallback_box(geometry)
        return build_collider(extraction.points, self.config.collider_kind, geometry)

    def generate(
        self,
        image: Image.Image,
        host: ColliderHost,
        host_id: Hashable,
        region: SpriteRegion | None = None,
        geometry: SpriteGeometry | None = None,
        name: str | None = None,
    ) -> ColliderResult:
        """Sample an image region and attach its collider to a host.

        Args:
            image: Source image in any Pillow mode
            host: Receiver of the collision shape
            host_id: Host object to replace the shape on
            region: Sprite rectangle in y-up texture pixels (None = whole image)
            geometry: Pivot and pixel density (None = centered pivot, 100 ppu)
            name: Sprite name used in log events (defaults to the host id)

        Returns:
            ColliderResult describing the attached shape

        Raises:
            InvalidRegionError: If the image has no pixels and no geometry
                is given, so the fallback box cannot be sized
        """
        name = name if name is not None else str(host_id)
        width, height = image.size
        if region is None and width > 0 and height > 0:
            region = SpriteRegion.full(width, height)
        if geometry is None:
            if region is None:
                raise InvalidRegionError(
                    f"image has no pixels ({width}x{height}) and no geometry was given"
                )
            geometry = SpriteGeometry.for_region(region)

        if region is None:
            self.logger.log_sampling_failed(name, f"image has no pixels ({width}x{height})")
            buffer = None
        else:
            buffer = self.sampler.sample(image, region, name)
        return self.generate_from_buffer(buffer, geometry, host, host_id, name)

    def generate_from_buffer(
        self,
        buffer: PixelBuffer | None,
        geometry: SpriteGeometry,
        host: ColliderHost,
        host_id: Hashable,
        name: str | None = None,
    ) -> ColliderResult:
        """Attach the collider for an already sampled buffer.

        A None buffer stands for failed sampling: the fallback box is
        attached and the result reports ``success=False``.
        """
        name = name if name is not None else str(host_id)

        if buffer is None:
            result = ColliderResult(
                success=False, collider=fallback_box(geometry), used_fallback=True
            )
        else:
            extraction = self.extract(buffer, geometry, name)
            collider = self.build(extraction, geometry)
            result = ColliderResult(
                success=True,
                collider=collider,
                closed=extraction.closed,
                used_fallback=isinstance(collider, BoxCollider),
                counts=extraction.counts,
            )

        host.remove_colliders(host_id)
        host.attach_collider(host_id, result.collider)

        if result.used_fallback:
            usable = 0 if buffer is None else result.counts.after_simplify
            self.logger.log_fallback(name, usable)
        else:
            self.logger.log_generated(name, result.collider.kind, len(result.collider.points))

        return result


def extract_outline(
    buffer: PixelBuffer,
    geometry: SpriteGeometry,
    config: ExtractionConfig | None = None,
) -> list[LocalPoint]:
    """Outline of a buffer in local units, or [] when it is unusable."""
    points = ColliderPipeline(config).extract(buffer, geometry).points
    return points if is_usable_outline(points) else []


def generate_collider(
    image: Image.Image,
    host: ColliderHost,
    host_id: Hashable,
    region: SpriteRegion | None = None,
    geometry: SpriteGeometry | None = None,
    config: ExtractionConfig | None = None,
    logger: PipelineLogger | None = None,
) -> ColliderResult:
    """Generate and attach a collider with a throwaway pipeline."""
    pipeline = ColliderPipeline(config, logger)
    return pipeline.generate(image, host, host_id, region=region, geometry=geometry)
