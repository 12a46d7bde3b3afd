"""Logging utilities for PixelCollider."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from pixelcollider.domain import OccupancyGrid

_HANDLER_MARK = "_pixelcollider_handler"


@dataclass
class ExtractionStats:
    """Statistics from one or more collider generations."""

    generated_count: int = 0
    fallback_count: int = 0
    open_contour_count: int = 0
    sampling_failures: int = 0
    failures: list[tuple[str, str]] = field(default_factory=list)


def _mark(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_MARK, True)
    return handler


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Calling this again replaces the handlers installed by a previous call.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(_mark(file_handler))

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(_mark(console_handler))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("pixelcollider")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class PipelineLogger:
    """Logger for stage diagnostics and generation statistics.

    Stage diagnostics are only emitted when ``debug`` is set; warnings about
    fallbacks and open contours are always emitted.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None, debug: bool = False) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("pixelcollider")
        self._debug = debug
        self._stats = ExtractionStats()

    @property
    def debug_enabled(self) -> bool:
        return self._debug

    def log_buffer(self, name: str, width: int, height: int, origin: tuple[int, int], threshold: int) -> None:
        """Log sampled buffer details."""
        if self._debug:
            self._logger.debug(
                "Pixel data sampled",
                sprite=name,
                width=width,
                height=height,
                origin=list(origin),
                threshold=threshold,
            )

    def log_mask(self, name: str, grid: OccupancyGrid, total: int) -> None:
        """Log occupancy summary with the first and last grid rows."""
        if self._debug:
            occupied = grid.occupied_count
            percent = (occupied / total * 100.0) if total else 0.0
            self._logger.debug(
                "Pixel mask created",
                sprite=name,
                occupied=occupied,
                total=total,
                percent=round(percent, 1),
                first_row=grid.row_string(0),
                last_row=grid.row_string(grid.height - 1),
            )

    def log_stage(self, name: str, stage: str, count: int) -> None:
        """Log the point count after a pipeline stage."""
        if self._debug:
            self._logger.debug("Stage complete", sprite=name, stage=stage, points=count)

    def log_bounds(
        self,
        name: str,
        bounds: tuple[float, float, float, float],
        expected_half_extents: tuple[float, float],
    ) -> None:
        """Log generated collider bounds next to the sprite's own bounds."""
        if self._debug:
            hx, hy = expected_half_extents
            self._logger.debug(
                "Collider bounds",
                sprite=name,
                bounds=[round(v, 3) for v in bounds],
                expected=[round(-hx, 3), round(-hy, 3), round(hx, 3), round(hy, 3)],
            )

    def log_no_edges(self, name: str, threshold: int) -> None:
        """Log that thresholding left nothing to trace."""
        self._logger.warning(
            "No edge pixels found, check the alpha threshold",
            sprite=name,
            threshold=threshold,
        )

    def log_open_contour(self, name: str, visited: int, edge_count: int) -> None:
        """Log a contour walk that stopped before closing."""
        self._logger.warning(
            "Contour walk did not close",
            sprite=name,
            visited=visited,
            edge_cells=edge_count,
        )
        self._stats.open_contour_count += 1

    def log_sampling_failed(self, name: str, reason: str) -> None:
        """Log that no pixel data could be read."""
        self._logger.error("Failed to read pixels", sprite=name, reason=reason)
        self._stats.sampling_failures += 1
        self._stats.failures.append((name, reason))

    def log_fallback(self, name: str, points: int) -> None:
        """Log fallback box creation."""
        self._logger.info("Creating fallback box collider", sprite=name, points=points)
        self._stats.fallback_count += 1

    def log_generated(self, name: str, kind: str, points: int) -> None:
        """Log a successfully attached collider."""
        self._logger.info("Generated collider", sprite=name, kind=kind, points=points)
        self._stats.generated_count += 1

    @property
    def stats(self) -> ExtractionStats:
        """Get current generation statistics."""
        return self._stats
