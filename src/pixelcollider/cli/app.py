"""CLI application entry point for pixelcollider.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError

from pixelcollider import __version__
from pixelcollider.cli.output import (
    console,
    print_alpha_stats,
    print_collider_summary,
    print_error,
    print_header,
    print_sprite_info,
    print_step,
    print_threshold_table,
)
from pixelcollider.config import (
    ColliderKind,
    ExtractionConfig,
    LoggingConfig,
    OpenContourPolicy,
    PixelColliderSettings,
    Preset,
    SpriteConfig,
)
from pixelcollider.core import (
    ColliderPipeline,
    InMemoryColliderHost,
    PixelSampler,
    analyze_alpha,
    sweep_thresholds,
)
from pixelcollider.core.diagnostics import DEFAULT_SWEEP_THRESHOLDS
from pixelcollider.domain import SpriteGeometry, SpriteRegion
from pixelcollider.exceptions import (
    ColliderSaveError,
    PixelColliderError,
    SpriteLoadError,
)
from pixelcollider.io import ColliderWriter, SpriteReader
from pixelcollider.utils import PipelineLogger, configure_logging

# Exit code when no pixel data could be read and only the fallback box was written
EXIT_NO_PIXEL_DATA = 2

# Create the Typer app
app = typer.Typer(
    name="pixelcollider",
    help="Generate collision shapes from pixel-art sprite alpha channels.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]PixelCollider[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate collision shapes from pixel-art sprite alpha channels."""


def parse_pair(text: str, option: str) -> tuple[float, float]:
    """Parse an ``x,y`` option value.

    Raises:
        typer.BadParameter: If the value is not two numbers
    """
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 2:
        raise typer.BadParameter(f"expected 'x,y', got '{text}'", param_hint=option)
    try:
        return (float(parts[0]), float(parts[1]))
    except ValueError as e:
        raise typer.BadParameter(f"non-numeric value in '{text}'", param_hint=option) from e


def build_extraction_config(preset: Preset | None, overrides: dict[str, Any]) -> ExtractionConfig:
    """Start from a preset (or defaults) and apply explicitly given options.

    Raises:
        ValidationError: If an override is out of range
    """
    base = preset.to_config() if preset is not None else ExtractionConfig()
    values = base.model_dump()
    values.update({k: v for k, v in overrides.items() if v is not None})
    return ExtractionConfig(**values)


def _resolve_region(reader: SpriteReader, rect: str | None) -> SpriteRegion:
    if rect is None:
        return reader.full_region
    return SpriteRegion.parse(rect)


@app.command()
def generate(
    image_path: Annotated[
        Path,
        typer.Argument(
            help="Path to the sprite image (PNG or any Pillow-readable format)",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}.collider.json)",
        ),
    ] = None,
    rect: Annotated[
        str | None,
        typer.Option(
            "--rect",
            "-r",
            help="Sprite rectangle 'x,y,width,height', y measured from the bottom (default: whole image)",
        ),
    ] = None,
    pivot: Annotated[
        str | None,
        typer.Option(
            "--pivot",
            help="Pivot 'x,y' in pixels from the sprite's bottom-left (default: center)",
        ),
    ] = None,
    ppu: Annotated[
        float,
        typer.Option(
            "--ppu",
            help="Pixels per local unit",
            min=0.0001,
        ),
    ] = 100.0,
    preset: Annotated[
        Preset | None,
        typer.Option(
            "--preset",
            "-p",
            help="Start from a settings preset",
            case_sensitive=False,
        ),
    ] = None,
    threshold: Annotated[
        int | None,
        typer.Option(
            "--threshold",
            "-t",
            help="Alpha threshold (0-255); pixels above it are solid",
            min=0,
            max=255,
        ),
    ] = None,
    tolerance: Annotated[
        float | None,
        typer.Option(
            "--tolerance",
            help="Simplification tolerance in local units (0 disables)",
            min=0.0,
        ),
    ] = None,
    kind: Annotated[
        ColliderKind | None,
        typer.Option(
            "--kind",
            "-k",
            help="Collider shape to emit",
            case_sensitive=False,
        ),
    ] = None,
    fill_holes: Annotated[
        bool | None,
        typer.Option(
            "--fill-holes/--no-fill-holes",
            help="Fill isolated single-pixel holes",
            show_default=False,
        ),
    ] = None,
    corners: Annotated[
        bool | None,
        typer.Option(
            "--corners/--no-corners",
            help="Drop points on straight runs",
            show_default=False,
        ),
    ] = None,
    open_contours: Annotated[
        OpenContourPolicy | None,
        typer.Option(
            "--open-contours",
            help="Keep contours whose walk did not close, or fall back to the box",
            case_sensitive=False,
        ),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            help="Log per-stage diagnostics",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Generate a collider for a sprite and write it as JSON.

    Example:
        pixelcollider generate hero.png --ppu 16

    This will create hero.collider.json with a counter-clockwise polygon in
    sprite-local units, or a box covering the sprite if no outline could be
    traced.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not image_path.is_file():
        print_error(
            f"Input file not found: {image_path}",
            details=f"The file '{image_path}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)

    pivot_px = parse_pair(pivot, "--pivot") if pivot is not None else None

    try:
        settings = PixelColliderSettings(
            extraction=build_extraction_config(
                preset,
                {
                    "threshold_alpha": threshold,
                    "simplification_tolerance": tolerance,
                    "collider_kind": kind,
                    "fill_holes": fill_holes,
                    "corner_optimization": corners,
                    "open_contour_policy": open_contours,
                },
            ),
            sprite=SpriteConfig(pixels_per_unit=ppu, pivot=pivot_px),
            logging=LoggingConfig(
                debug=debug or preset == Preset.DEBUG,
                log_file=log_file,
                log_level=log_level if not quiet else "ERROR",
            ),
        )
    except ValidationError as e:
        print_error("Invalid settings", details=str(e))
        raise typer.Exit(code=1) from None

    if not quiet:
        print_header(__version__)

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level="DEBUG" if settings.logging.debug else settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    pipeline_logger = PipelineLogger(logger, debug=settings.logging.debug)

    try:
        if not quiet:
            print_step("Loading sprite")

        with SpriteReader(image_path) as reader:
            region = _resolve_region(reader, rect)
            geometry = SpriteGeometry.for_region(
                region,
                pixels_per_unit=settings.sprite.pixels_per_unit,
                pivot=settings.sprite.pivot,
            )
            if not quiet:
                print_sprite_info(str(image_path), reader.mode, reader.size, region)
                print_step("Tracing outline")

            host = InMemoryColliderHost()
            pipeline = ColliderPipeline(settings.extraction, pipeline_logger)
            result = pipeline.generate(
                reader.image,
                host,
                image_path.stem,
                region=region,
                geometry=geometry,
            )

        output_path = output if output is not None else ColliderWriter.get_collider_path(image_path)
        ColliderWriter(output_path).save(
            result.collider,
            metadata={
                "source": image_path.name,
                "region": list(region.to_tuple()),
                "pivot": list(geometry.pivot),
                "pixels_per_unit": geometry.pixels_per_unit,
                "closed": result.closed,
                "success": result.success,
                "settings": settings.extraction.model_dump(mode="json"),
            },
        )

        if not quiet:
            print_collider_summary(result, str(output_path), verbose)

    except FileNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None
    except SpriteLoadError as e:
        print_error(f"Could not load sprite: {e.reason}")
        raise typer.Exit(code=1) from None
    except ColliderSaveError as e:
        print_error(f"Could not save collider: {e.reason}")
        raise typer.Exit(code=1) from None
    except PixelColliderError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if not result.success:
        raise typer.Exit(code=EXIT_NO_PIXEL_DATA)


@app.command()
def analyze(
    image_path: Annotated[
        Path,
        typer.Argument(help="Path to the sprite image", show_default=False),
    ],
    rect: Annotated[
        str | None,
        typer.Option(
            "--rect",
            "-r",
            help="Sprite rectangle 'x,y,width,height' (default: whole image)",
        ),
    ] = None,
) -> None:
    """Show the alpha distribution of a sprite."""
    try:
        with SpriteReader(image_path) as reader:
            region = _resolve_region(reader, rect)
            print_sprite_info(str(image_path), reader.mode, reader.size, region)
            buffer = PixelSampler().sample(reader.image, region, image_path.stem)
    except FileNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None
    except PixelColliderError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if buffer is None:
        print_error("Could not read pixel data from the sprite region")
        raise typer.Exit(code=EXIT_NO_PIXEL_DATA)

    print_alpha_stats(analyze_alpha(buffer))


@app.command()
def thresholds(
    image_path: Annotated[
        Path,
        typer.Argument(help="Path to the sprite image", show_default=False),
    ],
    rect: Annotated[
        str | None,
        typer.Option(
            "--rect",
            "-r",
            help="Sprite rectangle 'x,y,width,height' (default: whole image)",
        ),
    ] = None,
    threshold: Annotated[
        list[int] | None,
        typer.Option(
            "--threshold",
            "-t",
            help="Threshold to test (repeatable, default: 0 50 100 150 200 250)",
            min=0,
            max=255,
        ),
    ] = None,
    ppu: Annotated[
        float,
        typer.Option("--ppu", help="Pixels per local unit", min=0.0001),
    ] = 100.0,
) -> None:
    """Compare raw contour sizes across alpha thresholds."""
    try:
        with SpriteReader(image_path) as reader:
            region = _resolve_region(reader, rect)
            print_sprite_info(str(image_path), reader.mode, reader.size, region)
            buffer = PixelSampler().sample(reader.image, region, image_path.stem)
    except FileNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None
    except PixelColliderError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if buffer is None:
        print_error("Could not read pixel data from the sprite region")
        raise typer.Exit(code=EXIT_NO_PIXEL_DATA)

    geometry = SpriteGeometry.for_region(region, pixels_per_unit=ppu)
    values = threshold if threshold else list(DEFAULT_SWEEP_THRESHOLDS)
    print_threshold_table(sweep_thresholds(buffer, geometry, values))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
