"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from pixelcollider.core import AlphaStats, ColliderResult
from pixelcollider.domain import BoxCollider, SpriteRegion

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_WARN = "!"  # Degraded result
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]PixelCollider[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_sprite_info(image_path: str, mode: str, size: tuple[int, int], region: SpriteRegion) -> None:
    """Print sprite image information.

    Args:
        image_path: Path to the image file
        mode: Pillow image mode
        size: Image width and height
        region: Sprite region being processed
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(image_path)
    line1.append(f" ({mode})")
    console.print(line1)
    x, y, w, h = region.to_tuple()
    console.print(f"  {size[0]}x{size[1]} px {SYM_DOT} region {w}x{h} at ({x}, {y})")


def print_collider_summary(result: ColliderResult, output_path: str | None, verbose: bool) -> None:
    """Print the generated collider and where it was written.

    Args:
        result: Pipeline result
        output_path: Path of the written JSON file, if any
        verbose: Whether to list per-stage point counts and vertices
    """
    collider = result.collider
    if not result.success:
        console.print(
            f"\n[bold yellow]{SYM_WARN} No usable pixel data[/bold yellow] "
            f"{SYM_DOT} fallback box attached"
        )
    elif isinstance(collider, BoxCollider):
        console.print(f"\n[bold yellow]{SYM_WARN} Fallback box[/bold yellow] {SYM_DOT} outline unusable")
    else:
        closed = "closed" if result.closed else "[yellow]open[/yellow]"
        console.print(
            f"\n[bold green]{SYM_OK} {collider.kind}[/bold green] "
            f"{SYM_DOT} {len(collider.points)} points {SYM_DOT} {closed}"
        )

    if isinstance(collider, BoxCollider):
        hx, hy = collider.half_extents
        console.print(f"  half extents ({hx:.4f}, {hy:.4f})")

    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)

    if verbose:
        counts = result.counts
        console.print(
            f"  edges {counts.edge_cells} {SYM_DOT} traced {counts.ordered} {SYM_DOT} "
            f"corners {counts.after_corners} {SYM_DOT} simplified {counts.after_simplify}"
        )
        if not isinstance(collider, BoxCollider):
            for x, y in collider.points:
                console.print(f"    ({x:.4f}, {y:.4f})")


def print_alpha_stats(stats: AlphaStats) -> None:
    """Print the alpha distribution of a sprite.

    Args:
        stats: Alpha statistics from analyze_alpha
    """
    console.print("\n[bold]Alpha[/bold]\n")
    console.print(f"  Range                 {stats.minimum}-{stats.maximum}")
    console.print(f"  Mean                  {stats.mean:.1f}")
    console.print(f"  Transparent           {stats.transparent_count}/{stats.total}")
    console.print(f"  Semi-transparent      {stats.semi_transparent_count}/{stats.total}")
    console.print(f"  Opaque                {stats.opaque_count}/{stats.total}")


def print_threshold_table(results: dict[int, int]) -> None:
    """Print contour point counts per alpha threshold.

    Args:
        results: Mapping of threshold to contour point count
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Threshold", justify="right")
    table.add_column("Contour points", justify="right")
    for threshold, count in results.items():
        style = "red" if count < 3 else ""
        table.add_row(str(threshold), f"[{style}]{count}[/{style}]" if style else str(count))
    console.print()
    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
