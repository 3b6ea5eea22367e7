"""Typer CLI for wardrobe layout and production tools."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from wardrobes.application import BuildProductionCommand
from wardrobes.application.config import (
    ConfigError,
    config_to_module_config,
    config_to_overrides,
    config_to_production_items,
    config_to_shapes,
    load_canvas_snapshot,
    load_production_input,
)
from wardrobes.domain import calculate_section_widths
from wardrobes.domain.services import (
    get_carcass_bounds,
    get_click_target,
    get_shelf_bounds,
    hit_test_shapes,
)
from wardrobes.domain.value_objects import Point2D
from wardrobes.infrastructure import (
    BoundsJsonExporter,
    CadGroupFormatter,
    SectionLayoutFormatter,
)

OUTPUT_FORMATS = ("text", "csv")

app = typer.Typer(
    name="wardrobes",
    help="Wardrobe carcass geometry and production panel layout.",
)


def _display_config_error(error: ConfigError) -> None:
    """Print a ConfigError to stderr.

    Args:
        error: The ConfigError to display
    """
    typer.echo(f"Error: {error.message}", err=True)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Wardrobe carcass geometry and production panel layout."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


@app.command()
def sections(
    width: Annotated[float, typer.Option("--width", "-w", help="Carcass width in mm")] = 1200,
    thickness: Annotated[float, typer.Option("--thickness", "-t", help="Panel thickness in mm")] = 18,
    posts: Annotated[int, typer.Option("--posts", "-p", help="Number of center posts")] = 0,
    position: Annotated[
        list[float] | None,
        typer.Option(
            "--position",
            help="Custom post position from the inner left edge in mm (repeat per post)",
        ),
    ] = None,
) -> None:
    """Show section widths and post positions for a carcass.

    Example:
        wardrobes sections --width 2400 --posts 2
    """
    result = calculate_section_widths(width, thickness, posts, position or None)
    typer.echo(SectionLayoutFormatter().format(result))


@app.command()
def production(
    input_file: Annotated[
        Path,
        typer.Argument(help="Path to the production input JSON file"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, csv"),
    ] = "text",
    gap: Annotated[
        float | None,
        typer.Option("--gap", "-g", help="Gap between panels in mm (overrides the file)"),
    ] = None,
) -> None:
    """Group production panels by unit and print the cutting grid.

    Example:
        wardrobes production production.json --format csv
    """
    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    try:
        document = load_production_input(input_file)
    except ConfigError as e:
        _display_config_error(e)
        raise typer.Exit(code=1)

    result = BuildProductionCommand().execute(
        config_to_production_items(document),
        config_to_overrides(document),
        document.deleted_panels,
        gap if gap is not None else document.gap_mm,
    )

    formatter = CadGroupFormatter()
    if output_format == "csv":
        typer.echo(formatter.format_csv(result.groups, result.overrides), nl=False)
        return

    typer.echo(formatter.format(result.groups, result.overrides, result.gap_mm))
    typer.echo()
    typer.echo(
        f"Total panels: {result.stats.total_panels} "
        f"(shutters: {result.stats.shutter_count}, lofts: {result.stats.loft_count})"
    )


@app.command()
def bounds(
    snapshot_file: Annotated[
        Path,
        typer.Argument(help="Path to the canvas snapshot JSON file"),
    ],
    shelf: Annotated[
        str | None,
        typer.Option("--shelf", help="Shelf id, e.g. MOD-SHELF-1-2"),
    ] = None,
    carcass: Annotated[
        bool,
        typer.Option("--carcass", help="Show the center post drag range"),
    ] = False,
) -> None:
    """Show the drag bounds of a shelf or of the center posts.

    Example:
        wardrobes bounds canvas.json --shelf MOD-SHELF-2-1
    """
    if (shelf is not None) == carcass:
        typer.echo("Specify exactly one of --shelf or --carcass", err=True)
        raise typer.Exit(code=1)

    try:
        snapshot = load_canvas_snapshot(snapshot_file)
    except ConfigError as e:
        _display_config_error(e)
        raise typer.Exit(code=1)

    config = config_to_module_config(snapshot.module)
    shapes = config_to_shapes(snapshot)

    if shelf is not None:
        result = get_shelf_bounds(config, shapes, shelf)
    else:
        result = get_carcass_bounds(config, shapes)

    typer.echo(BoundsJsonExporter().export(result))


@app.command()
def hit(
    snapshot_file: Annotated[
        Path,
        typer.Argument(help="Path to the canvas snapshot JSON file"),
    ],
    x: Annotated[float, typer.Option("--x", help="Pointer x in mm")],
    y: Annotated[float, typer.Option("--y", help="Pointer y in mm")],
    grid: Annotated[float, typer.Option("--grid", help="Grid size in mm")] = 10,
) -> None:
    """Show which shape and which carcass part a click at (x, y) hits."""
    try:
        snapshot = load_canvas_snapshot(snapshot_file)
    except ConfigError as e:
        _display_config_error(e)
        raise typer.Exit(code=1)

    config = config_to_module_config(snapshot.module)
    shapes = config_to_shapes(snapshot)

    shape = hit_test_shapes(x, y, shapes, grid)
    target = get_click_target(Point2D(x, y), config, shapes)

    data = {
        "shape": None if shape is None else {"id": shape.id, "role": shape.ref.role.value},
        "target": {
            "type": target.type.value,
            "panel_id": target.panel_id,
            "post_index": target.post_index,
            "section_index": target.section_index,
            "section_type": target.section_type.value if target.section_type else None,
            "shelf_count": target.shelf_count,
        },
    }
    typer.echo(json.dumps(data, indent=2))


if __name__ == "__main__":
    app()
