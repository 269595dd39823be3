"""Typer CLI for cabinet generation and drawings."""

import logging
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from casework.application import CabinetOutput, CabinetRequest, get_factory
from casework.application.config import (
    ConfigError,
    config_to_request,
    load_config,
    resolve_formats,
)
from casework.cli.commands import validate_command
from casework.domain import CabinetConfiguration, MaterialSpec
from casework.domain.exceptions import CaseworkError
from casework.domain.services import DrawOptions, get_available_heights, get_available_widths
from casework.domain.value_objects import (
    CabinetArchetype,
    DoorStyle,
    DrawingTier,
    ViewMode,
)
from casework.infrastructure.exporters import (
    CanvasCommandExporter,
    DxfExporter,
    ExporterRegistry,
    ExportManager,
    JsonExporter,
    SvgExporter,
)

REPORT_FORMATS = ("cutlist", "machining", "materials", "dimensions", "json", "all")
DRAW_FORMATS = ("svg", "canvas", "dxf")

app = typer.Typer(
    name="casework",
    help="Generate cabinet cut lists, machining and technical drawings.",
)

# Register validate command
app.command(name="validate")(validate_command)


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


def _build_request(
    archetype: str | None,
    width: float | None,
    height: float | None,
    shelves: int | None,
    no_shelf: bool,
    door_style: DoorStyle,
    thickness: float,
) -> CabinetRequest:
    if archetype is None or width is None:
        _fail("--type and --width are required unless --config is given")
    return CabinetRequest(
        archetype=archetype,
        width=width,
        height=height,
        material=MaterialSpec(thickness=thickness),
        configuration=CabinetConfiguration(
            has_adjustable_shelf=not no_shelf,
            shelf_count=shelves,
            door_style=door_style,
        ),
    )


def _generate(request: CabinetRequest) -> CabinetOutput:
    try:
        return get_factory().create_generate_command().execute(request)
    except CaseworkError as e:
        _fail(e.message)


def _print_report(output: CabinetOutput, output_format: str) -> None:
    factory = get_factory()
    sections = {
        "dimensions": lambda: factory.get_dimensions_formatter().format(output.dimensions),
        "cutlist": lambda: factory.get_cut_list_formatter().format(output.cut_list),
        "machining": lambda: factory.get_machining_formatter().format(output.machining),
        "materials": lambda: factory.get_material_usage_formatter().format(
            output.material_usage
        ),
    }
    if output_format == "json":
        typer.echo(JsonExporter().export_string(output))
    elif output_format == "all":
        typer.echo("\n\n".join(render() for render in sections.values()))
    else:
        typer.echo(sections[output_format]())


def _export_files(
    formats: list[str],
    output_dir: Path,
    project_name: str,
    output: CabinetOutput,
    view: ViewMode = ViewMode.ELEVATION,
    tier: DrawingTier = DrawingTier.DETAILED,
) -> None:
    """Write every requested format into ``output_dir``."""
    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    drawing_options = {"view": view, "tier": tier}
    manager = ExportManager(output_dir)
    try:
        files = manager.export_all(
            formats,
            output,
            project_name,
            exporter_options={"svg": drawing_options, "canvas": drawing_options},
        )
    except OSError as e:
        _fail(f"Export error: {e}")

    typer.echo("\nExported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Parametric base, wall and tall cabinets."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


@app.command()
def sizes(
    archetype: Annotated[
        str | None, typer.Option("--type", help="Cabinet type: base, wall or tall")
    ] = None,
) -> None:
    """List the supported widths and heights."""
    try:
        archetypes = [CabinetArchetype.parse(archetype)] if archetype else list(CabinetArchetype)
    except CaseworkError as e:
        _fail(e.message)

    for kind in archetypes:
        widths = ", ".join(f"{w:g}" for w in get_available_widths(kind))
        heights = ", ".join(f"{h:g}" for h in get_available_heights(kind))
        typer.echo(kind.value.upper())
        typer.echo(f"  Widths:  {widths}")
        typer.echo(f"  Heights: {heights}")


@app.command()
def generate(
    archetype: Annotated[
        str | None, typer.Option("--type", help="Cabinet type: base, wall or tall")
    ] = None,
    width: Annotated[
        float | None, typer.Option("--width", "-w", help="Nominal width in inches")
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", "-h", help="Nominal height in inches (wall and tall)"),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    shelves: Annotated[
        int | None, typer.Option("--shelves", help="Adjustable shelf count")
    ] = None,
    no_shelf: Annotated[
        bool, typer.Option("--no-shelf", help="Leave out adjustable shelves")
    ] = False,
    door_style: Annotated[
        DoorStyle, typer.Option("--door-style", help="Door style")
    ] = DoorStyle.SLAB,
    thickness: Annotated[
        float, typer.Option("--thickness", "-t", help="Carcass thickness in inches")
    ] = 0.75,
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Console output: cutlist, machining, materials, dimensions, json, all",
        ),
    ] = "all",
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated files to write: json, svg, dxf, canvas, or all",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None, typer.Option("--output-dir", help="Directory for exported files")
    ] = None,
    project_name: Annotated[
        str, typer.Option("--project-name", help="Base name for exported files")
    ] = "cabinet",
) -> None:
    """Generate a cabinet and print its cut list, machining and materials.

    With --config the cabinet comes from the file and the other sizing
    options are ignored; the file's output section is used when it names
    an output_dir and --output-formats is not given.
    """
    output_format = output_format.lower()
    if output_format not in REPORT_FORMATS:
        _fail(f"Unknown format '{output_format}'. Choose from: {', '.join(REPORT_FORMATS)}")

    config = None
    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            _fail(e.message)
        request = config_to_request(config)
    else:
        try:
            request = _build_request(
                archetype, width, height, shelves, no_shelf, door_style, thickness
            )
        except ValueError as e:
            _fail(str(e))

    output = _generate(request)
    _print_report(output, output_format)

    if output_formats is not None:
        if output_formats.strip().lower() == "all":
            formats = ExporterRegistry.available_formats()
        else:
            formats = [f.strip().lower() for f in output_formats.split(",") if f.strip()]
        _export_files(formats, output_dir or Path("."), project_name, output)
    elif config is not None and config.output.output_dir is not None:
        _export_files(
            resolve_formats(config.output),
            Path(config.output.output_dir),
            config.output.project_name,
            output,
            config.output.view,
            config.output.tier,
        )


@app.command()
def draw(
    archetype: Annotated[
        str, typer.Option("--type", help="Cabinet type: base, wall or tall")
    ],
    width: Annotated[float, typer.Option("--width", "-w", help="Nominal width in inches")],
    height: Annotated[
        float | None,
        typer.Option("--height", "-h", help="Nominal height in inches (wall and tall)"),
    ] = None,
    view: Annotated[ViewMode, typer.Option("--view", help="View to draw")] = ViewMode.ELEVATION,
    tier: Annotated[
        DrawingTier, typer.Option("--tier", help="Drawing tier")
    ] = DrawingTier.DETAILED,
    draw_format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: svg, canvas or dxf")
    ] = "svg",
    output_path: Annotated[
        Path | None, typer.Option("--output", "-o", help="Output file (default: stdout)")
    ] = None,
    scale: Annotated[float, typer.Option("--scale", help="Pixels per inch (basic tier)")] = 8.0,
    offset_x: Annotated[float, typer.Option("--offset-x", help="Left margin (basic tier)")] = 100.0,
    offset_y: Annotated[float, typer.Option("--offset-y", help="Top margin (basic tier)")] = 100.0,
    hide_internals: Annotated[
        bool, typer.Option("--hide-internals", help="Omit shelves, grooves and hardware")
    ] = False,
) -> None:
    """Draw one view of a cabinet as SVG, canvas commands or DXF."""
    draw_format = draw_format.lower()
    if draw_format not in DRAW_FORMATS:
        _fail(f"Unknown format '{draw_format}'. Choose from: {', '.join(DRAW_FORMATS)}")
    if draw_format == "dxf" and tier == DrawingTier.BASIC:
        _fail("DXF drawings are only available at the detailed tier")

    output = _generate(CabinetRequest(archetype=archetype, width=width, height=height))
    options = DrawOptions(
        scale=scale,
        offset_x=offset_x,
        offset_y=offset_y,
        show_internals=not hide_internals,
    )
    if draw_format == "svg":
        exporter = SvgExporter(view=view, tier=tier, options=options)
    elif draw_format == "canvas":
        exporter = CanvasCommandExporter(view=view, tier=tier, options=options, indent=2)
    else:
        exporter = DxfExporter(mode="drawing", view=view, show_internals=not hide_internals)

    if output_path is None:
        typer.echo(exporter.export_string(output))
        return
    try:
        exporter.export(output, output_path)
    except OSError as e:
        _fail(f"Export error: {e}")
    typer.echo(f"Wrote {tier.value} {view.value} {draw_format.upper()} to {output_path}")


if __name__ == "__main__":
    app()
