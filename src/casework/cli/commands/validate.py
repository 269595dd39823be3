"""Validate command for checking configuration files.

Checks a JSON configuration file in two phases: the file must parse and
match the schema, and the cabinet it describes must be buildable (a size on
the ladder with room for every feature).
"""

from pathlib import Path
from typing import Annotated

import typer

from casework.application.config import ConfigError, config_to_request, load_config
from casework.application.factory import get_factory
from casework.domain.exceptions import CaseworkError


def _display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            typer.echo(f"  {detail.get('path', 'unknown')}: {detail.get('message')}", err=True)
            value = detail.get("value")
            if value is not None and not isinstance(value, dict):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo(err=True)
    typer.echo("Validation failed.", err=True)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a cabinet configuration file.

    Checks the configuration file for:
    - JSON syntax errors
    - Schema validation errors (missing required fields, invalid types, etc.)
    - Sizes off the ladder and configurations with no room for a feature

    Exit codes:
        0 - Configuration is valid
        1 - Configuration has errors (cannot be used)

    Example:
        casework validate wall30.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    try:
        output = get_factory().create_generate_command().execute(config_to_request(config))
    except CaseworkError as e:
        typer.echo("Errors:", err=True)
        typer.echo(f"  cabinet: {e.message}", err=True)
        typer.echo(err=True)
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Cabinet: {output.cabinet.id} ({len(output.cut_list)} cut list rows)")
    typer.echo("Validation passed. Configuration is valid.")
