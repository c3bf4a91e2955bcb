"""Typer CLI for room layout checks."""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from roomplanner.application.config import (
    SAMPLE_LAYOUT,
    ConfigError,
    config_to_session,
    load_config,
)
from roomplanner.application.session import LayoutSession
from roomplanner.cli.commands import display_load_error, validate_command
from roomplanner.infrastructure import (
    CollisionReportFormatter,
    GeometryReportFormatter,
    JsonReportExporter,
    RoomDiagramFormatter,
)


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


ConfigArgument = Annotated[
    Path,
    typer.Argument(help="Path to the JSON layout configuration"),
]
FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", help="Output format"),
]


app = typer.Typer(
    name="roomplanner",
    help="Check furniture layouts against walls, openings and each other.",
)

app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Room layout planner."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _load_session(config_file: Path) -> LayoutSession:
    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)
    return config_to_session(config)


@app.command()
def geometry(
    config_file: ConfigArgument,
    output_format: FormatOption = OutputFormat.TEXT,
) -> None:
    """Show wall segments, room bounds and opening clearance zones."""
    session = _load_session(config_file)
    if output_format == OutputFormat.JSON:
        data = JsonReportExporter().export_geometry(session.geometry)
        typer.echo(json.dumps(data, indent=2))
    else:
        typer.echo(GeometryReportFormatter().format(session.geometry, session.room.name))


@app.command()
def check(
    config_file: ConfigArgument,
    output_format: FormatOption = OutputFormat.TEXT,
) -> None:
    """Report collisions for every placed item.

    Exit codes:
        0 - No collisions
        1 - Configuration could not be loaded
        2 - At least one item collides with furniture, a wall or an opening
    """
    session = _load_session(config_file)
    report = session.collision_report()

    if output_format == OutputFormat.JSON:
        typer.echo(JsonReportExporter().export(session, report))
    else:
        typer.echo(CollisionReportFormatter().format(session.items, report))

    if any(report.values()):
        raise typer.Exit(code=2)


@app.command()
def plan(config_file: ConfigArgument) -> None:
    """Show an ASCII plan of the room and its furniture."""
    session = _load_session(config_file)
    typer.echo(RoomDiagramFormatter().format(session))


@app.command()
def sample(
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write to this file instead of stdout"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing file"),
    ] = False,
) -> None:
    """Print the sample living room configuration."""
    content = json.dumps(SAMPLE_LAYOUT, indent=2)
    if output is None:
        typer.echo(content)
        return

    if output.exists() and not force:
        typer.echo(f"Error: {output} already exists. Use --force to overwrite.", err=True)
        raise typer.Exit(code=1)
    output.write_text(content + "\n", encoding="utf-8")
    typer.echo(f"Created {output}")


if __name__ == "__main__":
    app()
