"""Validate command for checking layout configuration files.

This module provides the `validate` command, which loads a layout
configuration and runs the advisory checks on it.
"""

from pathlib import Path
from typing import Annotated

import typer

from roomplanner.application.config import (
    ConfigError,
    ConfigErrorType,
    ValidationResult,
    load_config,
    validate_config,
)


def display_load_error(error: ConfigError) -> None:
    """Print a configuration loading error to stderr."""
    typer.echo("Errors:", err=True)
    if error.error_type == ConfigErrorType.FILE_NOT_FOUND:
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == ConfigErrorType.JSON_PARSE:
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            typer.echo(
                f"    Line {line}, Column {column}: {detail.get('message', 'Unknown error')}",
                err=True,
            )
    elif error.error_type == ConfigErrorType.VALIDATION:
        for detail in error.details:
            typer.echo(f"  {detail.get('path', 'unknown')}: {detail.get('message')}", err=True)
            if detail.get("value") is not None:
                typer.echo(f"    Value: {detail['value']!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def _display_validation_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON layout configuration to validate"),
    ],
) -> None:
    """Validate a layout configuration file.

    Checks for JSON syntax errors, schema errors, and layout advisories
    such as openings that run past their wall or walls that do not close.

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors
        2 - Configuration is valid but has warnings

    Example:
        roomplanner validate living-room.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    result = validate_config(config)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)
