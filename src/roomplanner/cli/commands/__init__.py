"""CLI command implementations for the roomplanner application.

This package contains subcommands for the roomplanner CLI, including:
- validate: Validate a layout configuration file
"""

from roomplanner.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
