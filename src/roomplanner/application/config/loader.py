"""Layout configuration loading.

Reads JSON layout configuration files and validates them against the
pydantic schema. File system, JSON syntax and schema problems are all
reported as ConfigError with a category and per-field details.
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from roomplanner.application.config.schema import LayoutConfiguration

logger = logging.getLogger(__name__)


class ConfigErrorType(str, Enum):
    """Why a layout file could not be turned into a configuration."""

    FILE_NOT_FOUND = "file_not_found"
    PERMISSION_DENIED = "permission_denied"
    FILE_READ_ERROR = "file_read_error"
    JSON_PARSE = "json_parse"
    VALIDATION = "validation"


class ConfigError(Exception):
    """A layout file or dictionary that cannot be loaded.

    ``details`` holds line and column for JSON syntax errors, and one
    path/message/value entry per failing field for schema errors.
    """

    def __init__(
        self,
        message: str,
        error_type: ConfigErrorType,
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []


def _json_path(loc: tuple[str | int, ...]) -> str:
    """Join a pydantic error location into ``room.walls[0].length`` form."""
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = str(segment)
    return path


def _validation_details(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _json_path(err["loc"]) or "(root)",
            "message": err["msg"],
            "value": err.get("input"),
        }
        for err in error.errors()
    ]


def _validation_message(details: list[dict[str, Any]]) -> str:
    lines = ["Layout configuration is invalid:"]
    for detail in details:
        lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> LayoutConfiguration:
    try:
        return LayoutConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _validation_details(e)
        raise ConfigError(
            message=_validation_message(details),
            error_type=ConfigErrorType.VALIDATION,
            path=path,
            details=details,
        ) from e


def load_config(path: Path) -> LayoutConfiguration:
    """Load and validate a layout configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated LayoutConfiguration

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or does
            not match the schema.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type=ConfigErrorType.FILE_NOT_FOUND,
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type=ConfigErrorType.PERMISSION_DENIED,
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type=ConfigErrorType.FILE_READ_ERROR,
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in config file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type=ConfigErrorType.JSON_PARSE,
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    config = _validate(data, path)
    logger.debug(
        "Loaded %s: %d wall(s), %d furniture definition(s), %d placement(s)",
        path,
        len(config.room.walls),
        len(config.furniture),
        len(config.placements),
    )
    return config


def load_config_from_dict(data: dict[str, Any]) -> LayoutConfiguration:
    """Validate a layout configuration supplied as a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)
