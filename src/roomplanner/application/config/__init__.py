"""Configuration schema and loading for room layouts.

This package provides JSON-based configuration loading and validation for
room layouts. It includes pydantic models for the schema, a loader with
detailed error reporting, advisory checks, and adapters to domain objects.

Public API:
    - LayoutConfiguration: Root configuration model
    - RoomConfig, WallConfig, OpeningConfig: Room geometry models
    - FurnitureConfig, PlacementConfig: Palette and placement models
    - SettingsConfig: Planner settings model
    - load_config / load_config_from_dict: Load and validate configuration
    - ConfigError, ConfigErrorType: Exception for configuration errors and its category
    - validate_config: Advisory checks on a loaded configuration
    - config_to_room / config_to_palette / config_to_settings /
      config_to_session: Convert configuration to domain objects
    - sample_configuration: Built-in sample living room

Example:
    >>> from pathlib import Path
    >>> from roomplanner.application.config import load_config, config_to_session
    >>> session = config_to_session(load_config(Path("living-room.json")))
    >>> session.collision_report()
"""

from roomplanner.application.config.adapter import (
    DEFAULT_FURNITURE_COLORS,
    config_to_palette,
    config_to_room,
    config_to_session,
    config_to_settings,
)
from roomplanner.application.config.loader import (
    ConfigError,
    ConfigErrorType,
    load_config,
    load_config_from_dict,
)
from roomplanner.application.config.sample import SAMPLE_LAYOUT, sample_configuration
from roomplanner.application.config.schema import (
    SUPPORTED_VERSIONS,
    FurnitureConfig,
    LayoutConfiguration,
    OpeningConfig,
    PlacementConfig,
    RoomConfig,
    SettingsConfig,
    WallConfig,
)
from roomplanner.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    # Schema
    "FurnitureConfig",
    "LayoutConfiguration",
    "OpeningConfig",
    "PlacementConfig",
    "RoomConfig",
    "SettingsConfig",
    "SUPPORTED_VERSIONS",
    "WallConfig",
    # Loading
    "ConfigError",
    "ConfigErrorType",
    "load_config",
    "load_config_from_dict",
    # Validation
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate_config",
    # Adapters
    "DEFAULT_FURNITURE_COLORS",
    "config_to_palette",
    "config_to_room",
    "config_to_session",
    "config_to_settings",
    # Sample
    "SAMPLE_LAYOUT",
    "sample_configuration",
]
