"""Pydantic models for room layout configuration files.

A configuration describes one room (walls and openings), a furniture
palette, optional placements of palette items, and planner settings. Numeric
fields must be finite, so JSON NaN and Infinity literals are rejected.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from roomplanner.domain.value_objects import OpeningType

# Version 1.0: Initial schema with walls, openings, palette and placements
# Version 1.1: Added planner settings (grid, rotation step, clearances)
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})

# Reuse the domain enum so JSON values match the domain directly
OpeningTypeConfig = OpeningType


class OpeningConfig(BaseModel):
    """Configuration for an opening in a wall.

    Attributes:
        type: Kind of opening (door, window, closet, none)
        start: Distance from the wall's origin corner in inches
        width: Width of the opening in inches
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    type: OpeningTypeConfig = OpeningTypeConfig.NONE
    start: float = Field(default=0.0, ge=0, description="Distance from wall start")
    width: float = Field(default=0.0, ge=0, description="Opening width")


class WallConfig(BaseModel):
    """Configuration for a single wall.

    Attributes:
        name: Wall identifier; north/south/east/west make a rectangular room
        length: Wall length in inches
        openings: Openings on the wall
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    name: str = Field(default="wall", min_length=1)
    length: float = Field(..., gt=0, description="Wall length in inches")
    openings: list[OpeningConfig] = Field(default_factory=list)


class RoomConfig(BaseModel):
    """Configuration for the room being furnished."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    name: str = "My Room"
    walls: list[WallConfig] = Field(default_factory=list)


class FurnitureConfig(BaseModel):
    """Configuration for a furniture palette entry.

    Attributes:
        name: Display name, also used to reference the entry from placements
        width: Footprint width in inches
        height: Footprint depth in inches
        quantity: How many may be placed
        color: Display color as #rrggbb
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    name: str = Field(..., min_length=1)
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    quantity: int = Field(default=1, ge=1)
    color: str | None = Field(default=None, pattern=r"^#[0-9a-fA-F]{6}$")


class PlacementConfig(BaseModel):
    """Configuration for a placed palette item.

    Attributes:
        item: Name of the palette entry
        x: Center x coordinate in inches
        y: Center y coordinate in inches
        rotation: Rotation in degrees (any value, normalized to [0, 360))
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    item: str = Field(..., min_length=1)
    x: float
    y: float
    rotation: float = 0.0


class SettingsConfig(BaseModel):
    """Planner settings.

    Attributes:
        grid_size: Snap grid spacing in inches
        grid_snap: Whether placements snap to the grid
        rotation_step: Degrees per rotate action
        wall_thickness: Nominal wall thickness in inches
        opening_clearance: Zone depth beyond the wall in inches
        opening_collision_clearance: Collision box depth beyond the wall
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    grid_size: float = Field(default=6.0, gt=0)
    grid_snap: bool = True
    rotation_step: float = Field(default=45.0, gt=0, lt=360)
    wall_thickness: float = Field(default=6.0, ge=0)
    opening_clearance: float = Field(default=12.0, ge=0)
    opening_collision_clearance: float = Field(default=24.0, ge=0)


class LayoutConfiguration(BaseModel):
    """Root model of a layout configuration file."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    schema_version: str = "1.1"
    room: RoomConfig = Field(default_factory=RoomConfig)
    furniture: list[FurnitureConfig] = Field(default_factory=list)
    placements: list[PlacementConfig] = Field(default_factory=list)
    settings: SettingsConfig = Field(default_factory=SettingsConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        """Validate that the schema version is supported."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(f"Unsupported schema version {v!r} (supported: {supported})")
        return v

    @model_validator(mode="after")
    def validate_placement_references(self) -> "LayoutConfiguration":
        """Every placement must name a palette entry."""
        names = {f.name for f in self.furniture}
        for placement in self.placements:
            if placement.item not in names:
                raise ValueError(f"Placement references unknown furniture {placement.item!r}")
        return self
