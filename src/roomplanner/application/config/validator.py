"""Validation results and layout advisory checks.

Schema validation already rejects malformed files. The checks here look at
configurations that load fine but will behave in a surprising way: openings
that run past their wall, rooms whose walls do not close, and placements
that exceed a palette entry's quantity.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from roomplanner.application.config.adapter import config_to_room
from roomplanner.application.config.schema import LayoutConfiguration
from roomplanner.domain.services import RoomShape, build_geometry
from roomplanner.domain.value_objects import OpeningType

# Maximum gap between the last wall's end and the first wall's start
CLOSURE_TOLERANCE: float = 0.1  # inches


@dataclass
class ValidationError:
    """A blocking problem with a configuration.

    Attributes:
        path: JSON path to the invalid field (e.g., "furniture[2].name")
        message: Human-readable description of the error
        value: The invalid value
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking concern about a configuration.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Collected validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self


def check_furniture(config: LayoutConfiguration) -> ValidationResult:
    """Check palette names and placement counts."""
    result = ValidationResult()

    name_counts = Counter(f.name for f in config.furniture)
    for i, furniture in enumerate(config.furniture):
        if name_counts[furniture.name] > 1:
            result.add_error(
                f"furniture[{i}].name",
                f"Duplicate furniture name {furniture.name!r}; placements cannot tell entries apart",
                furniture.name,
            )

    quantities = {f.name: f.quantity for f in config.furniture}
    placed = Counter(p.item for p in config.placements)
    for name, count in placed.items():
        quantity = quantities.get(name)
        if quantity is not None and count > quantity:
            result.add_warning(
                "placements",
                f"{count} placement(s) of {name!r} exceed its quantity of {quantity}; "
                f"extra placements are skipped",
                suggestion=f"Raise the quantity of {name!r} or remove placements",
            )
    return result


def check_walls(config: LayoutConfiguration) -> ValidationResult:
    """Check wall names, opening extents and room closure."""
    result = ValidationResult()
    walls = config.room.walls

    if not walls:
        result.add_warning(
            "room.walls",
            "Room has no walls; no boundary or opening checks will run",
        )
        return result

    geometry = build_geometry(config_to_room(config.room))
    if geometry.shape == RoomShape.RECTANGULAR:
        duplicate_effect = "only the last one is used for the rectangular room"
    else:
        duplicate_effect = "reports cannot tell these walls apart"

    name_counts = Counter(w.name.lower() for w in walls)
    for i, wall in enumerate(walls):
        path = f"room.walls[{i}]"
        if name_counts[wall.name.lower()] > 1:
            result.add_warning(
                f"{path}.name",
                f"Wall name {wall.name!r} is used more than once; {duplicate_effect}",
            )
        for j, opening in enumerate(wall.openings):
            if opening.type == OpeningType.NONE:
                continue
            end = opening.start + opening.width
            if end > wall.length:
                result.add_warning(
                    f"{path}.openings[{j}]",
                    f'Opening ends at {end:.2f}" but wall {wall.name!r} is only '
                    f'{wall.length:.2f}" long',
                    suggestion="Reduce the opening start or width",
                )
            if opening.width == 0:
                result.add_warning(
                    f"{path}.openings[{j}].width",
                    f"{opening.type.value} has zero width",
                )

    if geometry.shape == RoomShape.RECTANGULAR:
        by_name = {w.name.lower(): w for w in walls}
        for first, second in (("north", "south"), ("east", "west")):
            a, b = by_name[first], by_name[second]
            if a.length != b.length:
                result.add_warning(
                    "room.walls",
                    f'{first} ({a.length:.2f}") and {second} ({b.length:.2f}") differ; '
                    f'the room uses {max(a.length, b.length):.2f}" for both',
                )
    elif geometry.closure_gap > CLOSURE_TOLERANCE:
        result.add_warning(
            "room.walls",
            f'Walls do not close: last wall ends {geometry.closure_gap:.2f}" from the start',
            suggestion="Name the walls north, east, south and west for a rectangular room",
        )
    return result


def validate_config(config: LayoutConfiguration) -> ValidationResult:
    """Run every advisory check on a loaded configuration."""
    result = ValidationResult()
    for check in (check_walls, check_furniture):
        partial = check(config)
        result.errors.extend(partial.errors)
        result.warnings.extend(partial.warnings)
    return result
