"""Planner settings shared by the session and the configuration layer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from roomplanner.domain.value_objects import DEFAULT_OPENING_CLEARANCE, OpeningClearance

__all__ = ["PlannerSettings"]


@dataclass(frozen=True)
class PlannerSettings:
    """Tunable behavior of a layout session.

    Attributes:
        grid_size: Snap grid spacing in inches.
        grid_snap: Whether moves snap to the grid.
        rotation_step: Degrees added or removed by one rotate action.
        opening_clearance: Depths used for opening clearance zones.
        default_position: Where items go when the room has no bounds.
    """

    grid_size: float = 6.0
    grid_snap: bool = True
    rotation_step: float = 45.0
    opening_clearance: OpeningClearance = field(
        default_factory=lambda: DEFAULT_OPENING_CLEARANCE
    )
    default_position: tuple[float, float] = (60.0, 60.0)

    def __post_init__(self) -> None:
        if self.grid_size <= 0:
            raise ValueError("Grid size must be positive")

    def snap(self, value: float) -> float:
        """Snap a coordinate to the grid when snapping is enabled."""
        if not self.grid_snap:
            return value
        # half-way values round up, not to even
        return math.floor(value / self.grid_size + 0.5) * self.grid_size
