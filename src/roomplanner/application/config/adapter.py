"""Conversion from configuration models to domain objects.

These functions translate validated pydantic models into domain entities
and a ready-to-use LayoutSession.
"""

import logging

from roomplanner.application.config.schema import (
    FurnitureConfig,
    LayoutConfiguration,
    RoomConfig,
    SettingsConfig,
)
from roomplanner.application.session import LayoutSession, PlacementRefused
from roomplanner.application.settings import PlannerSettings
from roomplanner.domain.entities import FurnitureDefinition, Opening, Room, Wall
from roomplanner.domain.value_objects import OpeningClearance, Point2D

logger = logging.getLogger(__name__)

# Colors assigned to palette entries that do not specify one
DEFAULT_FURNITURE_COLORS: tuple[str, ...] = (
    "#e94560",
    "#2ecc71",
    "#3498db",
    "#f39c12",
    "#9b59b6",
    "#1abc9c",
    "#e67e22",
    "#e74c3c",
    "#00cec9",
    "#fd79a8",
)


def config_to_room(config: RoomConfig) -> Room:
    """Convert a room configuration into a Room entity."""
    walls = [
        Wall(
            name=wall.name,
            length=wall.length,
            openings=[
                Opening(opening_type=op.type, start=op.start, width=op.width)
                for op in wall.openings
            ],
        )
        for wall in config.walls
    ]
    return Room(name=config.name, walls=walls)


def config_to_palette(furniture: list[FurnitureConfig]) -> list[FurnitureDefinition]:
    """Convert palette configurations, filling in default colors by position."""
    return [
        FurnitureDefinition(
            name=f.name,
            width=f.width,
            height=f.height,
            quantity=f.quantity,
            color=f.color or DEFAULT_FURNITURE_COLORS[i % len(DEFAULT_FURNITURE_COLORS)],
        )
        for i, f in enumerate(furniture)
    ]


def config_to_settings(config: SettingsConfig) -> PlannerSettings:
    """Convert settings configuration into PlannerSettings."""
    return PlannerSettings(
        grid_size=config.grid_size,
        grid_snap=config.grid_snap,
        rotation_step=config.rotation_step,
        opening_clearance=OpeningClearance(
            wall_thickness=config.wall_thickness,
            clearance=config.opening_clearance,
            collision_clearance=config.opening_collision_clearance,
        ),
    )


def config_to_session(config: LayoutConfiguration) -> LayoutSession:
    """Build a LayoutSession with the configured room, palette and placements.

    Placements are applied in order. A placement beyond its palette entry's
    quantity is skipped and logged.

    Args:
        config: A validated layout configuration.

    Returns:
        A session with every allowed placement applied.
    """
    session = LayoutSession(
        room=config_to_room(config.room),
        palette=config_to_palette(config.furniture),
        settings=config_to_settings(config.settings),
    )
    index_by_name = {d.name: i for i, d in reversed(list(enumerate(session.palette)))}

    for placement in config.placements:
        result = session.place_from_palette(
            index_by_name[placement.item],
            position=Point2D(placement.x, placement.y),
            rotation_degrees=placement.rotation,
        )
        if isinstance(result, PlacementRefused):
            logger.warning("Skipping placement: %s", result.message)

    session.select(None)
    return session
