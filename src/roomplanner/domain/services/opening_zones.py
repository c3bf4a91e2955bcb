"""Clearance zones for wall openings.

This module provides the OpeningZoneService, which places every door,
window and closet opening of a built room along its wall segment and
derives the clearance zone used for advisory collision warnings.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..value_objects import (
    DEFAULT_OPENING_CLEARANCE,
    AxisAlignedBox,
    OpeningClearance,
    OpeningZone,
    Point2D,
    Vector2D,
)

if TYPE_CHECKING:
    from ..entities import Opening, WallSegment

logger = logging.getLogger(__name__)

__all__ = ["OpeningZoneService"]


class OpeningZoneService:
    """Derives opening clearance zones from wall segments.

    Attributes:
        clearance: Depth constants for the zones.
    """

    def __init__(self, clearance: OpeningClearance | None = None) -> None:
        """Initialize the zone service.

        Args:
            clearance: Optional custom clearance depths. If not provided,
                       uses DEFAULT_OPENING_CLEARANCE.
        """
        self.clearance = clearance or DEFAULT_OPENING_CLEARANCE

    def derive_zones(self, segments: list[WallSegment]) -> list[OpeningZone]:
        """Compute a zone for every physical opening on every segment.

        Openings of type NONE are skipped, as are all openings on a
        zero-length segment since its direction is undefined. Openings
        reaching past the end of their wall are not clamped.

        Args:
            segments: Wall segments in traversal order.

        Returns:
            Zones in segment order, then opening order.
        """
        zones: list[OpeningZone] = []
        for segment in segments:
            openings = segment.source_wall.physical_openings
            if not openings:
                continue

            length = segment.length
            if length == 0:
                logger.debug(
                    "Skipping %d opening(s) on zero-length wall %r",
                    len(openings),
                    segment.name,
                )
                continue

            direction = segment.direction
            along = Vector2D(x=direction.x / length, y=direction.y / length)
            normal = along.perpendicular()

            for opening in openings:
                zones.append(self._zone_for(segment, opening, along, normal))

        return zones

    def _zone_for(
        self,
        segment: WallSegment,
        opening: Opening,
        along: Vector2D,
        normal: Vector2D,
    ) -> OpeningZone:
        start_point = Point2D(
            x=segment.start.x + along.x * opening.start,
            y=segment.start.y + along.y * opening.start,
        )
        half_width = opening.width / 2
        center = Point2D(
            x=start_point.x + along.x * half_width,
            y=start_point.y + along.y * half_width,
        )
        return OpeningZone(
            center=center,
            along_dir=along,
            normal_dir=normal,
            width=opening.width,
            depth=self.clearance.depth,
            opening_type=opening.opening_type,
            wall_name=segment.name,
            bounding_box=self._oriented_box(
                center, along, normal, opening.width, self.clearance.collision_depth
            ),
        )

    @staticmethod
    def _oriented_box(
        center: Point2D,
        along: Vector2D,
        normal: Vector2D,
        width: float,
        depth: float,
    ) -> AxisAlignedBox:
        """Axis-aligned box around a rectangle aligned with a wall.

        Args:
            center: Rectangle center.
            along: Unit vector along the wall.
            normal: Unit normal of the wall.
            width: Extent along the wall.
            depth: Extent along the normal.

        Returns:
            The conservative axis-aligned box of the rectangle.
        """
        hw = width / 2
        hd = depth / 2
        corners = [
            Point2D(
                x=center.x + along.x * hw * sa + normal.x * hd * sn,
                y=center.y + along.y * hw * sa + normal.y * hd * sn,
            )
            for sa, sn in ((1, 1), (-1, 1), (1, -1), (-1, -1))
        ]
        return AxisAlignedBox.from_points(corners)
