"""Pytest configuration and shared fixtures for room planner tests."""

from __future__ import annotations

from typing import Callable

import pytest

from roomplanner.domain.entities import Opening, PlacedItem, Room, Wall
from roomplanner.domain.value_objects import OpeningType, Point2D


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared room fixtures
# =============================================================================


@pytest.fixture
def rectangular_room() -> Room:
    """A 180 x 144 room with a door on the south wall at 72-108."""
    return Room(
        name="Living Room",
        walls=[
            Wall(name="north", length=180.0),
            Wall(name="south", length=180.0, openings=[Opening(OpeningType.DOOR, 72.0, 36.0)]),
            Wall(name="east", length=144.0),
            Wall(name="west", length=144.0),
        ],
    )


@pytest.fixture
def triangle_room() -> Room:
    """Three equal walls, laid out with the polygon strategy."""
    return Room(
        name="Triangle",
        walls=[
            Wall(name="a", length=120.0),
            Wall(name="b", length=120.0),
            Wall(name="c", length=120.0),
        ],
    )


@pytest.fixture
def make_item() -> Callable[..., PlacedItem]:
    """Factory for placed items with sensible defaults."""
    counter = {"next": 1}

    def _make(
        x: float,
        y: float,
        width: float = 24.0,
        height: float = 24.0,
        rotation: float = 0.0,
        name: str = "Item",
        item_id: int | None = None,
    ) -> PlacedItem:
        if item_id is None:
            item_id = counter["next"]
        counter["next"] = max(counter["next"], item_id) + 1
        return PlacedItem(
            id=item_id,
            name=name,
            width=width,
            height=height,
            position=Point2D(x, y),
            rotation_degrees=rotation,
        )

    return _make
