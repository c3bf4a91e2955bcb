"""Built-in sample layout: a furnished living room."""

from typing import Any

from roomplanner.application.config.schema import LayoutConfiguration

SAMPLE_LAYOUT: dict[str, Any] = {
    "schema_version": "1.1",
    "room": {
        "name": "Living Room",
        "walls": [
            {"name": "north", "length": 180, "openings": [{"type": "window", "start": 48, "width": 60}]},
            {"name": "east", "length": 144, "openings": [{"type": "none", "start": 0, "width": 0}]},
            {"name": "south", "length": 180, "openings": [{"type": "door", "start": 72, "width": 36}]},
            {"name": "west", "length": 144, "openings": [{"type": "closet", "start": 24, "width": 48}]},
        ],
    },
    "furniture": [
        {"name": "Sofa", "width": 84, "height": 36, "quantity": 1, "color": "#3498db"},
        {"name": "Coffee Table", "width": 48, "height": 24, "quantity": 1, "color": "#e67e22"},
        {"name": "Armchair", "width": 36, "height": 33, "quantity": 2, "color": "#2ecc71"},
        {"name": "TV Stand", "width": 60, "height": 18, "quantity": 1, "color": "#9b59b6"},
        {"name": "Bookshelf", "width": 36, "height": 12, "quantity": 1, "color": "#e74c3c"},
        {"name": "End Table", "width": 18, "height": 18, "quantity": 2, "color": "#1abc9c"},
        {"name": "Floor Lamp", "width": 12, "height": 12, "quantity": 2, "color": "#f39c12"},
        {"name": "Rug", "width": 96, "height": 60, "quantity": 1, "color": "#636e72"},
    ],
    "placements": [],
}


def sample_configuration() -> LayoutConfiguration:
    """Return a fresh copy of the sample living room configuration."""
    return LayoutConfiguration.model_validate(SAMPLE_LAYOUT)
