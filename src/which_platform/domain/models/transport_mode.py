"""Transport mode categories."""

from enum import StrEnum


class TransportMode(StrEnum):
    """Category a leg falls into for departure selection."""

    WALK = "walk"
    RAIL = "rail"
    OTHER = "other"
