"""Domain layer - core business models and ports."""

from which_platform.domain.errors import UpstreamUnavailableError
from which_platform.domain.models import (
    DepartureRecord,
    Journey,
    Leg,
    Stop,
    TransportMode,
)
from which_platform.domain.ports import StopRepository, TripPlannerRepository

__all__ = [
    "DepartureRecord",
    "Journey",
    "Leg",
    "Stop",
    "StopRepository",
    "TransportMode",
    "TripPlannerRepository",
    "UpstreamUnavailableError",
]
