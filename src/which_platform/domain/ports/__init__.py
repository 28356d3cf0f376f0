"""Ports (interfaces) for the ports-and-adapters architecture."""

from which_platform.domain.ports.stop_repository import StopRepository
from which_platform.domain.ports.trip_planner_repository import TripPlannerRepository

__all__ = [
    "StopRepository",
    "TripPlannerRepository",
]
