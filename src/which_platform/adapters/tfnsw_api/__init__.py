"""TfNSW trip planner adapters."""

from which_platform.adapters.tfnsw_api.http_client import TfnswHttpClient
from which_platform.adapters.tfnsw_api.journey_parser import JourneyParser
from which_platform.adapters.tfnsw_api.tfnsw_stop_repository import TfnswStopRepository
from which_platform.adapters.tfnsw_api.tfnsw_trip_planner_repository import (
    TfnswTripPlannerRepository,
)

__all__ = [
    "JourneyParser",
    "TfnswHttpClient",
    "TfnswStopRepository",
    "TfnswTripPlannerRepository",
]
