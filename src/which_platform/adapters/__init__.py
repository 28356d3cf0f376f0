"""Adapters layer - external system integrations."""

from which_platform.adapters.config import AppConfig
from which_platform.adapters.tfnsw_api import TfnswStopRepository, TfnswTripPlannerRepository

__all__ = [
    "AppConfig",
    "TfnswStopRepository",
    "TfnswTripPlannerRepository",
]
