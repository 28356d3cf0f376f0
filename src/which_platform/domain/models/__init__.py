"""Domain models for Which Platform?."""

from which_platform.domain.models.client_settings import ClientSettings
from which_platform.domain.models.departure_record import DepartureRecord, InterchangeDetail
from which_platform.domain.models.error_details import ErrorDetails
from which_platform.domain.models.journey import Journey
from which_platform.domain.models.leg import Leg, LegLocation, Transportation, parse_instant
from which_platform.domain.models.stop import Stop
from which_platform.domain.models.transport_mode import TransportMode

__all__ = [
    "ClientSettings",
    "DepartureRecord",
    "ErrorDetails",
    "InterchangeDetail",
    "Journey",
    "Leg",
    "LegLocation",
    "Stop",
    "TransportMode",
    "Transportation",
    "parse_instant",
]
