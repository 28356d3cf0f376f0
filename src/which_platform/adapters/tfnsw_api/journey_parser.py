"""Parser for TfNSW rapidJSON trip and stop finder responses.

Every field is optional upstream. Values of the wrong type are treated as
absent so a single odd leg never fails a whole response.
"""

import logging
from typing import Any

from which_platform.adapters.tfnsw_api.constants import STOP_LOCATION_TYPE
from which_platform.domain.models.journey import Journey
from which_platform.domain.models.leg import Leg, LegLocation, Transportation
from which_platform.domain.models.stop import Stop

logger = logging.getLogger(__name__)


def _dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _str(value: Any) -> str | None:
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value)
    return text or None


def _int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    return None


class JourneyParser:
    """Parses trip planner payloads into domain models."""

    @staticmethod
    def parse_journeys(data: dict[str, Any]) -> list[Journey]:
        """Parse the ``journeys`` array of a trip response."""
        journeys = []
        for raw in _list(data.get("journeys")):
            if not isinstance(raw, dict):
                logger.debug(f"Skipping non-object journey: {raw!r}")
                continue
            journeys.append(JourneyParser.parse_journey(raw))
        return journeys

    @staticmethod
    def parse_journey(raw: dict[str, Any]) -> Journey:
        legs = tuple(
            JourneyParser.parse_leg(leg) for leg in _list(raw.get("legs")) if isinstance(leg, dict)
        )
        return Journey(legs=legs, interchanges=_int(raw.get("interchanges")) or 0)

    @staticmethod
    def parse_leg(raw: dict[str, Any]) -> Leg:
        return Leg(
            origin=JourneyParser.parse_location(raw.get("origin")),
            destination=JourneyParser.parse_location(raw.get("destination")),
            transportation=JourneyParser.parse_transportation(raw.get("transportation")),
            stop_sequence=tuple(
                JourneyParser.parse_location(stop) for stop in _list(raw.get("stopSequence"))
            ),
            realtime_status=JourneyParser._parse_realtime_status(raw.get("realtimeStatus")),
        )

    @staticmethod
    def parse_location(raw: Any) -> LegLocation:
        location = _dict(raw)
        properties = _dict(location.get("properties"))
        return LegLocation(
            id=_str(location.get("id")),
            name=_str(location.get("name")),
            disassembled_name=_str(location.get("disassembledName")),
            departure_time_planned=_str(location.get("departureTimePlanned")),
            departure_time_estimated=_str(location.get("departureTimeEstimated")),
            arrival_time_planned=_str(location.get("arrivalTimePlanned")),
            arrival_time_estimated=_str(location.get("arrivalTimeEstimated")),
            platform_name=_str(properties.get("platformName")),
            stopping_point_planned=_str(properties.get("stoppingPointPlanned")),
        )

    @staticmethod
    def parse_transportation(raw: Any) -> Transportation:
        transportation = _dict(raw)
        return Transportation(
            disassembled_name=_str(transportation.get("disassembledName")),
            number=_str(transportation.get("number")),
            destination_name=_str(_dict(transportation.get("destination")).get("name")),
            product_class=_int(_dict(transportation.get("product")).get("class")),
        )

    @staticmethod
    def _parse_realtime_status(raw: Any) -> tuple[str, ...]:
        if isinstance(raw, str):
            return (raw,) if raw else ()
        return tuple(status for status in _list(raw) if isinstance(status, str))

    @staticmethod
    def parse_stops(data: dict[str, Any]) -> list[Stop]:
        """Parse stop finder locations, keeping only stop-type locations."""
        stops = []
        for location in _list(data.get("locations")):
            if not isinstance(location, dict) or location.get("type") != STOP_LOCATION_TYPE:
                continue
            stop_id = _str(location.get("id"))
            if not stop_id:
                continue
            name = _str(location.get("name")) or stop_id
            stops.append(
                Stop(
                    id=stop_id,
                    name=name,
                    disassembled_name=_str(location.get("disassembledName")) or name,
                )
            )
        return stops
