"""Normalization of a single journey into a departure record."""

import logging
from datetime import datetime
from zoneinfo import ZoneInfo

from which_platform.application.services.boarding_leg_selector import LegSelection, select_legs
from which_platform.application.services.stop_aggregator import (
    build_interchange_details,
    count_rail_stops,
)
from which_platform.application.services.timing_calculator import (
    DEFAULT_CATCHABLE_THRESHOLD_MINUTES,
    arrival_instant,
    delay_minutes,
    departure_instant,
    duration_minutes,
    format_local_time,
    is_catchable,
    minutes_until,
)
from which_platform.domain.models.departure_record import DepartureRecord
from which_platform.domain.models.journey import Journey

logger = logging.getLogger(__name__)

UNKNOWN_LINE = "?"
UNKNOWN_PLATFORM = "?"
REALTIME_MONITORED = "MONITORED"


class JourneyNormalizer:
    """Turns a trip planner journey into a flat departure record."""

    def __init__(
        self,
        timezone: ZoneInfo,
        catchable_threshold_minutes: int = DEFAULT_CATCHABLE_THRESHOLD_MINUTES,
    ) -> None:
        """Initialize the normalizer.

        Args:
            timezone: Operating timezone for the HH:MM display strings.
            catchable_threshold_minutes: Minutes-until-departure a train must
                exceed to be marked catchable.
        """
        self.timezone = timezone
        self.catchable_threshold_minutes = catchable_threshold_minutes

    def normalize(self, journey: Journey, now: datetime) -> DepartureRecord | None:
        """Build the departure record for a journey.

        Returns None for journeys without legs or without any rail leg.
        """
        selection = select_legs(journey.legs)
        if selection is None:
            logger.debug(f"Rejected journey with {len(journey.legs)} leg(s): no rail leg")
            return None

        return self._build_record(journey, selection, now)

    def _build_record(
        self, journey: Journey, selection: LegSelection, now: datetime
    ) -> DepartureRecord:
        journey_origin = selection.first_leg.origin
        journey_destination = selection.final_leg.destination
        boarding_origin = selection.boarding_leg.origin
        transport = selection.boarding_leg.transportation

        departure = departure_instant(journey_origin)
        arrival = arrival_instant(journey_destination)
        minutes = minutes_until(departure, now)

        return DepartureRecord(
            line=transport.disassembled_name or UNKNOWN_LINE,
            line_number=transport.number or "",
            train_destination=transport.destination_name or "",
            boarding_station=self._boarding_station(selection),
            departure_time=journey_origin.departure_time,
            arrival_time=journey_destination.arrival_time,
            departure_time_local=format_local_time(departure, self.timezone),
            arrival_time_local=format_local_time(arrival, self.timezone),
            minutes_until_departure=minutes,
            duration_minutes=duration_minutes(departure, arrival),
            platform=boarding_origin.platform or UNKNOWN_PLATFORM,
            arrival_platform=journey_destination.platform or UNKNOWN_PLATFORM,
            delay_minutes=delay_minutes(boarding_origin),
            is_realtime=any(
                REALTIME_MONITORED in status for status in selection.boarding_leg.realtime_status
            ),
            interchanges=journey.interchanges,
            interchange_details=build_interchange_details(journey),
            number_of_stops=count_rail_stops(journey.legs),
            catchable=is_catchable(minutes, self.catchable_threshold_minutes),
            departure_instant=departure,
        )

    @staticmethod
    def _boarding_station(selection: LegSelection) -> str:
        """Boarding station name when the rider boards somewhere other than the origin."""
        if selection.boarding_index == 0:
            return ""

        journey_origin = selection.first_leg.origin
        boarding_origin = selection.boarding_leg.origin
        if journey_origin.id and journey_origin.id == boarding_origin.id:
            return ""
        return boarding_origin.disassembled_name or ""
