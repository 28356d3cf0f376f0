"""Use cases for looking up departures and stops."""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from which_platform.application.services.departure_list_builder import DepartureListBuilder
from which_platform.domain.models.departure_record import DepartureRecord

if TYPE_CHECKING:
    from which_platform.domain.models.stop import Stop
    from which_platform.domain.ports import StopRepository, TripPlannerRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DepartureBoard:
    """Departures for one origin/destination pair at one instant."""

    updated: datetime
    departures: list[DepartureRecord] = field(default_factory=list)

    def to_payload(self) -> dict:
        """JSON payload with the update instant and camelCase departure rows."""
        return {
            "updated": format_utc_instant(self.updated),
            "departures": [d.model_dump(mode="json", by_alias=True) for d in self.departures],
        }


def format_utc_instant(instant: datetime) -> str:
    """ISO 8601 UTC instant with millisecond precision and a Z suffix."""
    text = instant.astimezone(UTC).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


class DepartureService:
    """Fetches journeys from the trip planner and builds the departure list."""

    def __init__(
        self,
        trip_planner: "TripPlannerRepository",
        list_builder: DepartureListBuilder,
    ) -> None:
        self._trip_planner = trip_planner
        self._list_builder = list_builder

    async def get_departures(
        self,
        origin_id: str,
        destination_id: str,
        count: int,
        now: datetime | None = None,
    ) -> DepartureBoard:
        """Get the departure board between two stops.

        ``now`` is captured once and shared by every record. Upstream failures
        propagate as UpstreamUnavailableError.
        """
        now = now or datetime.now(UTC)
        journeys = await self._trip_planner.plan_journeys(
            origin_id, destination_id, count=count, departure_after=now
        )
        departures = self._list_builder.build(journeys, now)
        logger.debug(
            f"Built {len(departures)} departure(s) from {len(journeys)} journey(s) "
            f"for {origin_id} -> {destination_id}"
        )
        return DepartureBoard(updated=now, departures=departures)


class StopSearchService:
    """Searches stops by name."""

    def __init__(self, stop_repository: "StopRepository") -> None:
        self._stop_repository = stop_repository

    async def search(self, query: str) -> list["Stop"]:
        return await self._stop_repository.search_stops(query.strip())
