"""TfNSW trip planner repository adapter."""

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from which_platform.adapters.tfnsw_api.journey_parser import JourneyParser
from which_platform.domain.models.journey import Journey
from which_platform.domain.ports.trip_planner_repository import TripPlannerRepository

if TYPE_CHECKING:
    from which_platform.adapters.tfnsw_api.http_client import TfnswHttpClient

logger = logging.getLogger(__name__)


class TfnswTripPlannerRepository(TripPlannerRepository):
    """Adapter planning journeys with the TfNSW trip planner."""

    def __init__(self, http_client: "TfnswHttpClient") -> None:
        self._http_client = http_client

    async def plan_journeys(
        self,
        origin_id: str,
        destination_id: str,
        count: int,
        departure_after: datetime,
    ) -> list[Journey]:
        """Plan journeys between two stops.

        Args:
            origin_id: Origin stop ID (e.g., "200080" for Wynyard).
            destination_id: Destination stop ID.
            count: Number of trips to request.
            departure_after: Earliest departure.

        Returns:
            Parsed journeys in upstream order.
        """
        data = await self._http_client.fetch_trips(
            origin_id, destination_id, count=count, departure_after=departure_after
        )
        journeys = JourneyParser.parse_journeys(data)
        if not journeys:
            logger.info(f"No journeys returned for {origin_id} -> {destination_id}")
        return journeys
