"""Trip planner repository port."""

from datetime import datetime
from typing import Protocol

from which_platform.domain.models.journey import Journey


class TripPlannerRepository(Protocol):
    """Port for planning journeys between two stops."""

    async def plan_journeys(
        self,
        origin_id: str,
        destination_id: str,
        count: int,
        departure_after: datetime,
    ) -> list[Journey]:
        """Plan up to ``count`` journeys leaving after ``departure_after``.

        Raises UpstreamUnavailableError when the planner cannot answer.
        """
        ...
