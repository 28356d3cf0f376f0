"""TfNSW stop finder repository adapter."""

from typing import TYPE_CHECKING

from which_platform.adapters.tfnsw_api.journey_parser import JourneyParser
from which_platform.domain.models.stop import Stop
from which_platform.domain.ports.stop_repository import StopRepository

if TYPE_CHECKING:
    from which_platform.adapters.tfnsw_api.http_client import TfnswHttpClient


class TfnswStopRepository(StopRepository):
    """Adapter searching stops with the TfNSW stop finder."""

    def __init__(self, http_client: "TfnswHttpClient") -> None:
        self._http_client = http_client

    async def search_stops(self, query: str) -> list[Stop]:
        data = await self._http_client.find_stops(query)
        return JourneyParser.parse_stops(data)
