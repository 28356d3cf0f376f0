"""HTTP client for the service's own departures API."""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from which_platform.domain.errors import UpstreamUnavailableError
from which_platform.domain.models.error_details import ErrorDetails
from which_platform.domain.models.stop import Stop

if TYPE_CHECKING:
    from aiohttp import ClientSession

logger = logging.getLogger(__name__)


class DeparturesApiClient:
    """Fetches departures and stops from a running Which Platform? server."""

    def __init__(
        self, session: "ClientSession", base_url: str, timeout_seconds: float = 15
    ) -> None:
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def fetch_departures(self, origin_id: str, destination_id: str) -> dict[str, Any]:
        """Return the ``{updated, departures}`` payload for a route."""
        return await self._get_json(
            "/api/departures", {"origin": origin_id, "destination": destination_id}
        )

    async def search_stops(self, query: str) -> list[Stop]:
        data = await self._get_json("/api/stops", {"q": query})
        return [Stop.model_validate(stop) for stop in data.get("stops", [])]

    async def _get_json(self, path: str, params: dict[str, str]) -> dict[str, Any]:
        url = f"{self._base_url}{path}"
        try:
            async with self._session.get(url, params=params, timeout=self._timeout) as response:
                if response.status != 200:
                    raise UpstreamUnavailableError(
                        ErrorDetails.from_status(response.status), f"API error {response.status}"
                    )
                data = await response.json()
        except (aiohttp.ClientError, TimeoutError) as e:
            raise UpstreamUnavailableError(
                ErrorDetails(reason="Server unreachable"), str(e)
            ) from e

        if not isinstance(data, dict):
            raise UpstreamUnavailableError(ErrorDetails(reason="Unexpected response payload"))
        return data
