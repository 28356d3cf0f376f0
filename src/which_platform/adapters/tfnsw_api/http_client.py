"""HTTP client for TfNSW trip planner requests."""

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any
from zoneinfo import ZoneInfo

import aiohttp

from which_platform.adapters.api_request_logger import log_api_request
from which_platform.adapters.tfnsw_api.constants import (
    BASE_PARAMS,
    EXCLUDED_MEANS,
    STOP_FINDER_PATH,
    TRIP_PATH,
)
from which_platform.domain.errors import UpstreamUnavailableError
from which_platform.domain.models.error_details import ErrorDetails

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

logger = logging.getLogger(__name__)


def local_date_time_params(instant: datetime, timezone: ZoneInfo) -> dict[str, str]:
    """Trip planner date (YYYYMMDD) and time (HHMM) in the operating timezone."""
    local = instant.astimezone(timezone)
    return {"itdDate": local.strftime("%Y%m%d"), "itdTime": local.strftime("%H%M")}


class TfnswHttpClient:
    """HTTP client for the TfNSW trip planner and stop finder."""

    def __init__(
        self,
        session: "ClientSession",
        api_key: str,
        base_url: str,
        timezone: ZoneInfo,
        timeout_seconds: float = 10,
    ) -> None:
        """Initialize the client.

        Args:
            session: Shared aiohttp session.
            api_key: TfNSW Open Data API key.
            base_url: Trip planner base URL.
            timezone: Operating timezone for trip queries.
            timeout_seconds: Total timeout per request.
        """
        self._session = session
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timezone = timezone
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        if not api_key:
            logger.warning("No TfNSW API key configured, upstream requests will be rejected")

    @property
    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"apikey {self._api_key}", "Accept": "application/json"}

    async def fetch_trips(
        self, origin_id: str, destination_id: str, count: int, departure_after: datetime
    ) -> dict[str, Any]:
        """Request trips departing after the given instant.

        Returns the decoded rapidJSON response.
        """
        params: dict[str, str | int] = {
            **BASE_PARAMS,
            "depArrMacro": "dep",
            **local_date_time_params(departure_after, self._timezone),
            "type_origin": "stop",
            "name_origin": origin_id,
            "type_destination": "stop",
            "name_destination": destination_id,
            "calcNumberOfTrips": count,
            "TfNSWTR": "true",
            "excludedMeans": "checkbox",
            **EXCLUDED_MEANS,
        }
        return await self._get_json(TRIP_PATH, params)

    async def find_stops(self, query: str) -> dict[str, Any]:
        """Run a stop finder query."""
        params: dict[str, str | int] = {
            **BASE_PARAMS,
            "type_sf": "any",
            "name_sf": query,
            "TfNSWSF": "true",
        }
        return await self._get_json(STOP_FINDER_PATH, params)

    async def _get_json(self, path: str, params: dict[str, str | int]) -> dict[str, Any]:
        url = f"{self._base_url}{path}"
        log_api_request("GET", url, params=params, headers=self._headers)

        try:
            async with self._session.get(
                url, params=params, headers=self._headers, timeout=self._timeout
            ) as response:
                return await self._handle_response(response, url)
        except UpstreamUnavailableError:
            raise
        except TimeoutError as e:
            logger.error(f"TfNSW API timed out for {url}")
            raise UpstreamUnavailableError(
                ErrorDetails(reason="Upstream request timed out"), f"Timeout calling {url}"
            ) from e
        except aiohttp.ClientError as e:
            logger.error(f"Error calling TfNSW API {url}: {e}")
            raise UpstreamUnavailableError(
                ErrorDetails(reason="Upstream connection failed"), str(e)
            ) from e

    async def _handle_response(self, response: "ClientResponse", url: str) -> dict[str, Any]:
        if response.status != 200:
            body = await response.text()
            logger.error(f"TfNSW API returned status {response.status} for {url}: {body[:200]}")
            raise UpstreamUnavailableError(
                ErrorDetails.from_status(response.status),
                f"TfNSW API returned {response.status}",
            )

        try:
            data = await response.json(content_type=None)
        except ValueError as e:
            raise UpstreamUnavailableError(
                ErrorDetails(status_code=response.status, reason="Invalid JSON from upstream"),
                str(e),
            ) from e

        if not isinstance(data, dict):
            raise UpstreamUnavailableError(
                ErrorDetails(status_code=response.status, reason="Unexpected upstream payload")
            )
        return data
