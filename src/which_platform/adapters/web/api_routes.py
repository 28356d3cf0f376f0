"""JSON API endpoints for departures and stop search."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from starlette.responses import JSONResponse
from starlette.routing import Route

from which_platform.domain.errors import UpstreamUnavailableError

if TYPE_CHECKING:
    from starlette.requests import Request

    from which_platform.adapters.config.app_config import AppConfig
    from which_platform.application.services import DepartureService, StopSearchService

logger = logging.getLogger(__name__)


class InvalidQueryError(ValueError):
    """A query parameter could not be used."""


def parse_count(raw: str | None, default: int, maximum: int) -> int:
    """Parse the trip count query parameter."""
    if raw is None or raw.strip() == "":
        return default
    try:
        count = int(raw)
    except ValueError as e:
        raise InvalidQueryError(f"count must be an integer, got {raw!r}") from e
    if count < 1 or count > maximum:
        raise InvalidQueryError(f"count must be between 1 and {maximum}")
    return count


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


async def departures_endpoint(request: Request) -> JSONResponse:
    """GET /api/departures?origin=&destination=&count="""
    config: AppConfig = request.app.state.config
    service: DepartureService = request.app.state.departure_service

    origin_id = request.query_params.get("origin") or config.default_origin_id
    destination_id = request.query_params.get("destination") or config.default_destination_id
    try:
        count = parse_count(
            request.query_params.get("count"), config.default_trip_count, config.max_trip_count
        )
    except InvalidQueryError as e:
        return _error(str(e), 400)

    try:
        board = await service.get_departures(origin_id, destination_id, count=count)
    except UpstreamUnavailableError as e:
        logger.error(
            f"Error fetching departures for {origin_id} -> {destination_id}: "
            f"{e.details.reason} (status: {e.status_code}, error: {e})"
        )
        return _error("Failed to fetch departures", 500)

    return JSONResponse(board.to_payload())


async def stops_endpoint(request: Request) -> JSONResponse:
    """GET /api/stops?q="""
    service: StopSearchService = request.app.state.stop_search_service

    query = (request.query_params.get("q") or "").strip()
    if not query:
        return _error("Missing query param q", 400)

    try:
        stops = await service.search(query)
    except UpstreamUnavailableError as e:
        logger.error(f"Error searching stops for {query!r}: {e.details.reason} ({e})")
        return _error("Failed to search stops", 500)

    return JSONResponse({"stops": [stop.model_dump(by_alias=True) for stop in stops]})


async def health_endpoint(_request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


def api_routes() -> list[Route]:
    return [
        Route("/api/departures", departures_endpoint, methods=["GET"]),
        Route("/api/stops", stops_endpoint, methods=["GET"]),
        Route("/api/health", health_endpoint, methods=["GET"]),
    ]
