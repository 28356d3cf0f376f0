"""Starlette application serving the departures API."""

from __future__ import annotations

import contextlib
import logging
from typing import TYPE_CHECKING

import aiohttp
from starlette.applications import Starlette
from starlette.middleware import Middleware

from which_platform.adapters.tfnsw_api import (
    TfnswHttpClient,
    TfnswStopRepository,
    TfnswTripPlannerRepository,
)
from which_platform.adapters.web.api_routes import api_routes
from which_platform.adapters.web.rate_limit_middleware import RateLimitMiddleware
from which_platform.application.services import (
    DepartureListBuilder,
    DepartureService,
    JourneyNormalizer,
    StopSearchService,
)

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from which_platform.adapters.config.app_config import AppConfig
    from which_platform.domain.ports import StopRepository, TripPlannerRepository

logger = logging.getLogger(__name__)


def build_departure_service(
    config: AppConfig, trip_planner: TripPlannerRepository
) -> DepartureService:
    """Wire the normalization pipeline to a trip planner."""
    normalizer = JourneyNormalizer(
        timezone=config.zone,
        catchable_threshold_minutes=config.catchable_threshold_minutes,
    )
    return DepartureService(trip_planner, DepartureListBuilder(normalizer))


def create_app(
    config: AppConfig,
    trip_planner: TripPlannerRepository | None = None,
    stop_repository: StopRepository | None = None,
) -> Starlette:
    """Create the web application.

    When no repositories are given, TfNSW repositories sharing one aiohttp
    session are created for the lifetime of the app.

    Args:
        config: Application configuration.
        trip_planner: Optional trip planner repository (used by tests).
        stop_repository: Optional stop repository (used by tests).
    """

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        if trip_planner is not None and stop_repository is not None:
            _install_services(app, config, trip_planner, stop_repository)
            yield
            return

        async with aiohttp.ClientSession() as session:
            http_client = TfnswHttpClient(
                session=session,
                api_key=config.tfnsw_api_key,
                base_url=config.tfnsw_base_url,
                timezone=config.zone,
                timeout_seconds=config.tfnsw_api_timeout,
            )
            _install_services(
                app,
                config,
                trip_planner or TfnswTripPlannerRepository(http_client),
                stop_repository or TfnswStopRepository(http_client),
            )
            logger.info(f"Using TfNSW trip planner at {config.tfnsw_base_url}")
            yield

    app = Starlette(
        routes=api_routes(),
        middleware=[
            Middleware(RateLimitMiddleware, requests_per_minute=config.rate_limit_per_minute)
        ],
        lifespan=lifespan,
    )
    app.state.config = config
    return app


def _install_services(
    app: Starlette,
    config: AppConfig,
    trip_planner: TripPlannerRepository,
    stop_repository: StopRepository,
) -> None:
    app.state.departure_service = build_departure_service(config, trip_planner)
    app.state.stop_search_service = StopSearchService(stop_repository)
