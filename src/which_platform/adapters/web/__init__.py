"""Web adapter - JSON API over Starlette."""

from which_platform.adapters.web.app import build_departure_service, create_app

__all__ = ["build_departure_service", "create_app"]
