"""Tests for domain models."""

import pytest

from which_platform.domain.errors import UpstreamUnavailableError
from which_platform.domain.models import ClientSettings, ErrorDetails, TransportMode, parse_instant


class TestClientSettings:
    """Tests for route and saved place operations."""

    def test_defaults_to_wynyard_and_redfern(self) -> None:
        """Given no stored settings, when creating, then the default route is used."""
        settings = ClientSettings()

        assert (settings.origin_id, settings.origin_name) == ("200080", "Wynyard")
        assert (settings.destination_id, settings.destination_name) == ("201510", "Redfern")
        assert not settings.has_home
        assert not settings.has_work

    def test_swapped_exchanges_origin_and_destination(self) -> None:
        """Given a route, when swapping, then origin and destination trade places."""
        swapped = ClientSettings().swapped()

        assert (swapped.origin_id, swapped.origin_name) == ("201510", "Redfern")
        assert (swapped.destination_id, swapped.destination_name) == ("200080", "Wynyard")

    def test_swapping_twice_restores_route(self) -> None:
        """Given a route, when swapping twice, then the original route is back."""
        settings = ClientSettings().with_home("10101100", "Central")

        assert settings.swapped().swapped() == settings

    def test_home_to_work_needs_both_places(self) -> None:
        """Given only home saved, when asking for home to work, then None is returned."""
        settings = ClientSettings().with_home("10101100", "Central")

        assert settings.home_to_work() is None
        assert settings.work_to_home() is None

    def test_home_to_work_and_back(self) -> None:
        """Given home and work saved, when choosing shortcuts, then routes point both ways."""
        settings = (
            ClientSettings().with_home("10101100", "Central").with_work("200060", "Town Hall")
        )

        there = settings.home_to_work()
        back = settings.work_to_home()

        assert there is not None and back is not None
        assert (there.origin_id, there.destination_id) == ("10101100", "200060")
        assert (back.origin_id, back.destination_id) == ("200060", "10101100")
        assert back.home_id == "10101100"

    def test_settings_are_immutable(self) -> None:
        """Given settings, when assigning a field, then an error is raised."""
        settings = ClientSettings()

        with pytest.raises(ValueError):
            settings.origin_id = "1"  # type: ignore[misc]


class TestErrorDetails:
    """Tests for upstream error details."""

    @pytest.mark.parametrize(
        ("status", "reason"),
        [
            (403, "Upstream rejected the API key"),
            (429, "Rate limit exceeded"),
            (504, "Gateway timeout"),
            (418, "HTTP 418"),
            (None, "Unknown error"),
        ],
    )
    def test_from_status(self, status: int | None, reason: str) -> None:
        """Given a status code, when building details, then a readable reason is attached."""
        assert ErrorDetails.from_status(status).reason == reason

    def test_upstream_error_exposes_status(self) -> None:
        """Given an upstream error, when inspecting, then status and reason are available."""
        error = UpstreamUnavailableError(ErrorDetails.from_status(503))

        assert error.status_code == 503
        assert str(error) == "Service unavailable"


def test_parse_instant_handles_z_offsets_and_garbage() -> None:
    """Given assorted timestamps, when parsing, then aware datetimes or None come back."""
    utc = parse_instant("2025-03-09T23:00:00Z")
    offset = parse_instant("2025-03-10T10:00:00+11:00")
    naive = parse_instant("2025-03-09T23:00:00")

    assert utc == offset == naive
    assert utc is not None and utc.tzinfo is not None
    assert parse_instant("soon") is None
    assert parse_instant(None) is None


def test_transport_modes_are_strings() -> None:
    """Given transport modes, when compared to strings, then their values match."""
    assert TransportMode.RAIL == "rail"
    assert {mode.value for mode in TransportMode} == {"walk", "rail", "other"}
