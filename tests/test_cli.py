"""Tests for the command line interface."""

import json
from datetime import UTC, datetime
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest

from tests.journey_builders import simple_rail_journey
from which_platform.adapters.client import STORAGE_KEY
from which_platform.adapters.config import AppConfig
from which_platform.application.services import DepartureBoard, JourneyNormalizer
from which_platform.cli import _setup_argparse, format_board_table, main, update_settings

NOW = datetime(2025, 3, 9, 22, 55, tzinfo=UTC)


@pytest.fixture
def config(tmp_path: Path) -> AppConfig:
    return AppConfig.for_testing(settings_file=str(tmp_path / "settings.json"))


def test_argparse_departures_options() -> None:
    """Given departures arguments, when parsing, then route, count and JSON flag are read."""
    args = _setup_argparse().parse_args(
        ["departures", "--origin", "200080", "--destination", "201510", "--count", "3", "--json"]
    )

    assert args.command == "departures"
    assert (args.origin, args.destination, args.count, args.json) == ("200080", "201510", 3, True)


def test_argparse_settings_rejects_unknown_action() -> None:
    """Given an unknown settings action, when parsing, then argparse exits."""
    with pytest.raises(SystemExit):
        _setup_argparse().parse_args(["settings", "teleport"])


def test_format_board_table() -> None:
    """Given a board with one delayed departure, when formatting, then the row reads cleanly."""
    normalizer = JourneyNormalizer(ZoneInfo("Australia/Sydney"))
    record = normalizer.normalize(
        simple_rail_journey("2025-03-09T23:05:00Z", "2025-03-09T23:20:00Z"), NOW
    )
    assert record is not None

    table = format_board_table(DepartureBoard(updated=NOW, departures=[record]))

    assert table == "10:05    10 min  Platform 3   T1   Emu Plains (arr 10:20)"


def test_format_empty_board() -> None:
    """Given no departures, when formatting, then no trains are reported."""
    assert format_board_table(DepartureBoard(updated=NOW)) == "No upcoming trains"


def test_update_settings_set_origin_and_swap(
    config: AppConfig, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given set-origin then swap, when updating settings, then the file holds the swapped
    route."""
    update_settings(config, "set-origin", "10101100", "Central")
    update_settings(config, "swap", None, None)

    stored = json.loads(Path(config.settings_file).read_text())[STORAGE_KEY]
    assert stored["originId"] == "201510"
    assert stored["destId"] == "10101100"
    assert "Redfern (201510) → Central (10101100)" in capsys.readouterr().out


def test_update_settings_set_requires_stop(config: AppConfig) -> None:
    """Given set-home without a stop, when updating settings, then the CLI exits."""
    with pytest.raises(SystemExit):
        update_settings(config, "set-home", None, None)


def test_update_settings_home_to_work_requires_places(config: AppConfig) -> None:
    """Given no saved places, when asking for home to work, then the CLI exits."""
    with pytest.raises(SystemExit):
        update_settings(config, "home-to-work", None, None)


def test_update_settings_home_to_work(config: AppConfig) -> None:
    """Given home and work, when choosing home to work, then that route is stored."""
    update_settings(config, "set-home", "10101100", "Central")
    update_settings(config, "set-work", "200060", "Town Hall")
    update_settings(config, "home-to-work", None, None)

    stored = json.loads(Path(config.settings_file).read_text())[STORAGE_KEY]
    assert (stored["originId"], stored["destId"]) == ("10101100", "200060")


@pytest.mark.asyncio
async def test_main_settings_show(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given the settings show command, when running main, then the saved route is printed."""
    monkeypatch.setenv("SETTINGS_FILE", str(tmp_path / "settings.json"))
    monkeypatch.delenv("CONFIG_FILE", raising=False)

    await main(["settings", "show"])

    shown = json.loads(capsys.readouterr().out)
    assert shown["origin_id"] == "200080"


@pytest.mark.asyncio
async def test_main_without_command_exits() -> None:
    """Given no command, when running main, then help is printed and the CLI exits."""
    with pytest.raises(SystemExit):
        await main([])


@pytest.mark.asyncio
async def test_main_reports_missing_config_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given a missing TOML file, when running main, then an error is printed and it exits."""
    monkeypatch.setenv("CONFIG_FILE", str(tmp_path / "missing.toml"))

    with pytest.raises(SystemExit):
        await main(["settings", "show"])

    assert "Configuration file not found" in capsys.readouterr().err
