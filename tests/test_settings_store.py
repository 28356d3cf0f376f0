"""Tests for the JSON settings store."""

import json
from pathlib import Path

from which_platform.adapters.client import STORAGE_KEY, JsonSettingsStore
from which_platform.domain.models import ClientSettings


def test_load_without_file_returns_defaults(tmp_path: Path) -> None:
    """Given no settings file, when loading, then the defaults are returned."""
    defaults = ClientSettings().with_origin("10101100", "Central")
    store = JsonSettingsStore(tmp_path / "settings.json", defaults=defaults)

    assert store.load() == defaults


def test_save_writes_camel_case_blob_under_key(tmp_path: Path) -> None:
    """Given settings with home saved, when saving, then the blob uses the stored key names."""
    path = tmp_path / "nested" / "settings.json"
    store = JsonSettingsStore(path)

    store.save(ClientSettings().with_home("10101100", "Central"))

    blob = json.loads(path.read_text())[STORAGE_KEY]
    assert blob == {
        "originId": "200080",
        "originName": "Wynyard",
        "destId": "201510",
        "destName": "Redfern",
        "homeId": "10101100",
        "homeName": "Central",
    }


def test_save_then_load_restores_settings(tmp_path: Path) -> None:
    """Given saved settings, when loading with a new store, then they come back."""
    settings = ClientSettings().swapped().with_work("200060", "Town Hall")
    JsonSettingsStore(tmp_path / "settings.json").save(settings)

    assert JsonSettingsStore(tmp_path / "settings.json").load() == settings


def test_partial_blob_is_merged_over_defaults(tmp_path: Path) -> None:
    """Given a blob with only an origin, when loading, then other fields keep their defaults."""
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({STORAGE_KEY: {"originId": "10101100", "originName": "Central"}}))

    settings = JsonSettingsStore(path).load()

    assert settings.origin_id == "10101100"
    assert settings.destination_id == "201510"


def test_save_keeps_other_keys_in_file(tmp_path: Path) -> None:
    """Given unrelated keys in the file, when saving, then they are preserved."""
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"other": 1}))

    JsonSettingsStore(path).save(ClientSettings())

    assert json.loads(path.read_text())["other"] == 1


def test_corrupt_file_falls_back_to_defaults(tmp_path: Path) -> None:
    """Given a file that is not JSON, when loading, then defaults are returned."""
    path = tmp_path / "settings.json"
    path.write_text("{not json")

    assert JsonSettingsStore(path).load() == ClientSettings()


def test_invalid_values_fall_back_to_defaults(tmp_path: Path) -> None:
    """Given a blob with a non-string origin, when loading, then defaults are returned."""
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({STORAGE_KEY: {"originId": ["200080"]}}))

    assert JsonSettingsStore(path).load() == ClientSettings()
