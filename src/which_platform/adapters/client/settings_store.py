"""JSON file store for client settings."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from which_platform.domain.contracts.settings_store import SettingsStoreProtocol
from which_platform.domain.models.client_settings import ClientSettings

logger = logging.getLogger(__name__)

STORAGE_KEY = "whichplatform_settings"

# Stored keys use the camelCase names of the browser client
_STORED_KEYS = {
    "origin_id": "originId",
    "origin_name": "originName",
    "destination_id": "destId",
    "destination_name": "destName",
    "home_id": "homeId",
    "home_name": "homeName",
    "work_id": "workId",
    "work_name": "workName",
}


class JsonSettingsStore(SettingsStoreProtocol):
    """Keeps the settings blob under a fixed key in a JSON file."""

    def __init__(
        self,
        path: str | Path,
        defaults: ClientSettings | None = None,
        storage_key: str = STORAGE_KEY,
    ) -> None:
        """Initialize the store.

        Args:
            path: JSON file holding one object of storage key -> settings blob.
            defaults: Settings used for values missing from the stored blob.
            storage_key: Key the blob is stored under.
        """
        self.path = Path(path)
        self.defaults = defaults or ClientSettings()
        self.storage_key = storage_key

    def load(self) -> ClientSettings:
        """Stored settings merged over the defaults."""
        blob = self._read_file().get(self.storage_key)
        if not isinstance(blob, dict):
            return self.defaults

        merged = self.defaults.model_dump()
        for field_name, stored_key in _STORED_KEYS.items():
            if stored_key in blob:
                merged[field_name] = blob[stored_key]
        try:
            return ClientSettings(**merged)
        except ValidationError as e:
            logger.warning(f"Ignoring invalid settings in {self.path}: {e}")
            return self.defaults

    def save(self, settings: ClientSettings) -> None:
        data = self._read_file()
        data[self.storage_key] = {
            stored_key: getattr(settings, field_name)
            for field_name, stored_key in _STORED_KEYS.items()
            if getattr(settings, field_name) is not None
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        logger.debug(f"Saved settings to {self.path}")

    def _read_file(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read settings from {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}
