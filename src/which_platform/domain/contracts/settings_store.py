"""Protocol for persisting client settings."""

from typing import Protocol

from which_platform.domain.models.client_settings import ClientSettings


class SettingsStoreProtocol(Protocol):
    """Protocol for loading and saving client settings."""

    def load(self) -> ClientSettings:
        """Load settings, falling back to defaults."""
        ...

    def save(self, settings: ClientSettings) -> None:
        """Persist settings."""
        ...
