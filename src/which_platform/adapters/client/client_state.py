"""Explicit state of a departure board client."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from which_platform.domain.models.client_settings import ClientSettings
from which_platform.domain.models.stop import Stop


@dataclass
class ClientState:
    """Everything the board renders, owned by one controller."""

    settings: ClientSettings = field(default_factory=ClientSettings)
    departures: list[dict[str, Any]] = field(default_factory=list)
    last_fetch_time: datetime | None = None
    loading: bool = True
    fetch_failed: bool = False
    search_results: list[Stop] = field(default_factory=list)
    # Latest issued departure fetch; older results are discarded
    generation: int = 0

    @property
    def no_data(self) -> bool:
        """A fetch failed and there is nothing to show."""
        return self.fetch_failed and not self.departures

    def clear_departures(self) -> None:
        self.departures = []
        self.loading = True
