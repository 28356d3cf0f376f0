"""Client adapters - a polling departure board over the JSON API."""

from which_platform.adapters.client.board_controller import BoardController
from which_platform.adapters.client.client_state import ClientState
from which_platform.adapters.client.departures_api_client import DeparturesApiClient
from which_platform.adapters.client.refresh_scheduler import RefreshScheduler
from which_platform.adapters.client.search_debouncer import SearchDebouncer
from which_platform.adapters.client.settings_store import STORAGE_KEY, JsonSettingsStore

__all__ = [
    "STORAGE_KEY",
    "BoardController",
    "ClientState",
    "DeparturesApiClient",
    "JsonSettingsStore",
    "RefreshScheduler",
    "SearchDebouncer",
]
