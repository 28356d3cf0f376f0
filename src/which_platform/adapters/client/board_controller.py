"""Board client tying state, fetching, scheduling and settings together."""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from which_platform.adapters.client.board_renderer import render_board, render_search_results
from which_platform.adapters.client.client_state import ClientState
from which_platform.adapters.client.refresh_scheduler import RefreshScheduler
from which_platform.adapters.client.search_debouncer import SearchDebouncer
from which_platform.domain.errors import UpstreamUnavailableError

if TYPE_CHECKING:
    from collections.abc import Callable

    from which_platform.adapters.client.departures_api_client import DeparturesApiClient
    from which_platform.domain.contracts.settings_store import SettingsStoreProtocol
    from which_platform.domain.models.client_settings import ClientSettings
    from which_platform.domain.models.stop import Stop

logger = logging.getLogger(__name__)

COMMAND_HELP = (
    "Commands: r refresh | s swap | hw home->work | wh work->home | "
    "/<text> search stops | o <n> origin | d <n> destination | "
    "home <n> | work <n> | q quit"
)

# Setters for the roles a search result can be assigned to
_ROLE_SETTERS = {
    "o": "with_origin",
    "d": "with_destination",
    "home": "with_home",
    "work": "with_work",
}
_ROUTE_ROLES = frozenset({"o", "d"})


class BoardController:
    """Drives one departure board.

    Every fetch is tagged with a generation; only the newest generation's
    result is applied to the state.
    """

    def __init__(
        self,
        api_client: DeparturesApiClient,
        settings_store: SettingsStoreProtocol,
        refresh_interval_seconds: float = 30,
        search_debounce_seconds: float = 0.3,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            api_client: Client for the departures API.
            settings_store: Where the route and saved places are persisted.
            refresh_interval_seconds: Interval of the periodic refresh.
            search_debounce_seconds: Quiet period before a stop search is sent.
            clock: Source of the current time (UTC).
        """
        self.api_client = api_client
        self.settings_store = settings_store
        self.state = ClientState(settings=settings_store.load())
        self.scheduler = RefreshScheduler(refresh_interval_seconds, self.fetch_departures)
        self.search = SearchDebouncer(
            api_client.search_stops,
            on_results=self._apply_search_results,
            delay_seconds=search_debounce_seconds,
            on_clear=self._clear_search_results,
        )
        self._clock = clock or (lambda: datetime.now(UTC))

    async def fetch_departures(self) -> None:
        """Fetch departures for the current route and apply them if still current."""
        self.state.generation += 1
        generation = self.state.generation
        settings = self.state.settings

        try:
            payload = await self.api_client.fetch_departures(
                settings.origin_id, settings.destination_id
            )
        except UpstreamUnavailableError as e:
            if generation != self.state.generation:
                return
            logger.error(f"Failed to fetch departures: {e}")
            self.state.loading = False
            self.state.fetch_failed = True
            return

        if generation != self.state.generation:
            logger.debug(f"Discarding departures of superseded fetch {generation}")
            return

        self.state.departures = list(payload.get("departures") or [])
        self.state.last_fetch_time = self._clock()
        self.state.loading = False
        self.state.fetch_failed = False

    async def refresh(self) -> None:
        """User-initiated refresh; restarts the periodic timer."""
        await self.scheduler.refresh_now()

    async def set_route(self, settings: ClientSettings) -> None:
        """Switch to a new route, persist it, and refetch."""
        self.settings_store.save(settings)
        self.state.settings = settings
        self.state.clear_departures()
        await self.refresh()

    async def swap(self) -> None:
        await self.set_route(self.state.settings.swapped())

    async def home_to_work(self) -> bool:
        route = self.state.settings.home_to_work()
        if route is None:
            return False
        await self.set_route(route)
        return True

    async def work_to_home(self) -> bool:
        route = self.state.settings.work_to_home()
        if route is None:
            return False
        await self.set_route(route)
        return True

    async def choose_stop(self, role: str, index: int) -> bool:
        """Assign a search result to origin, destination, home or work.

        Changing origin or destination refetches; saving home or work only
        persists. Returns False for an unknown role or result number.
        """
        setter = _ROLE_SETTERS.get(role)
        if setter is None or not 0 <= index < len(self.state.search_results):
            return False

        stop = self.state.search_results[index]
        settings = getattr(self.state.settings, setter)(stop.id, stop.disassembled_name)
        self.state.search_results = []
        if role in _ROUTE_ROLES:
            await self.set_route(settings)
        else:
            self.settings_store.save(settings)
            self.state.settings = settings
        return True

    async def handle_command(self, command: str) -> bool:
        """Run one board command. Returns False when the user quits."""
        command = command.strip()
        if command == "q":
            return False
        if command == "r":
            await self.refresh()
        elif command == "s":
            await self.swap()
        elif command == "hw":
            if not await self.home_to_work():
                logger.warning("Set both home and work first")
        elif command == "wh":
            if not await self.work_to_home():
                logger.warning("Set both home and work first")
        elif command.startswith("/"):
            self.search.submit(command[1:])
        else:
            role, _, number = command.partition(" ")
            if not number.strip().isdigit() or not await self.choose_stop(
                role, int(number) - 1
            ):
                logger.warning(f"Unknown command {command!r}. {COMMAND_HELP}")
        return True

    def render(self) -> str:
        board = render_board(self.state, self._clock())
        if self.state.search_results:
            return f"{board}\n\n{render_search_results(self.state.search_results)}"
        return board

    async def run(self, emit: Callable[[str], None], render_interval_seconds: float = 15) -> None:
        """Fetch, start the periodic refresh, and re-render until cancelled."""
        await self.fetch_departures()
        self.scheduler.start()
        try:
            while True:
                emit(self.render())
                await asyncio.sleep(render_interval_seconds)
        finally:
            await self.scheduler.stop()
            await self.search.close()

    def _apply_search_results(self, stops: list[Stop]) -> None:
        self.state.search_results = stops

    def _clear_search_results(self) -> None:
        self.state.search_results = []
