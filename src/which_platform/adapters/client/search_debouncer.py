"""Debounced stop search for typed input."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from which_platform.domain.models.stop import Stop

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2


class SearchDebouncer:
    """Coalesces rapid queries into one search.

    Each submitted query bumps a generation counter; a search result is
    delivered only if no newer query was submitted while it ran.
    """

    def __init__(
        self,
        search: Callable[[str], Awaitable[list[Stop]]],
        on_results: Callable[[list[Stop]], None],
        delay_seconds: float = 0.3,
        on_clear: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the debouncer.

        Args:
            search: Coroutine performing the stop search.
            on_results: Receives results of the latest query.
            delay_seconds: Quiet period before a query is searched.
            on_clear: Called when a query is too short to search.
        """
        self._search = search
        self._on_results = on_results
        self._on_clear = on_clear
        self.delay_seconds = delay_seconds
        self.generation = 0
        self._pending: asyncio.Task | None = None

    def submit(self, query: str) -> None:
        """Schedule a search for the query, superseding any earlier one."""
        self.generation += 1
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None

        query = query.strip()
        if len(query) < MIN_QUERY_LENGTH:
            if self._on_clear is not None:
                self._on_clear()
            return

        self._pending = asyncio.create_task(self._run(query, self.generation))

    async def wait(self) -> None:
        """Wait for the pending search, if any, to settle."""
        if self._pending is None:
            return
        try:
            await self._pending
        except asyncio.CancelledError:
            pass

    async def close(self) -> None:
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        await self.wait()

    async def _run(self, query: str, generation: int) -> None:
        await asyncio.sleep(self.delay_seconds)
        try:
            results = await self._search(query)
        except Exception as e:
            logger.error(f"Search error for {query!r}: {e}")
            return

        if generation != self.generation:
            logger.debug(f"Discarding results for superseded query {query!r}")
            return
        self._on_results(results)
