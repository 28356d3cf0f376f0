"""Periodic refresh timer with a single cancellable task."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from which_platform.domain.contracts.refresh_scheduler import RefreshSchedulerProtocol

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)


class RefreshScheduler(RefreshSchedulerProtocol):
    """Calls a refresh callback every interval.

    Holds at most one timer task. Resetting cancels the running timer before
    starting a new one, so manual refreshes never create overlapping schedules.
    """

    def __init__(self, interval_seconds: float, callback: Callable[[], Awaitable[None]]) -> None:
        self.interval_seconds = interval_seconds
        self._callback = callback
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start the timer if it is not already running."""
        if self.running:
            logger.warning("Refresh scheduler already running")
            return
        self._task = asyncio.create_task(self._loop())

    def reset(self) -> None:
        """Cancel the pending interval and start a new one."""
        if self._task is not None:
            self._task.cancel()
        self._task = asyncio.create_task(self._loop())

    async def refresh_now(self) -> None:
        """Refresh immediately and restart the interval."""
        self.reset()
        await self._callback()

    async def stop(self) -> None:
        """Cancel the timer and wait for it to finish."""
        task, self._task = self._task, None
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            logger.debug("Refresh scheduler cancelled")

    async def _loop(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            try:
                await self._callback()
            except asyncio.CancelledError:
                raise
            except Exception as e:
                logger.error(f"Scheduled refresh failed: {e}")
