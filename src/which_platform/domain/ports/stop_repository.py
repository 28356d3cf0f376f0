"""Stop repository port."""

from typing import Protocol

from which_platform.domain.models.stop import Stop


class StopRepository(Protocol):
    """Port for searching stops by name."""

    async def search_stops(self, query: str) -> list[Stop]:
        """Find stops matching a free-text query."""
        ...
