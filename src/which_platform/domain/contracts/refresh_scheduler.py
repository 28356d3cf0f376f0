"""Protocol for periodic refresh scheduling."""

from typing import Protocol


class RefreshSchedulerProtocol(Protocol):
    """Protocol for a single cancellable refresh timer."""

    def start(self) -> None:
        """Start the periodic timer."""
        ...

    def reset(self) -> None:
        """Cancel the pending timer and start a fresh interval."""
        ...

    async def refresh_now(self) -> None:
        """Refresh immediately and restart the interval."""
        ...

    async def stop(self) -> None:
        """Cancel the timer."""
        ...
