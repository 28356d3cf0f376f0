"""Domain errors."""

from which_platform.domain.models.error_details import ErrorDetails


class UpstreamUnavailableError(Exception):
    """The trip planner could not be reached or answered with an error.

    Surfaces as a single request failure; never raised per journey.
    """

    def __init__(self, details: ErrorDetails, message: str | None = None) -> None:
        self.details = details
        super().__init__(message or details.reason)

    @property
    def status_code(self) -> int | None:
        return self.details.status_code
