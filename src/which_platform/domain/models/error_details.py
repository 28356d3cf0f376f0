"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Details about an error, including HTTP status code if applicable."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = None
    reason: str

    @classmethod
    def from_status(cls, status_code: int | None) -> "ErrorDetails":
        """Build error details with a human readable reason for an upstream status."""
        if status_code == 401 or status_code == 403:
            reason = "Upstream rejected the API key"
        elif status_code == 429:
            reason = "Rate limit exceeded"
        elif status_code == 502:
            reason = "Bad gateway (server error)"
        elif status_code == 503:
            reason = "Service unavailable"
        elif status_code == 504:
            reason = "Gateway timeout"
        elif status_code is not None:
            reason = f"HTTP {status_code}"
        else:
            reason = "Unknown error"
        return cls(status_code=status_code, reason=reason)
