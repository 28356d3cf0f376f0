"""Per-IP rate limiting middleware for the JSON API using throttled-py."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from throttled import RateLimiterType, Throttled, rate_limiter, store

logger = logging.getLogger(__name__)

DEFAULT_RETRY_AFTER_SECONDS = 60.0


def extract_client_ip(request: Request) -> str:
    """Client IP, taken from the first X-Forwarded-For entry when behind a proxy."""
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        client_ip = forwarded_for.split(",")[0].strip()
        if client_ip:
            return client_ip

    if request.client and request.client.host:
        return request.client.host

    logger.warning("Could not determine client IP, using 'unknown'")
    return "unknown"


def retry_after_seconds(result: Any) -> float:
    """Seconds until the client may retry, read from a throttled-py result."""
    state = getattr(result, "state", None)
    if state is not None and hasattr(state, "retry_after"):
        return float(state.retry_after)
    if hasattr(result, "retry_after"):
        return float(result.retry_after)
    return DEFAULT_RETRY_AFTER_SECONDS


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Limits requests under a path prefix per client IP with a token bucket."""

    def __init__(
        self,
        app: Callable,
        requests_per_minute: int = 100,
        path_prefix: str = "/api/",
    ) -> None:
        """Initialize rate limiting middleware.

        Args:
            app: The ASGI application to wrap.
            requests_per_minute: Requests allowed per IP per minute. Zero or less
                disables limiting.
            path_prefix: Only paths starting with this prefix are limited.
        """
        super().__init__(app)
        self.path_prefix = path_prefix
        self.enabled = requests_per_minute > 0
        self.store = store.MemoryStore()
        if not self.enabled:
            self.quota = None
            logger.info("Rate limiting disabled")
            return
        self.quota = rate_limiter.per_min(requests_per_minute, burst=requests_per_minute)
        logger.info(f"Rate limiting {path_prefix}* to {requests_per_minute} requests/min per IP")

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if not self.enabled or not request.url.path.startswith(self.path_prefix):
            return await call_next(request)

        client_ip = extract_client_ip(request)
        throttle = Throttled(
            key=client_ip,
            using=RateLimiterType.TOKEN_BUCKET.value,
            quota=self.quota,
            store=self.store,
        )
        result = throttle.limit()
        if result.limited:
            retry_after = retry_after_seconds(result)
            logger.warning(f"Rate limit exceeded for IP {client_ip}, retry after {retry_after}s")
            return JSONResponse(
                {"error": "Rate limit exceeded. Please try again later."},
                status_code=429,
                headers={"Retry-After": str(int(retry_after))},
            )

        return await call_next(request)
