"""Utility for logging outbound API requests when WP_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})
REDACTED = "***REDACTED***"


def should_log_requests() -> bool:
    """Check if request logging is enabled via WP_LOG_REQUESTS environment variable."""
    return os.getenv("WP_LOG_REQUESTS", "").lower() == "true"


def _build_url_with_params(url: str, params: dict[str, Any] | None) -> str:
    if not params:
        return url
    query = "&".join(f"{key}={value}" for key, value in sorted(params.items()))
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    """Replace credentials in headers so they never reach the log."""
    return {
        name: REDACTED if name.lower() in SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """Log an outbound request if WP_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method.
        url: Request URL without query string.
        params: Query parameters.
        headers: Request headers; credentials are redacted.
    """
    if not should_log_requests():
        return

    lines = [f"{method} {_build_url_with_params(url, params)}"]
    if headers:
        lines.append(f"Headers: {json.dumps(redact_headers(headers), indent=2)}")

    logger.info("API Request:\n" + "\n".join(lines))
