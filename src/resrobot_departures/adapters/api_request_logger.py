"""Utility for logging API requests when RESROBOT_LOG_REQUESTS is enabled."""

import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

SENSITIVE_PARAMS = frozenset({"key", "accessid", "api_key"})
REDACTED = "***REDACTED***"


def should_log_requests() -> bool:
    """Check if request logging is enabled via RESROBOT_LOG_REQUESTS environment variable."""
    return os.getenv("RESROBOT_LOG_REQUESTS", "").lower() == "true"


def redact_params(params: dict[str, Any]) -> dict[str, Any]:
    """Replace credentials in query parameters so they never reach the log."""
    return {k: REDACTED if k.lower() in SENSITIVE_PARAMS else v for k, v in params.items()}


def _build_url_with_params(url: str, params: dict[str, Any] | None) -> str:
    """Build full URL with query parameters."""
    if not params:
        return url
    param_str = "&".join(f"{k}={v}" for k, v in sorted(params.items()))
    return f"{url}?{param_str}" if "?" not in url else f"{url}&{param_str}"


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
) -> None:
    """Log API request details if RESROBOT_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL without the query parameters below.
        params: Query parameters (optional, the API key is redacted).
    """
    if not should_log_requests():
        return

    safe_params = redact_params(params) if params else None
    logger.info(f"API Request: {method} {_build_url_with_params(url, safe_params)}")
