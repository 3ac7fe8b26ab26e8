"""Utility for logging upstream API requests when FERRY_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"
SENSITIVE_PARAMS = {"apiaccesscode", "api_key", "access_token"}
SENSITIVE_HEADERS = {"authorization", "cookie", "x-api-key"}


def should_log_requests() -> bool:
    """Check if request logging is enabled via FERRY_LOG_REQUESTS environment variable."""
    return os.getenv("FERRY_LOG_REQUESTS", "").lower() == "true"


def _redact(values: dict[str, Any], sensitive_keys: set[str]) -> dict[str, Any]:
    return {k: REDACTED if k.lower() in sensitive_keys else v for k, v in values.items()}


def _build_url_with_params(url: str, params: dict[str, Any] | None) -> str:
    """Build full URL with query parameters, credentials masked."""
    if not params:
        return url
    safe_params = _redact(params, SENSITIVE_PARAMS)
    param_str = "&".join(f"{k}={v}" for k, v in sorted(safe_params.items()))
    return f"{url}?{param_str}" if "?" not in url else f"{url}&{param_str}"


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """Log API request details if FERRY_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method.
        url: Request URL.
        params: Query parameters (optional, access codes are redacted).
        headers: Request headers (optional, sensitive headers are redacted).
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {_build_url_with_params(url, params)}"]
    if headers:
        safe_headers = _redact(headers, SENSITIVE_HEADERS)
        log_parts.append(f"Headers: {json.dumps(safe_headers, indent=2)}")

    logger.info("API Request:\n" + "\n".join(log_parts))
