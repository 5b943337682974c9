"""Where: src/lrcphile/config/settings.py
What: Application identity and validated runtime defaults.
Why: Expose constants and config-derived values to feature layers without file I/O.
Trade-offs: - Validation is limited to simple boundary checks.
"""

from __future__ import annotations

from typing import Final

from lrcphile.config.config import Config

# Application identity -------------------------------------------------------

APP_NAME: Final[str] = "lrcphile"
APP_VERSION: Final[str] = "0.1.0"
APP_URL: Final[str] = "https://github.com/khalil-cheddadi/lrcphile"


# Lyrics database defaults ---------------------------------------------------

DEFAULT_SERVICE_URL: Final[str] = "https://lrclib.net"

# Tracks in flight at once during a directory run.
DEFAULT_CONCURRENCY_LIMIT: Final[int] = 4

# Seconds allowed for the whole lookup request.
DEFAULT_REQUEST_TIMEOUT: Final[float] = 15.0


def resolve_service_url(config: Config, override: str | None = None) -> str:
    """Return the lookup base URL, preferring an explicit override."""

    for candidate in (override, config.service_url):
        if candidate and candidate.strip():
            return candidate.strip().rstrip("/")
    return DEFAULT_SERVICE_URL


def resolve_concurrency_limit(config: Config, override: int | None = None) -> int:
    """Return a positive concurrency limit, falling back to the default."""

    for candidate in (override, config.concurrency_limit):
        if isinstance(candidate, int) and not isinstance(candidate, bool) and candidate > 0:
            return candidate
    return DEFAULT_CONCURRENCY_LIMIT


def resolve_request_timeout(config: Config) -> float:
    """Return a positive request timeout in seconds."""

    timeout = config.request_timeout
    if isinstance(timeout, (int, float)) and not isinstance(timeout, bool) and timeout > 0:
        return float(timeout)
    return DEFAULT_REQUEST_TIMEOUT


__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "APP_URL",
    "DEFAULT_SERVICE_URL",
    "DEFAULT_CONCURRENCY_LIMIT",
    "DEFAULT_REQUEST_TIMEOUT",
    "resolve_service_url",
    "resolve_concurrency_limit",
    "resolve_request_timeout",
]
