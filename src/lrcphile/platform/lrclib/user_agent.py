"""Where: src/lrcphile/platform/lrclib/user_agent.py
What: Build the identifying User-Agent sent to the lyrics database.
Why: LRCLIB asks clients to identify themselves with a name, version, and homepage.
"""

from __future__ import annotations

import os

from lrcphile.config.settings import APP_NAME, APP_URL, APP_VERSION


def format_user_agent(app_name: str, app_version: str, homepage: str) -> str:
    """Return ``app vVersion (homepage)`` when a homepage is available."""

    stripped = homepage.strip()
    if stripped:
        return f"{app_name} v{app_version} ({stripped})"
    return f"{app_name} v{app_version}"


def resolve_user_agent() -> str:
    """Provide the user agent that outbound HTTP calls should send."""

    env = os.getenv("LRCPHILE_USER_AGENT")
    if env and env.strip():
        return env.strip()
    return format_user_agent(APP_NAME, APP_VERSION, APP_URL)


__all__ = ["format_user_agent", "resolve_user_agent"]
