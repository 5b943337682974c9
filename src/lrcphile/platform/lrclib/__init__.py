"""LRCLIB lyrics database access.

``client`` interprets lookups, ``http_client`` performs the GET requests and
``user_agent`` builds the identifying header.
"""

from .client import LrclibClient, build_query, format_duration_param
from .http_client import HTTPClient, HTTPResult, LrclibHTTPClient
from .user_agent import format_user_agent, resolve_user_agent

__all__ = [
    "HTTPClient",
    "HTTPResult",
    "LrclibClient",
    "LrclibHTTPClient",
    "build_query",
    "format_duration_param",
    "format_user_agent",
    "resolve_user_agent",
]
