"""Where: src/lrcphile/platform/lrclib/http_client.py
What: HTTP adapter performing single JSON GET requests against LRCLIB.
Why: Decouple network concerns from payload interpretation and sync policy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

import requests

from lrcphile.config.settings import DEFAULT_REQUEST_TIMEOUT
from lrcphile.platform.logging import logger
from lrcphile.shared.errors import LookupTransportError

from .user_agent import resolve_user_agent


@dataclass(slots=True)
class HTTPResult:
    """Represent an HTTP response payload relevant to the LRCLIB client."""

    status: int
    data: Any


class HTTPClient(Protocol):
    """Protocol for HTTP clients able to fetch JSON payloads."""

    def get_json(self, url: str, params: dict[str, str]) -> HTTPResult:
        ...


class LrclibHTTPClient:
    """Perform one GET request per call; no retries.

    Non-2xx responses are returned with ``data=None`` so the caller decides
    what a status means. Network failures and undecodable bodies raise
    ``LookupTransportError``.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        user_agent: str | None = None,
    ) -> None:
        self._timeout: float = timeout
        self._user_agent: str = user_agent or resolve_user_agent()

    @property
    def user_agent(self) -> str:
        return self._user_agent

    def get_json(self, url: str, params: dict[str, str]) -> HTTPResult:
        headers = {
            "Accept": "application/json",
            "User-Agent": self._user_agent,
        }

        try:
            response = requests.get(url, params=params, headers=headers, timeout=self._timeout)
        except requests.RequestException as exc:
            logger.debug("LRCLIB request error for %s: %s", url, exc)
            raise LookupTransportError(f"Request to {url} failed: {exc}") from exc

        status = int(response.status_code)

        if not 200 <= status < 300:
            return HTTPResult(status=status, data=None)

        try:
            data = response.json()
        except ValueError as exc:
            raise LookupTransportError(
                f"Invalid JSON in response from {url}: {exc}", status=status
            ) from exc

        return HTTPResult(status=status, data=data)


__all__ = ["HTTPClient", "HTTPResult", "LrclibHTTPClient"]
