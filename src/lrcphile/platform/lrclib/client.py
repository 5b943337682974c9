"""Where: src/lrcphile/platform/lrclib/client.py
What: LRCLIB lookup client keyed on track identity.
Why: Translate TrackMetadata into the ``/api/get`` query and interpret the
     response status so the synchronizer only sees records or ``None``.

Status handling:
- ``404`` means the service has no entry for the track and yields ``None``
- any other non-2xx status raises ``LookupTransportError``
- a 2xx body that is not a lyrics object raises ``LookupTransportError``
"""

from __future__ import annotations

from typing import Final

from lrcphile.config.settings import DEFAULT_REQUEST_TIMEOUT, DEFAULT_SERVICE_URL
from lrcphile.features.lyrics.domain.models import LyricsRecord, MalformedPayloadError
from lrcphile.platform.logging import logger
from lrcphile.shared.errors import LookupTransportError
from lrcphile.shared.track_metadata import TrackMetadata

from .http_client import HTTPClient, LrclibHTTPClient

GET_ENDPOINT: Final[str] = "/api/get"
_NOT_FOUND: Final[int] = 404


def format_duration_param(duration_seconds: float) -> str:
    """Render the duration query value; whole seconds drop the fractional part."""

    if float(duration_seconds).is_integer():
        return str(int(duration_seconds))
    return repr(float(duration_seconds))


def build_query(metadata: TrackMetadata) -> dict[str, str]:
    return {
        "track_name": metadata.title,
        "artist_name": metadata.artist,
        "album_name": metadata.album,
        "duration": format_duration_param(metadata.duration_seconds),
    }


class LrclibClient:
    """Fetch lyrics records from an LRCLIB-compatible service."""

    def __init__(
        self,
        base_url: str = DEFAULT_SERVICE_URL,
        *,
        http_client: HTTPClient | None = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ) -> None:
        self.base_url: str = base_url.rstrip("/")
        self._http: HTTPClient = http_client or LrclibHTTPClient(timeout=timeout)

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}{GET_ENDPOINT}"

    def fetch_lyrics(self, metadata: TrackMetadata) -> LyricsRecord | None:
        """Look up one track.

        Returns ``None`` when the service reports no entry (HTTP 404).

        Raises:
            LookupTransportError: On network failure, unexpected status, or
                a body that cannot be read as a lyrics record.
        """

        result = self._http.get_json(self.endpoint, build_query(metadata))

        if result.status == _NOT_FOUND:
            logger.debug(
                "LRCLIB has no entry for '%s' by '%s'", metadata.title, metadata.artist
            )
            return None

        if not 200 <= result.status < 300:
            raise LookupTransportError(
                f"LRCLIB returned HTTP {result.status} for '{metadata.title}'",
                status=result.status,
            )

        try:
            return LyricsRecord.from_payload(result.data)
        except MalformedPayloadError as exc:
            raise LookupTransportError(
                f"Malformed LRCLIB payload for '{metadata.title}': {exc}",
                status=result.status,
            ) from exc


__all__ = ["GET_ENDPOINT", "LrclibClient", "build_query", "format_duration_param"]
