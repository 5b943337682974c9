"""
Summary: Lookup adapter bridging LyricsLookupPort to the LRCLIB client.
Why: Keep HTTP wiring in the platform layer and out of use cases.
"""

from __future__ import annotations

from lrcphile.features.lyrics.domain.models import LyricsRecord
from lrcphile.features.lyrics.usecases.ports import LyricsLookupPort
from lrcphile.platform.lrclib import LrclibClient
from lrcphile.shared.track_metadata import TrackMetadata


class LrclibLookupAdapter(LyricsLookupPort):
    """Adapter delegating lookups to an ``LrclibClient`` bound to one base URL."""

    def __init__(self, client: LrclibClient) -> None:
        self._client: LrclibClient = client

    @property
    def base_url(self) -> str:
        return self._client.base_url

    def fetch_lyrics(self, metadata: TrackMetadata) -> LyricsRecord | None:
        return self._client.fetch_lyrics(metadata)


__all__ = ["LrclibLookupAdapter"]
