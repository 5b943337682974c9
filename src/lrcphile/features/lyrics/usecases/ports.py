"""Summary: Ports defining lyrics sync use case dependencies.
Why: Decouple use cases from mutagen, HTTP and disk so tests can pass doubles."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from lrcphile.features.lyrics.domain.models import LyricsRecord
from lrcphile.shared.track_metadata import TrackMetadata


@runtime_checkable
class TagReaderPort(Protocol):
    """Port for reading track identity from an audio file."""

    def read(self, audio_path: Path) -> TrackMetadata:
        """Return complete metadata or raise ``MetadataError``."""
        ...


@runtime_checkable
class LyricsLookupPort(Protocol):
    """Port for the remote lyrics database."""

    def fetch_lyrics(self, metadata: TrackMetadata) -> LyricsRecord | None:
        """Return a record, ``None`` when not found, or raise ``LookupTransportError``."""
        ...


@runtime_checkable
class SidecarFilesystemPort(Protocol):
    """Port for sidecar writes."""

    def write_text_atomic(self, path: Path, content: str) -> Path:
        """Replace ``path`` with ``content`` in one step."""
        ...


__all__ = ["LyricsLookupPort", "SidecarFilesystemPort", "TagReaderPort"]
