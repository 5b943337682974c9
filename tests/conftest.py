"""Shared pytest fixtures and test doubles for the lyrics sync pipeline."""

from __future__ import annotations

import threading
from collections.abc import Callable
from pathlib import Path

import pytest

from lrcphile.features.lyrics.adapters import LocalFilesystemAdapter
from lrcphile.features.lyrics.domain.models import LyricsRecord
from lrcphile.features.lyrics.usecases.track_synchronizer import TrackSynchronizer
from lrcphile.shared.errors import MetadataError
from lrcphile.shared.track_metadata import TrackMetadata


def make_record(
    *,
    instrumental: bool = False,
    synced: str | None = None,
    plain: str | None = None,
    duration: float = 125.7,
) -> LyricsRecord:
    """Build a lookup record resolved for the canonical test track."""

    return LyricsRecord(
        track_name="Song",
        artist_name="Band",
        album_name="Record",
        duration_seconds=duration,
        instrumental=instrumental,
        plain_lyrics=plain,
        synced_lyrics=synced,
    )


class FakeTagReader:
    """Tag reader returning fixed metadata; files named ``broken*`` fail."""

    def __init__(self, duration: float = 125.7) -> None:
        self.duration: float = duration
        self.calls: list[Path] = []

    def read(self, audio_path: Path) -> TrackMetadata:
        self.calls.append(audio_path)
        if audio_path.stem.startswith("broken"):
            raise MetadataError(audio_path, "Missing title tag")
        return TrackMetadata(
            title=audio_path.stem,
            artist="Band",
            album="Record",
            duration_seconds=self.duration,
        )


class FakeLookup:
    """Lookup double returning one canned response for every track.

    ``response`` may be a record, ``None`` (not found) or an exception to raise.
    """

    def __init__(self, response: LyricsRecord | Exception | None = None) -> None:
        self.response: LyricsRecord | Exception | None = response
        self.calls: list[TrackMetadata] = []
        self._lock: threading.Lock = threading.Lock()

    def fetch_lyrics(self, metadata: TrackMetadata) -> LyricsRecord | None:
        with self._lock:
            self.calls.append(metadata)
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


@pytest.fixture
def record_factory() -> Callable[..., LyricsRecord]:
    return make_record


@pytest.fixture
def tag_reader() -> FakeTagReader:
    return FakeTagReader()


@pytest.fixture
def lookup() -> FakeLookup:
    return FakeLookup(make_record(synced="[00:01.00]Hello"))


@pytest.fixture
def synchronizer(tag_reader: FakeTagReader, lookup: FakeLookup) -> TrackSynchronizer:
    return TrackSynchronizer(tag_reader, lookup, LocalFilesystemAdapter())


@pytest.fixture
def audio_file(tmp_path: Path) -> Path:
    """An empty ``.mp3`` file; tags come from ``FakeTagReader``."""

    path = tmp_path / "Song.mp3"
    _ = path.write_bytes(b"")
    return path

