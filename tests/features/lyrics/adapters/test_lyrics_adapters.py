"""Tests for lyrics adapters."""

from __future__ import annotations

from pathlib import Path

from pytest_mock import MockerFixture

from lrcphile.features.lyrics.adapters import (
    LocalFilesystemAdapter,
    LrclibLookupAdapter,
    MutagenTagReader,
)
from lrcphile.features.lyrics.usecases.ports import (
    LyricsLookupPort,
    SidecarFilesystemPort,
    TagReaderPort,
)
from lrcphile.platform.lrclib import LrclibClient
from lrcphile.shared.track_metadata import TrackMetadata


def test_adapters_satisfy_ports() -> None:
    assert isinstance(LocalFilesystemAdapter(), SidecarFilesystemPort)
    assert isinstance(MutagenTagReader(), TagReaderPort)
    assert isinstance(LrclibLookupAdapter(LrclibClient("https://example.test")), LyricsLookupPort)


def test_filesystem_adapter_writes_file(tmp_path: Path) -> None:
    target = tmp_path / "a.lrc"

    written = LocalFilesystemAdapter().write_text_atomic(target, "[ti: A]\nbody")

    assert written == target
    assert target.read_text(encoding="utf-8") == "[ti: A]\nbody"


def test_tag_reader_delegates_to_extractor(mocker: MockerFixture) -> None:
    metadata = TrackMetadata(title="S", artist="B", album="R", duration_seconds=1.0)
    extract = mocker.patch(
        "lrcphile.features.lyrics.adapters.tag_reader_adapter.MetadataExtractor.extract",
        return_value=metadata,
    )

    assert MutagenTagReader().read(Path("a.mp3")) is metadata
    extract.assert_called_once_with(Path("a.mp3"))


def test_lookup_adapter_delegates_to_client(mocker: MockerFixture) -> None:
    client = mocker.Mock(spec=LrclibClient)
    client.base_url = "https://example.test"
    client.fetch_lyrics.return_value = None
    metadata = TrackMetadata(title="S", artist="B", album="R", duration_seconds=1.0)
    adapter = LrclibLookupAdapter(client)

    assert adapter.fetch_lyrics(metadata) is None
    assert adapter.base_url == "https://example.test"
    client.fetch_lyrics.assert_called_once_with(metadata)
