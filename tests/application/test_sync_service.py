"""Tests for the lyrics sync application service."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from pytest_mock import MockerFixture

from lrcphile.application.services import sync_service
from lrcphile.application.services.sync_service import SyncLyricsService, SyncRequest
from lrcphile.features.lyrics.adapters import LocalFilesystemAdapter, LrclibLookupAdapter
from lrcphile.features.lyrics.domain.models import TrackOutcome
from lrcphile.features.lyrics.usecases.scanner import ScanResult

if TYPE_CHECKING:
    from conftest import FakeLookup, FakeTagReader


def _service(tag_reader: FakeTagReader, lookup: FakeLookup, **kwargs: Any) -> SyncLyricsService:
    return SyncLyricsService(
        tag_reader_factory=lambda: tag_reader,
        lookup_factory=lambda _request: lookup,
        filesystem_factory=LocalFilesystemAdapter,
        **kwargs,
    )


def test_default_lookup_is_bound_to_request_url() -> None:
    service = SyncLyricsService()
    request = SyncRequest(service_url="https://self-hosted.example", request_timeout=2.0)

    synchronizer = service.build_synchronizer(request)

    lookup = synchronizer._lookup  # pyright: ignore[reportPrivateUsage]
    assert isinstance(lookup, LrclibLookupAdapter)
    assert lookup.base_url == "https://self-hosted.example"


def test_sync_file_runs_one_track(
    tmp_path: Path, tag_reader: FakeTagReader, lookup: FakeLookup
) -> None:
    audio = tmp_path / "Song.mp3"
    _ = audio.write_bytes(b"")

    result = _service(tag_reader, lookup).sync_file(SyncRequest(), audio)

    assert result.outcome is TrackOutcome.SAVED_SYNCED
    assert audio.with_suffix(".lrc").exists()


def test_scan_passes_recursive_flag(
    tag_reader: FakeTagReader, lookup: FakeLookup, mocker: MockerFixture
) -> None:
    scanner = mocker.Mock(return_value=ScanResult(root=Path("/music")))
    service = _service(tag_reader, lookup, scanner=scanner)

    _ = service.scan(SyncRequest(recursive=True), Path("/music"))

    scanner.assert_called_once_with(Path("/music"), True)


def test_scanned_files_honour_override_and_limit(
    tmp_path: Path, tag_reader: FakeTagReader, lookup: FakeLookup, mocker: MockerFixture
) -> None:
    for name in ("a.mp3", "b.mp3"):
        _ = (tmp_path / name).write_bytes(b"")
        _ = (tmp_path / name).with_suffix(".txt").write_text("old", encoding="utf-8")
    run_batch = mocker.spy(sync_service, "run_batch")

    service = _service(tag_reader, lookup)
    request = SyncRequest(override_existing=True, concurrency_limit=1)
    scan = service.scan(request, tmp_path)

    report = service.sync_files_with_progress(request, scan.files, source_root=tmp_path)

    assert report.statistics.success == 2
    assert run_batch.call_args.kwargs["concurrency_limit"] == 1
    assert run_batch.call_args.kwargs["source_root"] == tmp_path


def test_sync_files_reports_progress(
    tmp_path: Path, tag_reader: FakeTagReader, lookup: FakeLookup
) -> None:
    files: list[Path] = []
    for name in ("a.mp3", "b.mp3", "c.mp3"):
        path = tmp_path / name
        _ = path.write_bytes(b"")
        files.append(path)
    seen: list[int] = []

    report = _service(tag_reader, lookup).sync_files_with_progress(
        SyncRequest(), files, lambda done, _total, _path: seen.append(done)
    )

    assert report.statistics.total == 3
    assert sorted(seen) == [1, 2, 3]
