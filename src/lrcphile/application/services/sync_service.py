"""Application service for synchronizing lyrics sidecars.

This layer centralizes construction of the tag reader, lookup client and
synchronizer so the CLI (or any other front end) only describes what to do.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import final

from lrcphile.config.settings import (
    DEFAULT_CONCURRENCY_LIMIT,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_SERVICE_URL,
)
from lrcphile.features.lyrics.adapters import (
    LocalFilesystemAdapter,
    LrclibLookupAdapter,
    MutagenTagReader,
)
from lrcphile.features.lyrics.domain.models import BatchReport, SyncResult
from lrcphile.features.lyrics.usecases import (
    LyricsLookupPort,
    ScanResult,
    SidecarFilesystemPort,
    TagReaderPort,
    TrackSynchronizer,
    run_batch,
    scan_directory,
)
from lrcphile.platform.lrclib import LrclibClient


@dataclass(frozen=True)
class SyncRequest:
    """Input parameters for a sync run.

    Attributes:
        service_url: Base URL of the lyrics database.
        override_existing: Refetch tracks that already have a sidecar.
        recursive: Descend into subdirectories when scanning.
        concurrency_limit: Tracks in flight at once for directory runs.
        request_timeout: Seconds allowed per lookup request.
    """

    service_url: str = DEFAULT_SERVICE_URL
    override_existing: bool = False
    recursive: bool = False
    concurrency_limit: int = DEFAULT_CONCURRENCY_LIMIT
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT


def _default_lookup_factory(request: SyncRequest) -> LyricsLookupPort:
    return LrclibLookupAdapter(LrclibClient(request.service_url, timeout=request.request_timeout))


@final
class SyncLyricsService:
    """Application service that wires and runs lyrics synchronization."""

    def __init__(
        self,
        *,
        tag_reader_factory: Callable[[], TagReaderPort] | None = None,
        lookup_factory: Callable[[SyncRequest], LyricsLookupPort] | None = None,
        filesystem_factory: Callable[[], SidecarFilesystemPort] | None = None,
        scanner: Callable[[Path, bool], ScanResult] | None = None,
    ) -> None:
        """Create a service with overridable infrastructure factories.

        Tests can inject light-weight doubles while production code relies on
        the default adapters.
        """

        self._tag_reader_factory: Callable[[], TagReaderPort] = tag_reader_factory or MutagenTagReader
        self._lookup_factory: Callable[[SyncRequest], LyricsLookupPort] = (
            lookup_factory or _default_lookup_factory
        )
        self._filesystem_factory: Callable[[], SidecarFilesystemPort] = (
            filesystem_factory or LocalFilesystemAdapter
        )
        self._scanner: Callable[[Path, bool], ScanResult] = scanner or scan_directory

    def build_synchronizer(self, request: SyncRequest) -> TrackSynchronizer:
        """Build a synchronizer bound to the request's service URL."""

        return TrackSynchronizer(
            tag_reader=self._tag_reader_factory(),
            lookup=self._lookup_factory(request),
            filesystem=self._filesystem_factory(),
        )

    def sync_file(self, request: SyncRequest, file_path: Path) -> SyncResult:
        """Synchronize a single file without the batch runner."""

        synchronizer = self.build_synchronizer(request)
        return synchronizer.sync(
            file_path,
            override_existing=request.override_existing,
            sequence=1,
            total=1,
            source_root=file_path.parent,
        )

    def scan(self, request: SyncRequest, directory: Path) -> ScanResult:
        """Collect audio files below ``directory``.

        Raises:
            DirectoryReadError: If ``directory`` cannot be listed.
        """

        return self._scanner(directory, request.recursive)

    def sync_files_with_progress(
        self,
        request: SyncRequest,
        files: Sequence[Path],
        progress_callback: Callable[[int, int, Path], None] | None = None,
        *,
        source_root: Path | None = None,
    ) -> BatchReport:
        """Synchronize ``files`` and report progress through a callback.

        Args:
            request: Sync parameters.
            files: Scanned audio files in submission order.
            progress_callback: Receives (completed_count, total_count, current_file_path).
            source_root: Directory the files were scanned from.

        Returns:
            Batch report with statistics and per-track results.
        """

        synchronizer = self.build_synchronizer(request)
        return run_batch(
            files,
            synchronizer,
            concurrency_limit=request.concurrency_limit,
            override_existing=request.override_existing,
            progress_callback=progress_callback,
            source_root=source_root,
        )
