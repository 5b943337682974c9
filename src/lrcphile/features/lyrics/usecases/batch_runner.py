"""src/lrcphile/features/lyrics/usecases/batch_runner.py
What: Drive the track synchronizer over a file list with bounded concurrency.
Why: Overlap network waits while keeping one terminal outcome per track and
     run totals that always add up.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Protocol

from lrcphile.config.settings import DEFAULT_CONCURRENCY_LIMIT
from lrcphile.features.lyrics.domain.models import (
    BatchReport,
    RunStatistics,
    SyncResult,
    TrackOutcome,
)

from .processing_types import SyncEvent, log_sync_event

ProgressCallback = Callable[[int, int, Path], None]


class SynchronizerLike(Protocol):
    """Subset of TrackSynchronizer the runner depends on."""

    def sync(
        self,
        audio_path: Path,
        *,
        override_existing: bool = False,
        sequence: int | None = None,
        total: int | None = None,
        source_root: Path | None = None,
    ) -> SyncResult:
        ...


def _sync_isolated(
    synchronizer: SynchronizerLike,
    statistics: RunStatistics,
    audio_path: Path,
    *,
    override_existing: bool,
    sequence: int,
    total: int,
    source_root: Path | None,
) -> SyncResult:
    """Run one track and record its bucket; unexpected errors become failures."""

    try:
        result = synchronizer.sync(
            audio_path,
            override_existing=override_existing,
            sequence=sequence,
            total=total,
            source_root=source_root,
        )
    except Exception as exc:
        log_sync_event(
            logging.ERROR,
            SyncEvent.TRACK_FAILED,
            "Unexpected error processing %s: %s",
            audio_path,
            exc,
            exc_info=True,
            sequence=sequence,
            total_files=total,
            source_path=audio_path,
            source_base_path=source_root,
            reason=TrackOutcome.UNEXPECTED_ERROR.label,
            error_message=str(exc),
        )
        result = SyncResult(
            audio_path=audio_path,
            outcome=TrackOutcome.UNEXPECTED_ERROR,
            error_message=str(exc),
        )
    statistics.record(result.bucket)
    return result


def run_batch(
    files: Sequence[Path],
    synchronizer: SynchronizerLike,
    *,
    concurrency_limit: int = DEFAULT_CONCURRENCY_LIMIT,
    override_existing: bool = False,
    progress_callback: ProgressCallback | None = None,
    source_root: Path | None = None,
) -> BatchReport:
    """Synchronize ``files`` with at most ``concurrency_limit`` tracks in flight.

    Args:
        files: Tracks in submission order.
        synchronizer: Per-track worker.
        concurrency_limit: Worker count; must be at least 1.
        override_existing: Passed through to every track.
        progress_callback: Called as ``(completed, total, path)`` once per
            finished track, from the calling thread.
        source_root: Base used to shorten paths in log output.

    Returns:
        BatchReport: Statistics plus results in the order of ``files``.

    Raises:
        ValueError: If ``concurrency_limit`` is less than 1.
    """

    if concurrency_limit < 1:
        raise ValueError(f"concurrency_limit must be at least 1, got {concurrency_limit}")

    total = len(files)
    statistics = RunStatistics(total=total)
    report = BatchReport(statistics=statistics)

    if total == 0:
        log_sync_event(
            logging.INFO,
            SyncEvent.BATCH_NO_FILES,
            "No audio files to process",
            directory=source_root,
        )
        return report

    log_sync_event(
        logging.DEBUG,
        SyncEvent.BATCH_START,
        "Starting batch of %d tracks",
        total,
        directory=source_root,
        total_files=total,
        concurrency_limit=concurrency_limit,
    )
    started = time.perf_counter()

    slots: list[SyncResult | None] = [None] * total
    completed = 0
    with ThreadPoolExecutor(
        max_workers=min(concurrency_limit, total),
        thread_name_prefix="lrcphile-sync",
    ) as executor:
        futures: dict[Future[SyncResult], int] = {
            executor.submit(
                _sync_isolated,
                synchronizer,
                statistics,
                path,
                override_existing=override_existing,
                sequence=index + 1,
                total=total,
                source_root=source_root,
            ): index
            for index, path in enumerate(files)
        }
        try:
            for future in as_completed(futures):
                index = futures[future]
                slots[index] = future.result()
                completed += 1
                if progress_callback is not None:
                    progress_callback(completed, total, files[index])
        except BaseException:
            # Drop queued tracks; only those already running finish.
            executor.shutdown(wait=False, cancel_futures=True)
            raise

    report.results = [result for result in slots if result is not None]

    summary = statistics.snapshot()
    log_sync_event(
        logging.DEBUG,
        SyncEvent.BATCH_COMPLETE,
        "Batch complete: %d success, %d failed, %d skipped",
        summary["success"],
        summary["failed"],
        summary["skipped"],
        directory=source_root,
        duration_seconds=round(time.perf_counter() - started, 4),
        **summary,
    )
    return report


__all__ = ["ProgressCallback", "SynchronizerLike", "run_batch"]
