"""src/lrcphile/features/lyrics/usecases/processing_types.py
Where: Lyrics feature usecases layer.
What: Structured event identifiers and the helper that emits them.
Why: The console handler renders records by their ``sync_event`` extra.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Any

from lrcphile.platform.logging import logger


class SyncEvent(StrEnum):
    """Structured event identifiers for lyrics sync logs."""

    SCAN_COMPLETE = "sync.scan.complete"
    SCAN_SUBDIRECTORY_ERROR = "sync.scan.subdirectory_error"
    BATCH_START = "sync.batch.start"
    BATCH_COMPLETE = "sync.batch.complete"
    BATCH_NO_FILES = "sync.batch.no_files"
    TRACK_FETCH = "sync.track.fetch"
    TRACK_SKIP = "sync.track.skip"
    TRACK_SAVED = "sync.track.saved"
    TRACK_FAILED = "sync.track.failed"


def log_sync_event(
    level: int,
    event: SyncEvent,
    message: str,
    *message_args: object,
    exc_info: bool = False,
    **context: Any,
) -> None:
    """Log ``message`` with ``event`` and ``context`` attached as record extras."""

    extra: dict[str, Any] = {"sync_event": event.value}
    for key, value in context.items():
        extra[key] = str(value) if isinstance(value, Path) else value
    logger.log(level, message, *message_args, extra=extra, exc_info=exc_info, stacklevel=2)


__all__ = ["SyncEvent", "log_sync_event"]
