"""Summary: Value objects describing lookups, per-track outcomes and run totals.
Why: Give the synchronizer, runner and presentation one vocabulary for results.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, StrEnum
from pathlib import Path
from typing import Any, cast

from lrcphile.shared.track_metadata import TrackMetadata


class MalformedPayloadError(ValueError):
    """Raised when a lookup body cannot be read as a lyrics record."""


def _optional_text(payload: Mapping[str, Any], key: str) -> str | None:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise MalformedPayloadError(f"'{key}' must be a string or null")
    return value if value.strip() else None


def _required_text(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str):
        raise MalformedPayloadError(f"'{key}' must be a string")
    return value


@dataclass(frozen=True, slots=True)
class LyricsRecord:
    """Lyrics entry as resolved by the lookup service."""

    track_name: str
    artist_name: str
    album_name: str
    duration_seconds: float
    instrumental: bool
    plain_lyrics: str | None = None
    synced_lyrics: str | None = None
    id: int | None = None

    @classmethod
    def from_payload(cls, payload: object) -> LyricsRecord:
        """Build a record from the service's camelCase JSON object.

        Empty lyric strings are treated as absent.

        Raises:
            MalformedPayloadError: If required keys are missing or mistyped.
        """

        if not isinstance(payload, dict):
            raise MalformedPayloadError("payload is not a JSON object")
        data = cast(dict[str, Any], payload)

        duration = data.get("duration")
        if isinstance(duration, bool) or not isinstance(duration, (int, float)):
            raise MalformedPayloadError("'duration' must be a number")

        instrumental = data.get("instrumental", False)
        if not isinstance(instrumental, bool):
            raise MalformedPayloadError("'instrumental' must be a boolean")

        record_id = data.get("id")
        if isinstance(record_id, bool) or not isinstance(record_id, int):
            record_id = None

        return cls(
            track_name=_required_text(data, "trackName"),
            artist_name=_required_text(data, "artistName"),
            album_name=_required_text(data, "albumName"),
            duration_seconds=float(duration),
            instrumental=instrumental,
            plain_lyrics=_optional_text(data, "plainLyrics"),
            synced_lyrics=_optional_text(data, "syncedLyrics"),
            id=record_id,
        )

    @property
    def has_synced(self) -> bool:
        return self.synced_lyrics is not None

    @property
    def has_plain(self) -> bool:
        return self.plain_lyrics is not None


class OutcomeBucket(StrEnum):
    """Statistics bucket a track outcome counts toward."""

    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"


class TrackOutcome(Enum):
    """Terminal state of one track synchronization."""

    SKIPPED_INSTRUMENTAL = "skipped_instrumental"
    SKIPPED_EXISTING = "skipped_existing"
    SAVED_INSTRUMENTAL = "saved_instrumental"
    SAVED_SYNCED = "saved_synced"
    SAVED_PLAIN = "saved_plain"
    NOT_FOUND = "not_found"
    NO_LYRICS = "no_lyrics"
    FETCH_FAILED = "fetch_failed"
    METADATA_FAILED = "metadata_failed"
    WRITE_FAILED = "write_failed"
    UNEXPECTED_ERROR = "unexpected_error"

    @property
    def bucket(self) -> OutcomeBucket:
        if self in _SKIPPED_OUTCOMES:
            return OutcomeBucket.SKIPPED
        if self in _SAVED_OUTCOMES:
            return OutcomeBucket.SUCCESS
        return OutcomeBucket.FAILED

    @property
    def label(self) -> str:
        """Short human readable description for logs and summaries."""

        return _OUTCOME_LABELS[self]


_SKIPPED_OUTCOMES = frozenset({TrackOutcome.SKIPPED_INSTRUMENTAL, TrackOutcome.SKIPPED_EXISTING})
_SAVED_OUTCOMES = frozenset(
    {TrackOutcome.SAVED_INSTRUMENTAL, TrackOutcome.SAVED_SYNCED, TrackOutcome.SAVED_PLAIN}
)
_OUTCOME_LABELS: dict[TrackOutcome, str] = {
    TrackOutcome.SKIPPED_INSTRUMENTAL: "known instrumental",
    TrackOutcome.SKIPPED_EXISTING: "lyrics already exist",
    TrackOutcome.SAVED_INSTRUMENTAL: "instrumental marker",
    TrackOutcome.SAVED_SYNCED: "synced lyrics",
    TrackOutcome.SAVED_PLAIN: "plain lyrics",
    TrackOutcome.NOT_FOUND: "not found",
    TrackOutcome.NO_LYRICS: "no lyrics in record",
    TrackOutcome.FETCH_FAILED: "lookup failed",
    TrackOutcome.METADATA_FAILED: "unreadable metadata",
    TrackOutcome.WRITE_FAILED: "could not write lyrics file",
    TrackOutcome.UNEXPECTED_ERROR: "unexpected error",
}


@dataclass(slots=True)
class SyncResult:
    """Report produced for exactly one audio file."""

    audio_path: Path
    outcome: TrackOutcome
    sidecar_path: Path | None = None
    metadata: TrackMetadata | None = None
    error_message: str | None = None

    @property
    def bucket(self) -> OutcomeBucket:
        return self.outcome.bucket

    @property
    def success(self) -> bool:
        return self.bucket is OutcomeBucket.SUCCESS


@dataclass(slots=True)
class RunStatistics:
    """Run-wide counters; every track lands in exactly one bucket.

    Counters only grow and are updated under an internal lock so worker
    threads can record outcomes directly.
    """

    total: int
    success: int = 0
    failed: int = 0
    skipped: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def record(self, bucket: OutcomeBucket) -> None:
        with self._lock:
            if bucket is OutcomeBucket.SUCCESS:
                self.success += 1
            elif bucket is OutcomeBucket.FAILED:
                self.failed += 1
            else:
                self.skipped += 1

    @property
    def processed(self) -> int:
        with self._lock:
            return self.success + self.failed + self.skipped

    @property
    def is_complete(self) -> bool:
        return self.processed == self.total

    def snapshot(self) -> dict[str, int]:
        """Return the counters as a plain mapping for logging extras."""

        with self._lock:
            return {
                "total_files": self.total,
                "success": self.success,
                "failed": self.failed,
                "skipped": self.skipped,
            }


@dataclass(slots=True)
class BatchReport:
    """Statistics plus per-track results, ordered like the input files."""

    statistics: RunStatistics
    results: list[SyncResult] = field(default_factory=list)

    @property
    def failures(self) -> list[SyncResult]:
        return [result for result in self.results if result.bucket is OutcomeBucket.FAILED]


__all__ = [
    "BatchReport",
    "LyricsRecord",
    "MalformedPayloadError",
    "OutcomeBucket",
    "RunStatistics",
    "SyncResult",
    "TrackOutcome",
]
