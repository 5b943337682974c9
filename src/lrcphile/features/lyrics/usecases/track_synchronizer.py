"""Where: src/lrcphile/features/lyrics/usecases/track_synchronizer.py
What: Synchronize the lyrics sidecar of a single audio file.
Why: Own the skip/fetch policy and map every path through it to exactly one
     terminal ``TrackOutcome``.

Flow: read metadata, inspect sidecars, decide, fetch, write. Expected
failures (``MetadataError``, ``LookupTransportError``, ``SidecarIOError`` and
``OSError`` on write) are recorded in the returned ``SyncResult``; they never
propagate to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from lrcphile.features.lyrics.domain.models import LyricsRecord, SyncResult, TrackOutcome
from lrcphile.features.lyrics.domain.sidecar_format import render_instrumental, render_lyrics
from lrcphile.shared.errors import LookupTransportError, MetadataError, SidecarIOError
from lrcphile.shared.track_metadata import TrackMetadata

from .ports import LyricsLookupPort, SidecarFilesystemPort, TagReaderPort
from .processing_types import SyncEvent, log_sync_event
from .sidecar_resolver import SidecarState, resolve_sidecars


class FetchDecision(Enum):
    """Result of the skip/fetch policy."""

    FETCH = "fetch"
    SKIP_INSTRUMENTAL = "skip_instrumental"
    SKIP_EXISTING = "skip_existing"


def decide(state: SidecarState, override_existing: bool) -> FetchDecision:
    """Apply the skip policy in order.

    An instrumental marker always wins, even over ``override_existing``.
    """

    if state.instrumental_marker:
        return FetchDecision.SKIP_INSTRUMENTAL
    if state.any_exists and not override_existing:
        return FetchDecision.SKIP_EXISTING
    return FetchDecision.FETCH


@dataclass(frozen=True, slots=True)
class SidecarPlan:
    """What to write for a fetched record."""

    outcome: TrackOutcome
    path: Path
    content: str


def plan_sidecar(record: LyricsRecord, state: SidecarState) -> SidecarPlan | None:
    """Choose the sidecar for ``record``; ``None`` when it carries no usable lyrics.

    Priority: instrumental, then synced, then plain.
    """

    if record.instrumental:
        return SidecarPlan(TrackOutcome.SAVED_INSTRUMENTAL, state.lrc_path, render_instrumental(record))
    if record.has_synced:
        return SidecarPlan(
            TrackOutcome.SAVED_SYNCED, state.lrc_path, render_lyrics(record, record.synced_lyrics)
        )
    if record.has_plain:
        return SidecarPlan(
            TrackOutcome.SAVED_PLAIN, state.txt_path, render_lyrics(record, record.plain_lyrics)
        )
    return None


class TrackSynchronizer:
    """Run the per-track sync state machine against injected collaborators."""

    def __init__(
        self,
        tag_reader: TagReaderPort,
        lookup: LyricsLookupPort,
        filesystem: SidecarFilesystemPort,
    ) -> None:
        self._tag_reader: TagReaderPort = tag_reader
        self._lookup: LyricsLookupPort = lookup
        self._filesystem: SidecarFilesystemPort = filesystem

    def sync(
        self,
        audio_path: Path,
        *,
        override_existing: bool = False,
        sequence: int | None = None,
        total: int | None = None,
        source_root: Path | None = None,
    ) -> SyncResult:
        """Synchronize one track and return its terminal result."""

        context: dict[str, Any] = {
            "sequence": sequence,
            "total_files": total,
            "source_path": audio_path,
            "source_base_path": source_root,
        }

        try:
            metadata = self._tag_reader.read(audio_path)
        except MetadataError as exc:
            return self._fail(audio_path, TrackOutcome.METADATA_FAILED, str(exc), context, logging.WARNING)

        try:
            state = resolve_sidecars(audio_path)
        except SidecarIOError as exc:
            return self._fail(
                audio_path, TrackOutcome.WRITE_FAILED, str(exc), context, logging.ERROR, metadata=metadata
            )

        decision = decide(state, override_existing)
        if decision is not FetchDecision.FETCH:
            return self._skip(audio_path, decision, state, metadata, context)

        log_sync_event(
            logging.DEBUG,
            SyncEvent.TRACK_FETCH,
            "Fetching lyrics for '%s' by '%s'",
            metadata.title,
            metadata.artist,
            **context,
        )

        try:
            record = self._lookup.fetch_lyrics(metadata)
        except LookupTransportError as exc:
            return self._fail(
                audio_path, TrackOutcome.FETCH_FAILED, str(exc), context, logging.ERROR, metadata=metadata
            )

        if record is None:
            return self._fail(
                audio_path,
                TrackOutcome.NOT_FOUND,
                f"No lyrics found for '{metadata.title}' by '{metadata.artist}'",
                context,
                logging.WARNING,
                metadata=metadata,
            )

        plan = plan_sidecar(record, state)
        if plan is None:
            return self._fail(
                audio_path,
                TrackOutcome.NO_LYRICS,
                f"Record for '{metadata.title}' has no synced or plain lyrics",
                context,
                logging.WARNING,
                metadata=metadata,
            )

        try:
            written = self._filesystem.write_text_atomic(plan.path, plan.content)
        except (SidecarIOError, OSError) as exc:
            return self._fail(
                audio_path,
                TrackOutcome.WRITE_FAILED,
                f"Failed to write {plan.path}: {exc}",
                context,
                logging.ERROR,
                metadata=metadata,
            )

        log_sync_event(
            logging.INFO,
            SyncEvent.TRACK_SAVED,
            "Saved %s for %s",
            plan.outcome.label,
            audio_path,
            sidecar_path=written,
            reason=plan.outcome.label,
            **context,
        )
        return SyncResult(
            audio_path=audio_path,
            outcome=plan.outcome,
            sidecar_path=written,
            metadata=metadata,
        )

    def _skip(
        self,
        audio_path: Path,
        decision: FetchDecision,
        state: SidecarState,
        metadata: TrackMetadata,
        context: dict[str, Any],
    ) -> SyncResult:
        if decision is FetchDecision.SKIP_INSTRUMENTAL:
            outcome = TrackOutcome.SKIPPED_INSTRUMENTAL
            existing = state.lrc_path
        else:
            outcome = TrackOutcome.SKIPPED_EXISTING
            existing = state.lrc_path if state.lrc_exists else state.txt_path

        log_sync_event(
            logging.INFO,
            SyncEvent.TRACK_SKIP,
            "Skipping %s: %s",
            audio_path,
            outcome.label,
            reason=outcome.label,
            **context,
        )
        return SyncResult(
            audio_path=audio_path,
            outcome=outcome,
            sidecar_path=existing,
            metadata=metadata,
        )

    def _fail(
        self,
        audio_path: Path,
        outcome: TrackOutcome,
        message: str,
        context: dict[str, Any],
        level: int,
        *,
        metadata: TrackMetadata | None = None,
    ) -> SyncResult:
        log_sync_event(
            level,
            SyncEvent.TRACK_FAILED,
            "%s: %s",
            outcome.label,
            message,
            reason=outcome.label,
            error_message=message,
            **context,
        )
        return SyncResult(
            audio_path=audio_path,
            outcome=outcome,
            metadata=metadata,
            error_message=message,
        )


__all__ = [
    "FetchDecision",
    "SidecarPlan",
    "TrackSynchronizer",
    "decide",
    "plan_sidecar",
]
