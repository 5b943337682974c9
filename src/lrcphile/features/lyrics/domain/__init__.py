"""Summary: Pure domain values and sidecar text rules for lyrics sync.
Why: Keep format and classification logic free of I/O."""

from .models import (
    BatchReport,
    LyricsRecord,
    MalformedPayloadError,
    OutcomeBucket,
    RunStatistics,
    SyncResult,
    TrackOutcome,
)
from .sidecar_format import (
    AUTHORSHIP_TAG,
    INSTRUMENTAL_MARKER,
    SidecarKind,
    build_header,
    carries_instrumental_marker,
    format_length,
    render_instrumental,
    render_lyrics,
)

__all__ = [
    "AUTHORSHIP_TAG",
    "BatchReport",
    "INSTRUMENTAL_MARKER",
    "LyricsRecord",
    "MalformedPayloadError",
    "OutcomeBucket",
    "RunStatistics",
    "SidecarKind",
    "SyncResult",
    "TrackOutcome",
    "build_header",
    "carries_instrumental_marker",
    "format_length",
    "render_instrumental",
    "render_lyrics",
]
