"""Summary: Lyrics sync use cases (scan, resolve, synchronize, run).
Why: Offer one import surface to the application layer."""

from .batch_runner import ProgressCallback, run_batch
from .extension_filter import AUDIO_EXTENSIONS, is_audio_extension
from .ports import LyricsLookupPort, SidecarFilesystemPort, TagReaderPort
from .processing_types import SyncEvent, log_sync_event
from .scanner import ScanResult, ScanWarning, scan_directory
from .sidecar_resolver import SidecarState, is_instrumental_marker, resolve_sidecars, sidecar_path
from .track_synchronizer import FetchDecision, TrackSynchronizer, decide, plan_sidecar

__all__ = [
    "AUDIO_EXTENSIONS",
    "FetchDecision",
    "LyricsLookupPort",
    "ProgressCallback",
    "ScanResult",
    "ScanWarning",
    "SidecarFilesystemPort",
    "SidecarState",
    "SyncEvent",
    "TagReaderPort",
    "TrackSynchronizer",
    "decide",
    "is_audio_extension",
    "is_instrumental_marker",
    "log_sync_event",
    "plan_sidecar",
    "resolve_sidecars",
    "run_batch",
    "scan_directory",
    "sidecar_path",
]
