# Where: lrcphile.shared.errors
# What: Exception hierarchy shared by the sync pipeline and its adapters.
# Why: Let orchestrators isolate per-track failures by catching one base class.

from __future__ import annotations

from pathlib import Path


class LrcphileError(Exception):
    """Base class for expected, reportable failures."""


class MetadataError(LrcphileError):
    """Raised when an audio file lacks readable title, artist, album, or duration."""

    def __init__(self, file_path: Path, reason: str) -> None:
        super().__init__(f"{reason}: {file_path}")
        self.file_path: Path = file_path
        self.reason: str = reason


class LookupTransportError(LrcphileError):
    """Raised for non-2xx/non-404 responses, network failures, or bad payloads.

    ``status`` is ``0`` when no HTTP response was received.
    """

    def __init__(self, message: str, status: int = 0) -> None:
        super().__init__(message)
        self.status: int = status


class SidecarIOError(LrcphileError):
    """Raised when a sidecar path cannot be derived or written."""


class DirectoryReadError(LrcphileError):
    """Raised when the root of a scan cannot be listed."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Error collecting tracks from {path}: {cause}")
        self.path: Path = path
        self.cause: OSError = cause


__all__ = [
    "LrcphileError",
    "MetadataError",
    "LookupTransportError",
    "SidecarIOError",
    "DirectoryReadError",
]
