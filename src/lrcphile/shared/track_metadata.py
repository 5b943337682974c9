# Where: lrcphile.shared.track_metadata
# What: Canonical TrackMetadata value shared across features.
# Why: The tag reader produces it and the synchronizer keys lookups on it.

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TrackMetadata:
    """Identity of a track as read from its embedded tags."""

    title: str
    artist: str
    album: str
    duration_seconds: float


__all__ = ["TrackMetadata"]
