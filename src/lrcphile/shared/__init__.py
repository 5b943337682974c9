# Where: lrcphile.shared.__init__
# What: Provide a concise import surface for shared values and errors.
# Why: Encourage consistent reuse across features and adapters.

"""Shared cross-cutting values exposed at the package level."""

from .errors import (
    DirectoryReadError,
    LookupTransportError,
    LrcphileError,
    MetadataError,
    SidecarIOError,
)
from .track_metadata import TrackMetadata

__all__ = [
    "DirectoryReadError",
    "LookupTransportError",
    "LrcphileError",
    "MetadataError",
    "SidecarIOError",
    "TrackMetadata",
]
