"""Summary: Metadata extraction built on mutagen.
Why: Expose the facade without leaking format classes to callers."""

from .track_metadata_extractor import MetadataExtractor

__all__ = ["MetadataExtractor"]
