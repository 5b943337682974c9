"""
Summary: Tag reader adapter backed by the mutagen extraction facade.
Why: Let the synchronizer depend on TagReaderPort instead of mutagen.
"""

from __future__ import annotations

from pathlib import Path

from lrcphile.features.lyrics.usecases.extraction import MetadataExtractor
from lrcphile.features.lyrics.usecases.ports import TagReaderPort
from lrcphile.shared.track_metadata import TrackMetadata


class MutagenTagReader(TagReaderPort):
    """Read track identity through ``MetadataExtractor``."""

    def read(self, audio_path: Path) -> TrackMetadata:
        return MetadataExtractor.extract(audio_path)


__all__ = ["MutagenTagReader"]
