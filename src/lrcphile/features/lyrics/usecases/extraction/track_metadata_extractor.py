"""Audio file metadata extraction functionality.

Where: src/lrcphile/features/lyrics/usecases/extraction/track_metadata_extractor.py
What: Provide the MetadataExtractor facade routing files to format extractors.
Why: Give callers one entry point that only ever fails with ``MetadataError``.
"""

from pathlib import Path
from typing import ClassVar

from mutagen import MutagenError

from lrcphile.platform.logging import logger
from lrcphile.shared.errors import MetadataError
from lrcphile.shared.track_metadata import TrackMetadata

from ._base_extractors import AudioFormatExtractor
from .format_extractors import (
    AacExtractor,
    ApeExtractor,
    DffExtractor,
    DsfExtractor,
    FlacExtractor,
    M4aExtractor,
    Mp3Extractor,
    OggExtractor,
    OpusExtractor,
    WavExtractor,
    WmaExtractor,
)

__all__ = ["MetadataExtractor"]


class MetadataExtractor:
    """Facade class for extracting metadata from audio files.

    This class selects the appropriate extractor based on file extension.
    """

    # Mapping from file extension to corresponding extractor instance.
    _format_map: ClassVar[dict[str, AudioFormatExtractor]] = {
        ".mp3": Mp3Extractor(),
        ".flac": FlacExtractor(),
        ".wav": WavExtractor(),
        ".ogg": OggExtractor(),
        ".m4a": M4aExtractor(),
        ".aac": AacExtractor(),
        ".opus": OpusExtractor(),
        ".wma": WmaExtractor(),
        ".ape": ApeExtractor(),
        ".dsf": DsfExtractor(),
        ".dff": DffExtractor(),
    }

    @classmethod
    def extract(cls, file_path: Path) -> TrackMetadata:
        """Extract metadata from an audio file.

        Args:
            file_path: Path to the audio file.

        Returns:
            TrackMetadata: Title, artist, album and duration.

        Raises:
            MetadataError: If the format is unsupported, the file cannot be
                parsed, or a required field is missing.
        """
        ext: str = file_path.suffix.lower()
        extractor = cls._format_map.get(ext)
        if extractor is None:
            raise MetadataError(file_path, f"Unsupported file format '{ext}'")

        try:
            return extractor.extract_metadata(file_path)
        except MetadataError:
            raise
        except (MutagenError, OSError, ValueError) as exc:
            logger.debug("mutagen could not read %s: %s", file_path, exc)
            raise MetadataError(file_path, f"Unreadable tags ({exc})") from exc
