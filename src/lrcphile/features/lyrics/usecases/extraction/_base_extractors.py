"""Shared base classes for metadata extractors.

Where: src/lrcphile/features/lyrics/usecases/extraction/_base_extractors.py
What: Define the base extractor that opens a file with mutagen and pulls the
      four identity fields.
Why: Format subclasses only declare a file class and a tag mapping.
"""

from __future__ import annotations

import abc
from pathlib import Path
from typing import Any, ClassVar, override

from lrcphile.platform.logging import logger
from lrcphile.shared.errors import MetadataError
from lrcphile.shared.track_metadata import TrackMetadata

from ._tag_utils import first_text

__all__ = [
    "AudioFormatExtractor",
    "BaseAudioExtractor",
]


class AudioFormatExtractor(abc.ABC):
    """Abstract base class for audio metadata extractors."""

    @abc.abstractmethod
    def extract_metadata(self, file_path: Path) -> TrackMetadata:
        """Extract metadata from an audio file."""
        raise NotImplementedError


class BaseAudioExtractor(AudioFormatExtractor):
    """Open ``FILE_CLASS`` and read title, artist and album via ``TAG_MAPPING``.

    Duration always comes from the stream info, never from tags.
    """

    FILE_CLASS: ClassVar[Any] = None
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "title",
        "artist": "artist",
        "album": "album",
    }

    def _open_file(self, file_path: Path) -> Any:
        """Open the audio file with the configured mutagen class."""
        if self.FILE_CLASS is None:
            raise NotImplementedError("FILE_CLASS must be defined in subclass")
        return self.FILE_CLASS(file_path, **self.FILE_INIT_PARAMS)

    def _get_tag_value(self, audio: Any, key: str) -> str | None:
        """Get a tag value from the opened file; missing keys give ``None``."""
        tags = getattr(audio, "tags", None)
        if tags is None:
            return None
        try:
            value: object = tags.get(key)
        except (KeyError, ValueError):
            return None
        return first_text(value)

    @staticmethod
    def _get_duration(audio: Any) -> float | None:
        info = getattr(audio, "info", None)
        length = getattr(info, "length", None)
        if isinstance(length, (int, float)) and length > 0:
            return float(length)
        return None

    @override
    def extract_metadata(self, file_path: Path) -> TrackMetadata:
        """Extract metadata from an audio file.

        Raises:
            MetadataError: If title, artist, album or duration is missing.
        """
        audio = self._open_file(file_path)
        if audio is None:
            raise MetadataError(file_path, "Unrecognised audio container")
        logger.debug("Opened file %s as %s", file_path, type(audio).__name__)

        values: dict[str, str] = {}
        for field_name in ("title", "artist", "album"):
            value = self._get_tag_value(audio, self.TAG_MAPPING[field_name])
            logger.debug("%s tag: %s", field_name.capitalize(), value)
            if value is None:
                raise MetadataError(file_path, f"Missing {field_name} tag")
            values[field_name] = value

        duration = self._get_duration(audio)
        if duration is None:
            raise MetadataError(file_path, "Missing duration")

        metadata = TrackMetadata(
            title=values["title"],
            artist=values["artist"],
            album=values["album"],
            duration_seconds=duration,
        )
        logger.debug("Extracted metadata: %s", metadata)
        return metadata
