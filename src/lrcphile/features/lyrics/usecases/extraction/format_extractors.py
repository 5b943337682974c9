"""Format-specific metadata extractors.

Where: src/lrcphile/features/lyrics/usecases/extraction/format_extractors.py
What: Define concrete metadata extractors for the supported audio formats.
Why: Separate container quirks from the facade so adding a format is one class.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, override

import mutagen
from mutagen.asf import ASF
from mutagen.dsdiff import DSDIFF
from mutagen.dsf import DSF
from mutagen.easyid3 import EasyID3
from mutagen.flac import FLAC
from mutagen.monkeysaudio import MonkeysAudio
from mutagen.mp3 import MP3
from mutagen.mp4 import MP4
from mutagen.oggopus import OggOpus
from mutagen.oggvorbis import OggVorbis
from mutagen.wave import WAVE

from ._base_extractors import BaseAudioExtractor

__all__ = [
    "AacExtractor",
    "ApeExtractor",
    "DffExtractor",
    "DsfExtractor",
    "FlacExtractor",
    "M4aExtractor",
    "Mp3Extractor",
    "OggExtractor",
    "OpusExtractor",
    "WavExtractor",
    "WmaExtractor",
]

_VORBIS_MAPPING: dict[str, str] = {"title": "title", "artist": "artist", "album": "album"}
_ID3_FRAME_MAPPING: dict[str, str] = {"title": "TIT2", "artist": "TPE1", "album": "TALB"}


class Mp3Extractor(BaseAudioExtractor):
    """Extractor for MP3 files using EasyID3 tags."""

    FILE_CLASS: ClassVar[Any] = MP3
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {"ID3": EasyID3}
    TAG_MAPPING: ClassVar[dict[str, str]] = _VORBIS_MAPPING


class FlacExtractor(BaseAudioExtractor):
    """Extractor for FLAC files."""

    FILE_CLASS: ClassVar[Any] = FLAC
    TAG_MAPPING: ClassVar[dict[str, str]] = _VORBIS_MAPPING


class OggExtractor(BaseAudioExtractor):
    """Extractor for Ogg Vorbis files."""

    FILE_CLASS: ClassVar[Any] = OggVorbis
    TAG_MAPPING: ClassVar[dict[str, str]] = _VORBIS_MAPPING


class OpusExtractor(BaseAudioExtractor):
    """Extractor for Opus (.opus) files using Vorbis comments."""

    FILE_CLASS: ClassVar[Any] = OggOpus
    TAG_MAPPING: ClassVar[dict[str, str]] = _VORBIS_MAPPING


class M4aExtractor(BaseAudioExtractor):
    """Extractor for M4A files using MP4 atoms."""

    FILE_CLASS: ClassVar[Any] = MP4
    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "\xa9nam",
        "artist": "\xa9ART",
        "album": "\xa9alb",
    }


class DsfExtractor(BaseAudioExtractor):
    """Extractor for DSF files (embedded ID3 frames)."""

    FILE_CLASS: ClassVar[Any] = DSF
    TAG_MAPPING: ClassVar[dict[str, str]] = _ID3_FRAME_MAPPING


class DffExtractor(BaseAudioExtractor):
    """Extractor for DSDIFF (.dff) files (embedded ID3 frames)."""

    FILE_CLASS: ClassVar[Any] = DSDIFF
    TAG_MAPPING: ClassVar[dict[str, str]] = _ID3_FRAME_MAPPING


class WavExtractor(BaseAudioExtractor):
    """Extractor for WAVE files carrying an ID3 chunk."""

    FILE_CLASS: ClassVar[Any] = WAVE
    TAG_MAPPING: ClassVar[dict[str, str]] = _ID3_FRAME_MAPPING


class WmaExtractor(BaseAudioExtractor):
    """Extractor for Windows Media (ASF) files."""

    FILE_CLASS: ClassVar[Any] = ASF
    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "Title",
        "artist": "Author",
        "album": "WM/AlbumTitle",
    }


class ApeExtractor(BaseAudioExtractor):
    """Extractor for Monkey's Audio files using APEv2 tags."""

    FILE_CLASS: ClassVar[Any] = MonkeysAudio
    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "Title",
        "artist": "Artist",
        "album": "Album",
    }


class AacExtractor(BaseAudioExtractor):
    """Extractor for raw ADTS/ADIF AAC streams.

    mutagen detects the container and, when an ID3 or APE tag block is
    present, exposes it through the easy interface.
    """

    TAG_MAPPING: ClassVar[dict[str, str]] = _VORBIS_MAPPING

    @override
    def _open_file(self, file_path: Path) -> Any:
        return mutagen.File(file_path, easy=True)
