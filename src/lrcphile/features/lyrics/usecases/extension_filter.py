"""Summary: Decide whether a path names a supported audio file.
Why: Scanner and CLI share one extension list."""

from __future__ import annotations

from pathlib import Path
from typing import Final

AUDIO_EXTENSIONS: Final[frozenset[str]] = frozenset(
    {"mp3", "flac", "wav", "ogg", "m4a", "aac", "opus", "wma", "ape", "dsf", "dff"}
)


def is_audio_extension(path: Path) -> bool:
    """Return True when ``path`` ends in a supported audio extension (any case)."""

    suffix = path.suffix
    if not suffix:
        return False
    return suffix[1:].lower() in AUDIO_EXTENSIONS


__all__ = ["AUDIO_EXTENSIONS", "is_audio_extension"]
