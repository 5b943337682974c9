"""Summary: Locate a track's sidecar files and read the instrumental marker.
Why: Give the synchronizer a single snapshot of what already exists on disk."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from lrcphile.features.lyrics.domain.sidecar_format import (
    SidecarKind,
    carries_instrumental_marker,
)
from lrcphile.platform.logging import logger
from lrcphile.shared.errors import SidecarIOError


def sidecar_path(audio_path: Path, extension: SidecarKind | str) -> Path:
    """Return ``audio_path`` with its extension replaced by ``extension``.

    Raises:
        SidecarIOError: If the path has no file stem or no parent directory.
    """

    if not audio_path.name or not audio_path.stem or audio_path.stem in {".", ".."}:
        raise SidecarIOError(f"Cannot derive a lyrics file name from {audio_path}")
    if audio_path.parent == audio_path:
        raise SidecarIOError(f"Cannot derive a lyrics directory from {audio_path}")
    return audio_path.parent / f"{audio_path.stem}.{SidecarKind(extension).value}"


def is_instrumental_marker(lrc_path: Path) -> bool:
    """Return True if ``lrc_path`` is a marker written for an instrumental track.

    Missing, unreadable or non UTF-8 files are never markers.
    """

    try:
        content = lrc_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Could not read %s while checking for marker: %s", lrc_path, exc)
        return False
    return carries_instrumental_marker(content)


@dataclass(frozen=True, slots=True)
class SidecarState:
    """Both sidecar slots of one track."""

    lrc_path: Path
    txt_path: Path
    lrc_exists: bool
    txt_exists: bool
    instrumental_marker: bool

    @property
    def any_exists(self) -> bool:
        return self.lrc_exists or self.txt_exists


def resolve_sidecars(audio_path: Path) -> SidecarState:
    """Inspect both sidecar paths; the marker is only read when the lrc exists."""

    lrc = sidecar_path(audio_path, SidecarKind.LRC)
    txt = sidecar_path(audio_path, SidecarKind.TXT)
    lrc_exists = lrc.is_file()
    return SidecarState(
        lrc_path=lrc,
        txt_path=txt,
        lrc_exists=lrc_exists,
        txt_exists=txt.is_file(),
        instrumental_marker=lrc_exists and is_instrumental_marker(lrc),
    )


__all__ = ["SidecarState", "is_instrumental_marker", "resolve_sidecars", "sidecar_path"]
