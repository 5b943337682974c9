"""Where: src/lrcphile/features/lyrics/domain/sidecar_format.py
What: Render and inspect the text stored in sidecar lyrics files.
Why: Keep the header layout and the instrumental marker in one pure module
     shared by the writer and the skip decision.

Layout::

    [ti: Title]
    [ar: Artist]
    [al: Album]
    [length: MM:SS]
    [by: lrcphile]
    <body or [instrumental]>
"""

from __future__ import annotations

import re
from enum import StrEnum
from typing import Final

from lrcphile.config.settings import APP_NAME

from .models import LyricsRecord

AUTHORSHIP_TAG: Final[str] = f"[by: {APP_NAME}]"
INSTRUMENTAL_MARKER: Final[str] = "[instrumental]"

_TAG_LINE: Final[re.Pattern[str]] = re.compile(r"^\[([a-z]+):\s*(.*)\]$")


class SidecarKind(StrEnum):
    """File extension of a sidecar slot."""

    LRC = "lrc"
    TXT = "txt"


def format_length(duration_seconds: float) -> str:
    """Return ``MM:SS`` for a duration truncated to whole seconds."""

    total = max(int(duration_seconds), 0)
    minutes, seconds = divmod(total, 60)
    return f"{minutes:02d}:{seconds:02d}"


def build_header(record: LyricsRecord) -> str:
    """Return the five header lines joined by newlines, without a trailing one."""

    return "\n".join(
        (
            f"[ti: {record.track_name}]",
            f"[ar: {record.artist_name}]",
            f"[al: {record.album_name}]",
            f"[length: {format_length(record.duration_seconds)}]",
            AUTHORSHIP_TAG,
        )
    )


def render_instrumental(record: LyricsRecord) -> str:
    return f"{build_header(record)}\n{INSTRUMENTAL_MARKER}"


def render_lyrics(record: LyricsRecord, body: str) -> str:
    """Header followed by ``body`` verbatim."""

    return f"{build_header(record)}\n{body}"


def parse_header_tags(content: str) -> dict[str, str]:
    """Collect leading ``[key: value]`` tags until the first non-tag line."""

    tags: dict[str, str] = {}
    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        match = _TAG_LINE.match(line)
        if match is None:
            break
        tags[match.group(1)] = match.group(2).strip()
    return tags


def _has_marker_line(content: str) -> bool:
    return any(line.strip() == INSTRUMENTAL_MARKER for line in content.splitlines())


def carries_instrumental_marker(content: str) -> bool:
    """Return True when ``content`` is an instrumental marker written by this tool.

    The header is read as structured tags first. Files from older releases
    are still recognised by the presence of both literal markers.
    """

    if parse_header_tags(content).get("by") == APP_NAME and _has_marker_line(content):
        return True
    return AUTHORSHIP_TAG in content and INSTRUMENTAL_MARKER in content


__all__ = [
    "AUTHORSHIP_TAG",
    "INSTRUMENTAL_MARKER",
    "SidecarKind",
    "build_header",
    "carries_instrumental_marker",
    "format_length",
    "parse_header_tags",
    "render_instrumental",
    "render_lyrics",
]
