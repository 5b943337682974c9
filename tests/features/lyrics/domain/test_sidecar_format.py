"""Tests for sidecar header rendering and instrumental marker detection."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from lrcphile.features.lyrics.domain.models import LyricsRecord
from lrcphile.features.lyrics.domain.sidecar_format import (
    AUTHORSHIP_TAG,
    INSTRUMENTAL_MARKER,
    build_header,
    carries_instrumental_marker,
    format_length,
    parse_header_tags,
    render_instrumental,
    render_lyrics,
)


@pytest.mark.parametrize(
    ("duration", "expected"),
    [
        (125.7, "02:05"),
        (0.0, "00:00"),
        (59.999, "00:59"),
        (3600.0, "60:00"),
        (-3.0, "00:00"),
    ],
)
def test_format_length_truncates_and_pads(duration: float, expected: str) -> None:
    assert format_length(duration) == expected


def test_build_header_uses_record_values(record_factory: Callable[..., LyricsRecord]) -> None:
    header = build_header(record_factory())

    assert header.split("\n") == [
        "[ti: Song]",
        "[ar: Band]",
        "[al: Record]",
        "[length: 02:05]",
        "[by: lrcphile]",
    ]
    assert not header.endswith("\n")


def test_render_instrumental_appends_marker_line(record_factory: Callable[..., LyricsRecord]) -> None:
    content = render_instrumental(record_factory(instrumental=True))

    assert content.endswith(f"{AUTHORSHIP_TAG}\n{INSTRUMENTAL_MARKER}")
    assert carries_instrumental_marker(content)


def test_render_lyrics_keeps_body_verbatim(record_factory: Callable[..., LyricsRecord]) -> None:
    body = "[00:01.00]Line one\r\n[00:02.00]  Line two  \n"
    content = render_lyrics(record_factory(), body)

    assert content == f"{build_header(record_factory())}\n{body}"
    assert not carries_instrumental_marker(content)


def test_parse_header_tags_stops_at_first_body_line() -> None:
    content = "[ti: A]\n[ar: B]\n\n[by: lrcphile]\nplain text\n[length: 01:00]"

    assert parse_header_tags(content) == {"ti": "A", "ar": "B", "by": "lrcphile"}


def test_parse_header_tags_ignores_timestamps() -> None:
    assert parse_header_tags("[00:12.34]la la") == {}


def test_marker_requires_authorship() -> None:
    assert not carries_instrumental_marker("[ti: A]\n[instrumental]")


def test_marker_requires_instrumental_line() -> None:
    assert not carries_instrumental_marker("[ti: A]\n[by: lrcphile]\n[00:01.00]hi")


def test_marker_ignores_foreign_authors() -> None:
    assert not carries_instrumental_marker("[ti: A]\n[by: someone]\n[instrumental]")


def test_marker_detected_with_crlf_line_endings() -> None:
    content = "[ti: A]\r\n[ar: B]\r\n[by: lrcphile]\r\n[instrumental]\r\n"

    assert carries_instrumental_marker(content)


def test_legacy_marker_detected_by_substring() -> None:
    """Older files may not have the tags on their own lines."""

    assert carries_instrumental_marker("junk [by: lrcphile] more junk [instrumental]")
