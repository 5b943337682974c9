"""Tests for sidecar path derivation and marker inspection."""

from __future__ import annotations

from pathlib import Path

import pytest

from lrcphile.features.lyrics.domain.sidecar_format import SidecarKind
from lrcphile.features.lyrics.usecases.sidecar_resolver import (
    is_instrumental_marker,
    resolve_sidecars,
    sidecar_path,
)
from lrcphile.shared.errors import SidecarIOError

MARKER = "[ti: A]\n[ar: B]\n[al: C]\n[length: 01:00]\n[by: lrcphile]\n[instrumental]"


def test_sidecar_path_replaces_extension(tmp_path: Path) -> None:
    audio = tmp_path / "01 - Song.v2.flac"

    assert sidecar_path(audio, SidecarKind.LRC) == tmp_path / "01 - Song.v2.lrc"
    assert sidecar_path(audio, "txt") == tmp_path / "01 - Song.v2.txt"


def test_sidecar_path_rejects_nameless_paths() -> None:
    with pytest.raises(SidecarIOError):
        _ = sidecar_path(Path("/"), SidecarKind.LRC)


def test_sidecar_path_rejects_unknown_kind(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        _ = sidecar_path(tmp_path / "a.mp3", "srt")


def test_marker_detected_in_written_file(tmp_path: Path) -> None:
    lrc = tmp_path / "a.lrc"
    _ = lrc.write_text(MARKER, encoding="utf-8")

    assert is_instrumental_marker(lrc)


def test_missing_file_is_not_a_marker(tmp_path: Path) -> None:
    assert not is_instrumental_marker(tmp_path / "nope.lrc")


def test_non_utf8_file_is_not_a_marker(tmp_path: Path) -> None:
    lrc = tmp_path / "a.lrc"
    _ = lrc.write_bytes(b"\xff\xfe[by: lrcphile]\xff[instrumental]")

    assert not is_instrumental_marker(lrc)


def test_directory_is_not_a_marker(tmp_path: Path) -> None:
    (tmp_path / "a.lrc").mkdir()

    assert not is_instrumental_marker(tmp_path / "a.lrc")


def test_resolve_sidecars_reports_both_slots(tmp_path: Path) -> None:
    audio = tmp_path / "a.mp3"
    _ = (tmp_path / "a.txt").write_text("plain", encoding="utf-8")

    state = resolve_sidecars(audio)

    assert state.lrc_path == tmp_path / "a.lrc"
    assert not state.lrc_exists
    assert state.txt_exists
    assert state.any_exists
    assert not state.instrumental_marker


def test_resolve_sidecars_reads_marker(tmp_path: Path) -> None:
    _ = (tmp_path / "a.lrc").write_text(MARKER, encoding="utf-8")

    state = resolve_sidecars(tmp_path / "a.mp3")

    assert state.lrc_exists
    assert state.instrumental_marker
