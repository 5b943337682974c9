"""Where: src/lrcphile/features/lyrics/usecases/scanner.py
What: Collect candidate audio files below a root directory.
Why: Produce a deterministic, sorted work list before any network activity.

Traversal uses an explicit stack. Only the root is allowed to abort a scan;
unreadable subdirectories become warnings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from lrcphile.shared.errors import DirectoryReadError

from .extension_filter import is_audio_extension
from .processing_types import SyncEvent, log_sync_event


@dataclass(frozen=True, slots=True)
class ScanWarning:
    """An entry that could not be inspected or listed."""

    path: Path
    error_message: str


@dataclass(slots=True)
class ScanResult:
    """Files found by a scan.

    ``subdirectories`` lists the root's immediate child directories that were
    not descended into (non-recursive scans only).
    """

    root: Path
    files: list[Path] = field(default_factory=list)
    subdirectories: list[Path] = field(default_factory=list)
    warnings: list[ScanWarning] = field(default_factory=list)


def _list_directory(directory: Path) -> list[Path]:
    return list(directory.iterdir())


def _record_warning(result: ScanResult, path: Path, exc: OSError) -> None:
    result.warnings.append(ScanWarning(path=path, error_message=str(exc)))
    log_sync_event(
        logging.WARNING,
        SyncEvent.SCAN_SUBDIRECTORY_ERROR,
        "Error reading %s: %s",
        path,
        exc,
        directory=path,
        error_message=str(exc),
    )


def scan_directory(root: Path, recursive: bool = False) -> ScanResult:
    """Return the audio files under ``root`` sorted by path.

    Raises:
        DirectoryReadError: If ``root`` itself cannot be listed.
    """

    result = ScanResult(root=root)

    try:
        root_entries = _list_directory(root)
    except OSError as exc:
        raise DirectoryReadError(root, exc) from exc

    stack: list[list[Path]] = [root_entries]
    while stack:
        entries = stack.pop()
        for entry in entries:
            # Path.is_dir/is_file re-raise EACCES from stat.
            try:
                is_dir = entry.is_dir()
                is_file = not is_dir and entry.is_file()
            except OSError as exc:
                _record_warning(result, entry, exc)
                continue

            if is_dir:
                if not recursive:
                    result.subdirectories.append(entry)
                    continue
                try:
                    stack.append(_list_directory(entry))
                except OSError as exc:
                    _record_warning(result, entry, exc)
            elif is_file and is_audio_extension(entry):
                result.files.append(entry)

    result.files.sort()
    result.subdirectories.sort()
    result.warnings.sort(key=lambda warning: warning.path)

    log_sync_event(
        logging.INFO,
        SyncEvent.SCAN_COMPLETE,
        "Found %d audio files in %s",
        len(result.files),
        root,
        directory=root,
        total_files=len(result.files),
    )
    return result


__all__ = ["ScanResult", "ScanWarning", "scan_directory"]
