"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import contextlib
import os
import stat
import tempfile
from pathlib import Path


def _current_umask() -> int:
    mask = os.umask(0)
    _ = os.umask(mask)
    return mask


# Read once at import; os.umask is process-wide and not safe to toggle from workers.
_PROCESS_UMASK: int = _current_umask()


def _target_mode(path: Path) -> int:
    """Mode the written file should carry: the existing file's, else what ``open`` would give."""

    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        return 0o666 & ~_PROCESS_UMASK


def write_text_atomic(path: Path, content: str, *, encoding: str = "utf-8") -> Path:
    """Write ``content`` to ``path`` so readers see either the old or the full new file.

    The text goes to a temporary sibling first and is moved into place with
    ``os.replace``. Newlines are written verbatim. The result keeps the mode of
    a file it replaces; new files get the umask-derived default rather than
    the owner-only mode ``mkstemp`` uses.
    """

    mode = _target_mode(path)
    fd, temp_name = tempfile.mkstemp(
        prefix=f".{path.name}.",
        suffix=".tmp",
        dir=path.parent,
    )
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            _ = handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(temp_name, mode)
        os.replace(temp_name, path)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(temp_name)
        raise
    return path


__all__ = ["write_text_atomic"]
