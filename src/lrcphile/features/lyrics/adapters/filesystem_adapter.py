"""src/lrcphile/features/lyrics/adapters/filesystem_adapter.py
What: Adapter implementing SidecarFilesystemPort on top of platform helpers.
Why: Keep filesystem I/O in adapters while use cases target abstractions."""

from __future__ import annotations

from pathlib import Path

from lrcphile.features.lyrics.usecases.ports import SidecarFilesystemPort
from lrcphile.platform.filesystem import write_text_atomic


class LocalFilesystemAdapter(SidecarFilesystemPort):
    """Adapter delegating sidecar writes to the shared platform module."""

    def write_text_atomic(self, path: Path, content: str) -> Path:
        return write_text_atomic(path, content)


__all__ = ["LocalFilesystemAdapter"]
