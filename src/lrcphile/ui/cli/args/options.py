"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final


@final
@dataclass(slots=True)
class SyncArgs:
    """Validated command line arguments for a sync run."""

    music_path: Path
    override: bool
    recursive: bool
    silent: bool
    verbose: bool
    service_url: str
    concurrency_limit: int
    request_timeout: float


__all__ = ["SyncArgs"]
