"""Application services shared by user interfaces."""

from .sync_service import SyncLyricsService, SyncRequest

__all__ = ["SyncLyricsService", "SyncRequest"]
