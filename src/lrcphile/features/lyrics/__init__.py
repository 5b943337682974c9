"""Lyrics synchronization feature: domain, use cases and adapters."""
