"""Command line interface for lrcphile."""

from lrcphile.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
