"""Command line argument handling package."""

from lrcphile.ui.cli.args.parser import ArgumentParser
from lrcphile.ui.cli.args.options import SyncArgs

__all__ = ["ArgumentParser", "SyncArgs"]
