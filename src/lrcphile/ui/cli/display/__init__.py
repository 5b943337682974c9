"""Display management for CLI interface."""

from lrcphile.ui.cli.display.progress import ProgressDisplay
from lrcphile.ui.cli.display.result import ResultDisplay

__all__ = ["ProgressDisplay", "ResultDisplay"]
