"""src/lrcphile/ui/cli/display/result.py
What: Render user-facing summaries for sync CLI flows.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from typing import final

from rich.console import Console

from lrcphile.features.lyrics.domain.models import BatchReport

from .progress import shared_console
from .summary import render_processing_summary


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize result display."""
        self.console = console or shared_console() or Console()

    def show_report(self, report: BatchReport, *, silent: bool = False) -> None:
        """Display the directory run summary.

        Args:
            report: Batch report to render.
            silent: Whether to suppress non-error output.
        """
        if silent or report.statistics.total == 0:
            return

        render_processing_summary(self.console, report)

