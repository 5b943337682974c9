"""Utilities for rendering shared CLI display content."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from lrcphile.features.lyrics.domain.models import BatchReport


def render_processing_summary(console: Console, report: BatchReport, *, show_failures: bool = True) -> None:
    """Render run totals followed by the list of failed tracks.

    Args:
        console: Rich console instance used to render output.
        report: Batch report to summarize.
        show_failures: List each failed track with its error.
    """
    stats = report.statistics

    console.print("\n[bold bright_cyan]Processing Summary:[/bold bright_cyan]")
    console.print(f"  Processed: [bold]{stats.total}[/bold] files")
    console.print(f"  [green]Successful: [bold]{stats.success}[/bold] files[/green]")
    console.print(f"  [red]Failed: [bold]{stats.failed}[/bold] files[/red]")
    console.print(
        f"  [yellow]Skipped (existing/instrumental): [bold]{stats.skipped}[/bold] files[/yellow]"
    )

    failures = report.failures
    if not show_failures or not failures:
        return

    console.print("\n[bold red]Failed tracks:[/bold red]")
    for failed in failures:
        detail = failed.error_message or failed.outcome.label
        console.print(f"[red]  • {escape(str(failed.audio_path))}: {escape(detail)}[/red]")
