"""Progress display functionality for CLI."""

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, Protocol, final, runtime_checkable

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TaskID, TextColumn

from lrcphile.application.services.sync_service import SyncRequest
from lrcphile.features.lyrics.domain.models import BatchReport
from lrcphile.platform.logging import SyncEventRichHandler, logger


@runtime_checkable
class SyncServiceLike(Protocol):
    """Protocol for application services that can sync files with progress."""

    def sync_files_with_progress(
        self,
        request: SyncRequest,
        files: Sequence[Path],
        progress_callback: Callable[[int, int, Path], None] | None = None,
        *,
        source_root: Path | None = None,
    ) -> BatchReport:
        ...


def shared_console() -> Console | None:
    """Return the console used by the sync log handler, if one is attached."""

    for handler in logger.handlers:
        if isinstance(handler, SyncEventRichHandler):
            return handler.console
    return None


@final
class ProgressDisplay:
    """Handles progress display in CLI."""

    def run_with_service(
        self,
        app: SyncServiceLike,
        request: SyncRequest,
        files: Sequence[Path],
        source_root: Path,
        *,
        show_progress: bool = True,
    ) -> BatchReport:
        """Run the batch via the application service with a progress bar.

        Args:
            app: Application service instance used to orchestrate the run.
            request: Sync parameters.
            files: Audio files to synchronize.
            source_root: Directory the files were collected from.
            show_progress: Render the bar; disabled in silent mode.

        Returns:
            Batch report for the run.
        """
        if not show_progress or not files:
            return app.sync_files_with_progress(request, files, None, source_root=source_root)

        progress_kwargs: dict[str, Any] = {
            "transient": True,
            "redirect_stdout": False,
            "redirect_stderr": False,
        }
        progress_console = shared_console()
        if progress_console is not None:
            progress_kwargs["console"] = progress_console

        with Progress(
            TextColumn("[cyan]{task.description}"),
            BarColumn(bar_width=40),
            MofNCompleteColumn(),
            **progress_kwargs,
        ) as progress:
            task_id: TaskID = progress.add_task("Processing audio files...", total=len(files))
            last_count = 0

            def _cb(completed: int, total: int, current_file: Path) -> None:
                nonlocal last_count
                _ = current_file  # consumed via logging elsewhere
                advance = max(completed - last_count, 0)
                progress.update(task_id, advance=advance, total=total)
                last_count = completed

            report = app.sync_files_with_progress(request, files, _cb, source_root=source_root)

        return report
