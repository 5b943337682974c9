"""src/lrcphile/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse orchestration and presentation helpers across commands.
"""

from abc import ABC, abstractmethod

from lrcphile.application.services.sync_service import SyncLyricsService, SyncRequest
from lrcphile.features.lyrics.domain.models import BatchReport
from lrcphile.ui.cli.args.options import SyncArgs
from lrcphile.ui.cli.display.progress import ProgressDisplay
from lrcphile.ui.cli.display.result import ResultDisplay


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: SyncArgs
    app: SyncLyricsService
    request: SyncRequest
    progress_display: ProgressDisplay
    result_display: ResultDisplay

    def __init__(self, args: SyncArgs, app: SyncLyricsService | None = None) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            app: Application service; a default one is built when omitted.
        """
        self.args = args
        self.app = app or SyncLyricsService()
        self.request = SyncRequest(
            service_url=args.service_url,
            override_existing=args.override,
            recursive=args.recursive,
            concurrency_limit=args.concurrency_limit,
            request_timeout=args.request_timeout,
        )
        self.progress_display = ProgressDisplay()
        self.result_display = ResultDisplay()

    @abstractmethod
    def execute(self) -> BatchReport:
        """Execute the command.

        Returns:
            Report covering every processed track.
        """
        pass
