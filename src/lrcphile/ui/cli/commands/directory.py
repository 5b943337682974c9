"""src/lrcphile/ui/cli/commands/directory.py
What: Execute sync runs for directory roots via the CLI.
Why: Bridge parsed arguments with application services for bulk processing.
"""

from typing import override

from lrcphile.features.lyrics.domain.models import BatchReport
from lrcphile.platform.logging import logger
from lrcphile.ui.cli.commands.executor import CommandExecutor


class DirectoryCommand(CommandExecutor):
    """Command for processing a directory."""

    @override
    def execute(self) -> BatchReport:
        """Scan the directory, sync every track, and print the summary.

        Raises:
            DirectoryReadError: If the directory itself cannot be listed.
        """
        root = self.args.music_path
        scan = self.app.scan(self.request, root)

        if scan.subdirectories:
            logger.info(
                "Ignored %d subdirectories; pass --recursive to include them",
                len(scan.subdirectories),
            )

        report = self.progress_display.run_with_service(
            self.app,
            self.request,
            scan.files,
            root,
            show_progress=not self.args.silent,
        )
        self.result_display.show_report(report, silent=self.args.silent)
        return report
