"""src/lrcphile/ui/cli/commands/file.py
What: Sync the lyrics of a single audio file via the CLI.
Why: A lone track needs no scan, pool, or progress bar.
"""

from typing import override

from lrcphile.features.lyrics.domain.models import BatchReport, RunStatistics
from lrcphile.ui.cli.commands.executor import CommandExecutor


class FileCommand(CommandExecutor):
    """Command for processing a single file."""

    @override
    def execute(self) -> BatchReport:
        """Execute single-file sync.

        Returns:
            Report holding the one result.
        """
        result = self.app.sync_file(self.request, self.args.music_path)
        statistics = RunStatistics(total=1)
        statistics.record(result.bucket)
        return BatchReport(statistics=statistics, results=[result])
