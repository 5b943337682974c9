"""Command line interface for lrcphile."""

import sys
from typing import final

from lrcphile.shared.errors import DirectoryReadError
from lrcphile.ui.cli.args import ArgumentParser
from lrcphile.ui.cli.args.options import SyncArgs
from lrcphile.ui.cli.commands import CommandExecutor, DirectoryCommand, FileCommand
from lrcphile.platform.logging import logger


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Per-track failures are reported in the summary and do not change the
        exit status.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: SyncArgs = ArgumentParser.process_args(args_list)

            command: CommandExecutor = (
                FileCommand(args) if args.music_path.is_file() else DirectoryCommand(args)
            )
            _ = command.execute()
            return

        except DirectoryReadError as e:
            logger.error("%s", e)
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Note that underlying
        command processing may call ``sys.exit(...)`` on errors, so this
        return is only reached when processing completes successfully.
    """
    CommandProcessor.process_command()
    return 0
