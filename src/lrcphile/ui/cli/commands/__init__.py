"""Command execution package for CLI."""

from lrcphile.ui.cli.commands.executor import CommandExecutor
from lrcphile.ui.cli.commands.file import FileCommand
from lrcphile.ui.cli.commands.directory import DirectoryCommand

__all__ = ["CommandExecutor", "DirectoryCommand", "FileCommand"]
