"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from lrcphile.config.config import Config
from lrcphile.config.paths import default_music_dir
from lrcphile.config.settings import (
    APP_VERSION,
    resolve_concurrency_limit,
    resolve_request_timeout,
    resolve_service_url,
)
from lrcphile.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from lrcphile.ui.cli.args.options import SyncArgs


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {raw!r}") from exc
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {raw!r}")
    return value


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="lrcphile",
            description="lrcphile - fetch lyrics from LRCLIB and save them next to your audio files.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "path",
            nargs="?",
            type=str,
            help="Path to the audio file or directory (defaults to music directory)",
            metavar="PATH",
        )
        _ = parser.add_argument(
            "-o",
            "--override",
            action="store_true",
            help="Override existing lyrics files",
        )
        _ = parser.add_argument(
            "-r",
            "--recursive",
            action="store_true",
            help="Recursively process subdirectories",
        )
        _ = parser.add_argument(
            "-s",
            "--silent",
            action="store_true",
            help="Suppress all output except errors",
        )
        _ = parser.add_argument(
            "-u",
            "--url",
            type=str,
            help="URL for the lyrics database instance (e.g., self-hosted LRCLIB)",
            metavar="URL",
        )
        _ = parser.add_argument(
            "-j",
            "--jobs",
            type=_positive_int,
            help="Number of tracks processed concurrently",
            metavar="N",
        )
        _ = parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {APP_VERSION}",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> SyncArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            SyncArgs: Processed command line arguments.

        Raises:
            SystemExit: If the path is neither a file nor a directory.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        # Set log level based on verbosity flags
        is_silent = bool(parsed_args.silent)
        is_verbose = bool(parsed_args.verbose)

        if is_silent:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        if parsed_args.path:
            music_path = Path(parsed_args.path).expanduser()
        else:
            music_path = default_music_dir(configuration.music_dir)

        if not music_path.is_file() and not music_path.is_dir():
            logger.error("Path does not exist or is not a file or directory: %s", music_path)
            sys.exit(1)

        return SyncArgs(
            music_path=music_path,
            override=bool(parsed_args.override),
            recursive=bool(parsed_args.recursive),
            silent=is_silent,
            verbose=is_verbose,
            service_url=resolve_service_url(configuration, parsed_args.url),
            concurrency_limit=resolve_concurrency_limit(configuration, parsed_args.jobs),
            request_timeout=resolve_request_timeout(configuration),
        )
