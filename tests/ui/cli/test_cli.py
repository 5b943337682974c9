"""Tests for CLI functionality."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from lrcphile.config.config import Config
from lrcphile.features.lyrics.domain.models import BatchReport, RunStatistics
from lrcphile.shared.errors import DirectoryReadError
from lrcphile.ui.cli import CommandProcessor, main


@pytest.fixture(autouse=True)
def isolated_runtime(mocker: MockerFixture) -> None:
    _ = mocker.patch("lrcphile.ui.cli.args.parser.Config.load", return_value=Config())
    _ = mocker.patch("lrcphile.ui.cli.args.parser.setup_logger")


@pytest.fixture
def mock_logger(mocker: MockerFixture) -> MagicMock:
    return mocker.patch("lrcphile.ui.cli.cli.logger")


def _report(failed: int = 0) -> BatchReport:
    stats = RunStatistics(total=failed + 1, success=1, failed=failed)
    return BatchReport(statistics=stats)


def test_file_path_dispatches_file_command(tmp_path: Path, mocker: MockerFixture) -> None:
    audio = tmp_path / "a.mp3"
    _ = audio.write_bytes(b"")
    file_command = mocker.patch("lrcphile.ui.cli.cli.FileCommand")
    directory_command = mocker.patch("lrcphile.ui.cli.cli.DirectoryCommand")

    CommandProcessor.process_command([str(audio)])

    file_command.assert_called_once()
    directory_command.assert_not_called()


def test_directory_path_dispatches_directory_command(tmp_path: Path, mocker: MockerFixture) -> None:
    directory_command = mocker.patch("lrcphile.ui.cli.cli.DirectoryCommand")
    directory_command.return_value.execute.return_value = _report(failed=3)

    CommandProcessor.process_command([str(tmp_path)])

    directory_command.return_value.execute.assert_called_once_with()


def test_per_track_failures_keep_exit_zero(tmp_path: Path, mocker: MockerFixture) -> None:
    directory_command = mocker.patch("lrcphile.ui.cli.cli.DirectoryCommand")
    directory_command.return_value.execute.return_value = _report(failed=2)
    _ = mocker.patch("sys.argv", ["lrcphile", str(tmp_path)])

    assert main() == 0


def test_unreadable_root_exits_with_one(
    tmp_path: Path, mocker: MockerFixture, mock_logger: MagicMock
) -> None:
    directory_command = mocker.patch("lrcphile.ui.cli.cli.DirectoryCommand")
    directory_command.return_value.execute.side_effect = DirectoryReadError(
        tmp_path, PermissionError("denied")
    )

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command([str(tmp_path)])

    assert excinfo.value.code == 1
    mock_logger.error.assert_called_once()


def test_keyboard_interrupt_exits_with_130(
    tmp_path: Path, mocker: MockerFixture, mock_logger: MagicMock
) -> None:
    _ = mock_logger
    directory_command = mocker.patch("lrcphile.ui.cli.cli.DirectoryCommand")
    directory_command.return_value.execute.side_effect = KeyboardInterrupt

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command([str(tmp_path)])

    assert excinfo.value.code == 130


def test_unexpected_error_exits_with_one(
    tmp_path: Path, mocker: MockerFixture, mock_logger: MagicMock
) -> None:
    directory_command = mocker.patch("lrcphile.ui.cli.cli.DirectoryCommand")
    directory_command.return_value.execute.side_effect = RuntimeError("kaboom")

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command([str(tmp_path)])

    assert excinfo.value.code == 1
    assert "kaboom" in str(mock_logger.error.call_args)
