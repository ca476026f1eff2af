"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from filenaming.config.settings import LOG_FILE
from filenaming.ui.cli.args import AnalyzeArgs, ArgumentParser, RenameArgs, StatusArgs


def test_create_parser() -> None:
    """Argument parser should expose expected subcommands and options."""

    parser = ArgumentParser.create_parser()

    status_args: Namespace = parser.parse_args(["status"])
    assert status_args.command == "status"
    assert status_args.track_id is None

    analyze_args: Namespace = parser.parse_args(["analyze", "12", "--pattern-id", "3"])
    assert analyze_args.file_id == 12
    assert analyze_args.pattern_id == 3

    rename_args: Namespace = parser.parse_args(
        ["--db", "library.db", "rename", "--file-id", "1", "--file-id", "2", "--verbose"]
    )
    assert rename_args.command == "rename"
    assert rename_args.db_path == "library.db"
    assert rename_args.file_ids == [1, 2]
    assert rename_args.verbose and not rename_args.quiet


def test_subcommand_is_required() -> None:
    with pytest.raises(SystemExit):
        _ = ArgumentParser.create_parser().parse_args([])


def test_process_args_status(mocker: MockerFixture) -> None:
    """Status arguments carry the track filter and default logging level."""

    mock_setup_logger = mocker.patch("filenaming.ui.cli.args.parser.setup_logger")

    args = ArgumentParser.process_args(["status", "--track-id", "7"])

    assert isinstance(args, StatusArgs)
    assert args.track_id == 7
    assert args.db_path is None
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.INFO
    assert mock_setup_logger.call_args.kwargs["log_file"] == LOG_FILE


def test_process_args_analyze(mocker: MockerFixture) -> None:
    mock_setup_logger = mocker.patch("filenaming.ui.cli.args.parser.setup_logger")

    args = ArgumentParser.process_args(["--db", "/tmp/library.db", "analyze", "4", "--quiet"])

    assert isinstance(args, AnalyzeArgs)
    assert args.file_id == 4
    assert args.pattern_id is None
    assert args.db_path == Path("/tmp/library.db")
    assert args.quiet
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.ERROR


@pytest.mark.parametrize("command", ["preview", "rename"])
def test_process_args_rename_commands(command: str, mocker: MockerFixture) -> None:
    mock_setup_logger = mocker.patch("filenaming.ui.cli.args.parser.setup_logger")

    args = ArgumentParser.process_args([command, "--pattern-id", "2", "--file-id", "9", "--verbose"])

    assert isinstance(args, RenameArgs)
    assert args.command == command
    assert args.pattern_id == 2
    assert args.file_ids == [9]
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.DEBUG
