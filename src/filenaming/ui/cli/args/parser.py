"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from filenaming.config.settings import LOG_FILE
from filenaming.platform.logging import logger, setup_logger
from filenaming.ui.cli.args.options import AnalyzeArgs, CLIArgs, RenameArgs, StatusArgs


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
            prog="filenaming",
            description="filenaming - rename media files to the paths a naming pattern renders.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "--db",
            type=str,
            dest="db_path",
            metavar="PATH",
            help="SQLite library database (defaults to the configured db_path)",
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        status_parser = subparsers.add_parser(
            "status",
            help="Recompute needs-rename flags and print counts",
        )
        _ = status_parser.add_argument(
            "--track-id",
            type=int,
            metavar="ID",
            help="Only recompute the files of this track",
        )
        ArgumentParser._add_verbosity(status_parser)

        analyze_parser = subparsers.add_parser(
            "analyze",
            help="Classify one media file against its canonical path",
        )
        _ = analyze_parser.add_argument(
            "file_id",
            type=int,
            metavar="FILE_ID",
            help="Media file to classify",
        )
        ArgumentParser._add_pattern_option(analyze_parser)
        ArgumentParser._add_verbosity(analyze_parser)

        preview_parser = subparsers.add_parser(
            "preview",
            help="Show planned renames without touching the filesystem",
        )
        ArgumentParser._configure_rename_parser(preview_parser)

        rename_parser = subparsers.add_parser(
            "rename",
            help="Rename media files to their canonical paths",
        )
        ArgumentParser._configure_rename_parser(rename_parser)

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Typed arguments for the selected command.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        _ = setup_logger(log_file=LOG_FILE, console_level=log_level)

        db_path = Path(parsed_args.db_path) if parsed_args.db_path else None
        command: str = parsed_args.command

        if command == "status":
            return StatusArgs(
                command="status",
                db_path=db_path,
                verbose=is_verbose,
                quiet=is_quiet,
                track_id=parsed_args.track_id,
            )

        if command == "analyze":
            return AnalyzeArgs(
                command="analyze",
                db_path=db_path,
                verbose=is_verbose,
                quiet=is_quiet,
                file_id=parsed_args.file_id,
                pattern_id=parsed_args.pattern_id,
            )

        if command in {"preview", "rename"}:
            return RenameArgs(
                command=command,  # pyright: ignore[reportArgumentType]
                db_path=db_path,
                verbose=is_verbose,
                quiet=is_quiet,
                pattern_id=parsed_args.pattern_id,
                file_ids=parsed_args.file_ids,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _configure_rename_parser(parser: argparse.ArgumentParser) -> None:
        """Apply shared configuration for preview/rename subparsers."""

        ArgumentParser._add_pattern_option(parser)
        _ = parser.add_argument(
            "--file-id",
            type=int,
            action="append",
            dest="file_ids",
            metavar="ID",
            help="Media file to include (repeatable; defaults to every flagged file)",
        )
        ArgumentParser._add_verbosity(parser)

    @staticmethod
    def _add_pattern_option(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--pattern-id",
            type=int,
            metavar="ID",
            help="Naming pattern to apply (defaults to the active pattern)",
        )

    @staticmethod
    def _add_verbosity(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )
