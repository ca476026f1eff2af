"""Command line interface for filenaming."""

import sys
from typing import final

from filenaming.features.renaming import BatchRenameResult, RenameError
from filenaming.platform.logging import logger
from filenaming.ui.cli.args import ArgumentParser
from filenaming.ui.cli.args.options import AnalyzeArgs, CLIArgs, RenameArgs, StatusArgs
from filenaming.ui.cli.commands import AnalyzeCommand, PreviewCommand, RenameCommand, StatusCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, StatusArgs):
                _ = StatusCommand(args).execute()
                return

            if isinstance(args, AnalyzeArgs):
                _ = AnalyzeCommand(args).execute()
                return

            assert isinstance(args, RenameArgs)
            if args.command == "preview":
                _ = PreviewCommand(args).execute()
                return

            result = RenameCommand(args).execute()
            if CommandProcessor._has_failures(result):
                sys.exit(1)
            return

        except RenameError as e:
            logger.error("%s", e)
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def _has_failures(result: BatchRenameResult) -> bool:
        return result.failed_count > 0 or result.commit_error is not None


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Command processing calls
        ``sys.exit(...)`` on errors, so this return is only reached when
        processing completes successfully.
    """
    CommandProcessor.process_command()
    return 0
