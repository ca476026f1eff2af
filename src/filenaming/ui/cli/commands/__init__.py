"""Command execution package for CLI."""

from filenaming.ui.cli.commands.analyze import AnalyzeCommand
from filenaming.ui.cli.commands.rename import PreviewCommand, RenameCommand
from filenaming.ui.cli.commands.status import StatusCommand

__all__ = [
    "AnalyzeCommand",
    "PreviewCommand",
    "RenameCommand",
    "StatusCommand",
]
