"""Command line argument handling package."""

from filenaming.ui.cli.args.options import AnalyzeArgs, CLIArgs, RenameArgs, StatusArgs
from filenaming.ui.cli.args.parser import ArgumentParser

__all__ = ["AnalyzeArgs", "ArgumentParser", "CLIArgs", "RenameArgs", "StatusArgs"]
