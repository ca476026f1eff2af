"""Command line front-end exposing ``main`` for console scripts."""

from filenaming.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
