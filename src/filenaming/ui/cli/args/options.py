"""Command line argument options."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class StatusArgs:
    """Command line arguments for the ``status`` subcommand."""

    command: Literal["status"]
    db_path: Path | None
    verbose: bool
    quiet: bool
    track_id: int | None = None


@final
@dataclass(slots=True)
class AnalyzeArgs:
    """Command line arguments for the ``analyze`` subcommand."""

    command: Literal["analyze"]
    db_path: Path | None
    verbose: bool
    quiet: bool
    file_id: int
    pattern_id: int | None = None


@final
@dataclass(slots=True)
class RenameArgs:
    """Command line arguments for the ``preview`` or ``rename`` subcommands."""

    command: Literal["preview", "rename"]
    db_path: Path | None
    verbose: bool
    quiet: bool
    pattern_id: int | None = None
    file_ids: list[int] | None = field(default=None)


CLIArgs = StatusArgs | AnalyzeArgs | RenameArgs

__all__ = ["AnalyzeArgs", "CLIArgs", "RenameArgs", "StatusArgs"]
