"""Display utilities for rename status and single-file analysis."""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.table import Table
from rich.text import Text

from filenaming.application.services.rename_service import RenameStatusCounts
from filenaming.features.renaming import RenameAnalysis


@final
class StatusDisplay:
    """Render needs-rename counts and classifications."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_counts(self, counts: RenameStatusCounts, *, updated: int, quiet: bool = False) -> None:
        if quiet:
            return

        self.console.print(f"\n[bold]Rename status[/bold] ({updated} file(s) re-evaluated)")
        self.console.print(f"Total files: {counts.total}")
        self.console.print(f"[yellow]Needing rename: {counts.needing_rename}[/yellow]")
        self.console.print(f"[green]Correctly named: {counts.not_needing_rename}[/green]")

    def show_analysis(self, analysis: RenameAnalysis, *, quiet: bool = False) -> None:
        """Print every field of a classification as a two-column table."""

        if quiet:
            return

        style = "yellow" if analysis.needs_rename else "green"
        table = Table(show_header=False, box=None)
        table.add_column("Field", style="bold")
        table.add_column("Value")
        table.add_row("Reason", Text(analysis.reason.value, style=style))
        table.add_row("Needs rename", "yes" if analysis.needs_rename else "no")
        table.add_row("Current path", Text(analysis.current_path or "-"))
        table.add_row("Expected path", Text(analysis.expected_path or "-"))
        table.add_row("Filename correct", "yes" if analysis.filename_correct else "no")
        table.add_row("Path correct", "yes" if analysis.path_correct else "no")
        self.console.print(table)
