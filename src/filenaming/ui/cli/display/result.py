"""Display utilities for rename command results."""

from __future__ import annotations

from typing import final

from rich.console import Console

from filenaming.features.renaming import BatchRenameResult


@final
class RenameResultDisplay:
    """Render rename batch outcomes in the CLI."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_result(self, result: BatchRenameResult, *, quiet: bool = False) -> None:
        """Print a summary of the batch, listing moves and capped errors."""

        if quiet:
            return

        self.console.print("\n[bold]Rename Summary:[/bold]")
        self.console.print(f"Total files: {result.total}")
        self.console.print(f"[green]Renamed: {result.success_count}[/green]")
        if result.skipped_count:
            self.console.print(f"[yellow]Skipped: {result.skipped_count}[/yellow]")
        for pair in result.renamed:
            self.console.print(f"  • {pair.source} → {pair.destination}", markup=False)
        if result.failed_count:
            self.console.print(f"[red]Failed: {result.failed_count}[/red]")
            for error in result.reported_errors:
                self.console.print(f"  • {error}", style="red", markup=False)
        if result.commit_error:
            self.console.print(f"Not saved: {result.commit_error}", style="red", markup=False)
