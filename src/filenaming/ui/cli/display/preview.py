"""src/filenaming/ui/cli/display/preview.py
Where: CLI adapter layer for preview rendering.
What: Render planned renames as a Rich table.
Why: Let users review new names before anything moves on disk.
"""

from typing import final

from rich.console import Console
from rich.table import Table
from rich.text import Text

from filenaming.features.renaming import RenamePreview


@final
class PreviewDisplay:
    """Handles rename preview display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_previews(self, previews: list[RenamePreview], *, quiet: bool = False) -> None:
        """Display planned renames, one row per media file."""

        if quiet:
            return

        if not previews:
            self.console.print("[green]All selected files already match the naming pattern.[/green]")
            return

        table = Table(title="Planned renames", show_lines=False)
        table.add_column("ID", justify="right", style="dim")
        table.add_column("Current name")
        table.add_column("New name", style="cyan")
        table.add_column("Artist")
        table.add_column("Album")
        table.add_column("Quality", style="magenta")

        for preview in previews:
            table.add_row(
                str(preview.id) if preview.id is not None else "-",
                Text(preview.current_name),
                Text(preview.new_name),
                Text(preview.artist or ""),
                Text(preview.album or ""),
                Text(preview.quality or preview.format or ""),
            )

        self.console.print(table)
        self.console.print(f"\n[bold]{len(previews)}[/bold] file(s) would be renamed")
