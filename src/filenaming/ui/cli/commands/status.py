"""Status command implementation for the CLI."""

from __future__ import annotations

from typing import final

from filenaming.application.services.rename_service import RenameFilesService, RenameStatusCounts
from filenaming.ui.cli.args.options import StatusArgs
from filenaming.ui.cli.display.status import StatusDisplay


@final
class StatusCommand:
    """Recompute needs-rename flags and report the counts."""

    def __init__(self, args: StatusArgs) -> None:
        self.args = args
        self.service = RenameFilesService(db_path=args.db_path)
        self.display = StatusDisplay()

    def execute(self) -> RenameStatusCounts:
        updated = self.service.refresh_status(self.args.track_id)
        counts = self.service.counts()
        self.display.show_counts(counts, updated=updated, quiet=self.args.quiet)
        return counts
