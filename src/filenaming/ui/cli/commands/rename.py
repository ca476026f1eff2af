"""src/filenaming/ui/cli/commands/rename.py
What: Preview and rename commands sharing one service wiring.
Why: Both select the same pattern and files; only the final step differs.
"""

from __future__ import annotations

from typing import final

from filenaming.application.services.rename_service import RenameFilesService
from filenaming.features.renaming import BatchRenameResult, RenamePreview
from filenaming.ui.cli.args.options import RenameArgs
from filenaming.ui.cli.display.preview import PreviewDisplay
from filenaming.ui.cli.display.result import RenameResultDisplay


@final
class PreviewCommand:
    """Show the renames a pattern would perform."""

    def __init__(self, args: RenameArgs) -> None:
        self.args = args
        self.service = RenameFilesService(db_path=args.db_path)
        self.display = PreviewDisplay()

    def execute(self) -> list[RenamePreview]:
        previews = self.service.preview(self.args.pattern_id, self.args.file_ids)
        self.display.show_previews(previews, quiet=self.args.quiet)
        return previews


@final
class RenameCommand:
    """Run the batch executor over the selected files."""

    def __init__(self, args: RenameArgs) -> None:
        self.args = args
        self.service = RenameFilesService(db_path=args.db_path)
        self.display = RenameResultDisplay()

    def execute(self) -> BatchRenameResult:
        result = self.service.rename(self.args.pattern_id, self.args.file_ids)
        self.display.show_result(result, quiet=self.args.quiet)
        return result
