"""Analyze command implementation for the CLI."""

from __future__ import annotations

from typing import final

from filenaming.application.services.rename_service import RenameFilesService
from filenaming.features.renaming import RenameAnalysis
from filenaming.ui.cli.args.options import AnalyzeArgs
from filenaming.ui.cli.display.status import StatusDisplay


@final
class AnalyzeCommand:
    """Classify a single media file."""

    def __init__(self, args: AnalyzeArgs) -> None:
        self.args = args
        self.service = RenameFilesService(db_path=args.db_path)
        self.display = StatusDisplay()

    def execute(self) -> RenameAnalysis:
        analysis = self.service.analyze(self.args.file_id, self.args.pattern_id)
        self.display.show_analysis(analysis, quiet=self.args.quiet)
        return analysis
