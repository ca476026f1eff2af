"""Display management for CLI interface."""

from filenaming.ui.cli.display.preview import PreviewDisplay
from filenaming.ui.cli.display.result import RenameResultDisplay
from filenaming.ui.cli.display.status import StatusDisplay

__all__ = ["PreviewDisplay", "RenameResultDisplay", "StatusDisplay"]
