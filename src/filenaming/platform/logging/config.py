"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Configure logging handlers and expose the shared application logger.
Why: Separate handler formatting from setup so configuration stays concise.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from filenaming.platform.filesystem import ensure_parent_directory

from .handlers import RenamePathRichHandler

LOGGER_NAME: Final[str] = "filenaming"


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """Set up and configure the application logger.

    Existing handlers are closed and replaced, so calling this again (e.g. from
    the CLI once the log file location is known) reconfigures in place.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    console = Console(stderr=True, soft_wrap=True)
    console_handler = RenamePathRichHandler(console=console)
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        resolved_log_file = Path(log_file).expanduser().resolve()
        _ = ensure_parent_directory(resolved_log_file)

        file_handler = logging.handlers.RotatingFileHandler(
            resolved_log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


# Console only until a caller knows where the log file belongs.
logger: Final[logging.Logger] = setup_logger()


__all__ = ["LOGGER_NAME", "logger", "setup_logger"]
