"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger, setup helper and the Rich handler.
Why: Provide a single canonical import path for logging concerns.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger
from .handlers import RenamePathRichHandler

__all__ = [
    "LOGGER_NAME",
    "RenamePathRichHandler",
    "logger",
    "setup_logger",
]
