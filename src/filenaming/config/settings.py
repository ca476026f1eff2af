"""Where: src/filenaming/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple boundary checks.
"""

from __future__ import annotations

from pathlib import Path

from filenaming.config.config import (
    MAX_REPORTED_ERRORS_DEFAULT,
    STATUS_BATCH_SIZE_DEFAULT,
    config as app_config,
)
from filenaming.config.paths import default_db_path, default_log_file
from filenaming.features.naming import NamingDefaults

# Storage ----------------------------------------------------------------------

DB_PATH: Path = app_config.db_path or default_db_path()
LOG_FILE: Path = app_config.log_file or default_log_file()


# Naming defaults (passed explicitly into VariableBuilder) -----------------------

NAMING_DEFAULTS: NamingDefaults = NamingDefaults(
    unknown_artist=app_config.unknown_artist or "Unknown Artist",
    unknown_album=app_config.unknown_album or "Unknown Album",
    unknown_title=app_config.unknown_title or "Unknown Title",
    fallback_extension=(app_config.fallback_extension or "mp3").lstrip(".") or "mp3",
)


# Batch sizing -------------------------------------------------------------------

_status_batch_size = app_config.status_batch_size
STATUS_BATCH_SIZE: int = (
    _status_batch_size
    if isinstance(_status_batch_size, int) and _status_batch_size > 0
    else STATUS_BATCH_SIZE_DEFAULT
)

_max_reported_errors = app_config.max_reported_errors
MAX_REPORTED_ERRORS: int = (
    _max_reported_errors
    if isinstance(_max_reported_errors, int) and _max_reported_errors > 0
    else MAX_REPORTED_ERRORS_DEFAULT
)


__all__ = [
    "DB_PATH",
    "LOG_FILE",
    "MAX_REPORTED_ERRORS",
    "NAMING_DEFAULTS",
    "STATUS_BATCH_SIZE",
]
