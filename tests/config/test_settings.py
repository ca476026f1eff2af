"""Tests for settings module behavior."""

from __future__ import annotations

import importlib
from pathlib import Path


def test_defaults_flow_into_settings(config_runtime_env: Path) -> None:
    """Default configuration yields default naming and batch settings."""

    import filenaming.config.settings as settings

    reloaded = importlib.reload(settings)

    assert reloaded.NAMING_DEFAULTS.unknown_artist == "Unknown Artist"
    assert reloaded.NAMING_DEFAULTS.fallback_extension == "mp3"
    assert reloaded.STATUS_BATCH_SIZE == 100
    assert reloaded.MAX_REPORTED_ERRORS == 3
    assert reloaded.DB_PATH == config_runtime_env / ".data" / "filenaming.db"
    assert reloaded.LOG_FILE == config_runtime_env / "logs" / "filenaming.log"


def test_settings_follow_config_values(config_runtime_env: Path) -> None:
    """Configured values are validated before being exposed."""

    _ = config_runtime_env

    from filenaming.config.config import config as app_config

    app_config.unknown_title = "Untitled"
    app_config.fallback_extension = ".flac"
    app_config.status_batch_size = 0
    app_config.max_reported_errors = 5
    app_config.db_path = Path("/custom/library.db")

    import filenaming.config.settings as settings

    reloaded = importlib.reload(settings)

    assert reloaded.NAMING_DEFAULTS.unknown_title == "Untitled"
    assert reloaded.NAMING_DEFAULTS.fallback_extension == "flac"
    assert reloaded.STATUS_BATCH_SIZE == 100
    assert reloaded.MAX_REPORTED_ERRORS == 5
    assert reloaded.DB_PATH == Path("/custom/library.db")
