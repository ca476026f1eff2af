"""Shared path utilities for configuration and data locations.

This module centralizes how the application discovers locations for
config, data and log files.

Policy (portable by default):
- Config: repository-root ``<repo_root>/config/config.toml``
- Data: repository-root ``<repo_root>/.data`` unless overridden by
  ``FILENAMING_DATA_DIR``.
- Logs: repository-root ``<repo_root>/logs/filenaming.log``
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final


_ENV_DATA_DIR: Final[str] = "FILENAMING_DATA_DIR"
DATABASE_FILE_NAME: Final[str] = "filenaming.db"
LOG_FILE_NAME: Final[str] = "filenaming.log"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a path honoring explicit and environment overrides, in that order."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = (mapping.get(env_var) or "").strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    return default_factory().expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Detect the repository root by walking up parents.

    Looks for markers like ``pyproject.toml`` or ``.git``.

    Args:
        start: Starting path. Defaults to this file's directory.

    Returns:
        Path: Detected repository root, or the current working directory if
        no marker is found.
    """
    here = (start or Path(__file__).resolve()).parent
    for candidate in [here, *here.parents]:
        if (candidate / "pyproject.toml").exists() or (candidate / ".git").exists():
            return candidate
    return Path.cwd()


def default_config_path() -> Path:
    """Get the default path to the TOML config file."""

    return (_detect_repo_root() / "config" / "config.toml").resolve()


def default_data_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the directory for app data (the SQLite database)."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_DATA_DIR,
        default_factory=lambda: _detect_repo_root() / ".data",
    )


def default_db_path() -> Path:
    return default_data_dir() / DATABASE_FILE_NAME


def default_log_dir() -> Path:
    """Get the default directory for log files."""

    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    return (default_log_dir() / LOG_FILE_NAME).resolve()


__all__ = [
    "DATABASE_FILE_NAME",
    "LOG_FILE_NAME",
    "default_config_path",
    "default_data_dir",
    "default_db_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
