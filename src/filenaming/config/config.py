"""Configuration management for filenaming."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from filenaming.config.paths import default_config_path
from filenaming.platform.filesystem import write_text_file
from filenaming.platform.logging import logger

STATUS_BATCH_SIZE_DEFAULT: Final[int] = 100
MAX_REPORTED_ERRORS_DEFAULT: Final[int] = 3


def _path_field(default: Path | None = None) -> Any:
    """Create a dataclass field flagged for ``Path`` conversion."""

    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # SQLite library database (defaults to <data_dir>/filenaming.db)
    db_path: Path | None = _path_field()

    # Log file path (defaults to <repo_root>/logs/filenaming.log)
    log_file: Path | None = _path_field()

    # Placeholders rendered when metadata is missing
    unknown_artist: str = "Unknown Artist"
    unknown_album: str = "Unknown Album"
    unknown_title: str = "Unknown Title"

    # Extension appended when a rendered name has none
    fallback_extension: str = "mp3"

    # Files per page when recomputing every needs-rename flag
    status_batch_size: int = STATUS_BATCH_SIZE_DEFAULT

    # Error messages listed in a batch summary before "and N more..."
    max_reported_errors: int = MAX_REPORTED_ERRORS_DEFAULT

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self) -> None:
        """Save configuration to the portable config path."""

        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = default_config_path()
        try:
            write_text_file(target, self._render_toml(config_dict))
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", target)

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = ["# filenaming configuration file", ""]

        lines.append("# SQLite library database (optional)")
        lines.append('# Example: db_path = "/path/to/filenaming.db"')
        if config["db_path"] is not None:
            lines.append(f"db_path = {self._format_toml_value(config['db_path'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/filenaming.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Placeholders used when artist, album or title metadata is missing")
        for key in ("unknown_artist", "unknown_album", "unknown_title"):
            lines.append(f"{key} = {self._format_toml_value(config[key])}")
        lines.append("")

        lines.append("# Extension appended when a rendered file name has none")
        lines.append(f"fallback_extension = {self._format_toml_value(config['fallback_extension'])}")
        lines.append("")

        lines.append("# Files per page when recomputing rename status for the whole library")
        lines.append(f"status_batch_size = {self._format_toml_value(config['status_batch_size'])}")
        lines.append("")

        lines.append("# Errors listed in a rename summary before the remainder is counted")
        lines.append(f"max_reported_errors = {self._format_toml_value(config['max_reported_errors'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from the portable config path.

        A missing file yields defaults; nothing is written on load.

        Returns:
            Config: Cached configuration instance.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()
        if not config_file.exists():
            instance = cls()
            logger.debug("No configuration at %s; using defaults", config_file)
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
            instance = cls(**{key: value for key, value in config_dict.items() if key in known})
            logger.debug("Configuration loaded from %s", config_file)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance


# Global configuration instance
config = Config.load()


__all__ = ["Config", "MAX_REPORTED_ERRORS_DEFAULT", "STATUS_BATCH_SIZE_DEFAULT", "config"]
