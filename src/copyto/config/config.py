"""Configuration management for copyto."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from copyto.config.file_ops import write_text_file
from copyto.config.paths import default_config_path
from copyto.platform.logging import logger

# TOML table holding the copy settings; keeps keys namespaced like ``copy_to.destination_path``.
SETTINGS_TABLE: Final[str] = "copy_to"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Destination folder for copies. Empty means "ask every time".
    destination_path: str = ""

    # Log file path
    log_file: Path | None = _path_field()

    # Singleton instance
    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        if self.destination_path is None:
            self.destination_path = ""
        self.destination_path = str(self.destination_path).strip()

    def save(self) -> None:
        """Save configuration to file."""

        try:
            target = default_config_path()
            write_text_file(target, self.render_toml())
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def render_toml(self) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# copyto Configuration File")
        lines.append("")

        # Top-level keys must come before any table header.
        lines.append("# Log file path (optional)")
        lines.append("# Where to store the application logs")
        lines.append('# Example: log_file = "/path/to/logs/copyto.log"')
        if self.log_file is not None:
            lines.append(f"log_file = {self._format_toml_value(self.log_file)}")
        lines.append("")

        lines.append(f"[{SETTINGS_TABLE}]")
        lines.append("# Destination folder for copied files and folders")
        lines.append("# A leading ~ expands to your home directory")
        lines.append("# Leave empty to pick a folder every time")
        lines.append('# Example: destination_path = "~/utils"')
        lines.append(f"destination_path = {self._format_toml_value(self.destination_path)}")
        lines.append("")

        return "\n".join(lines)

    @staticmethod
    def _format_toml_value(value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "Config":
        """Build a configuration from parsed TOML data."""

        table = data.get(SETTINGS_TABLE)
        settings: dict[str, Any] = table if isinstance(table, dict) else {}

        destination = settings.get("destination_path", "")
        if not isinstance(destination, str):
            raise ValueError(
                f"{SETTINGS_TABLE}.destination_path must be a string, got {type(destination).__name__}"
            )

        log_file = data.get("log_file")
        if log_file is not None and not isinstance(log_file, str):
            raise ValueError(f"log_file must be a string, got {type(log_file).__name__}")

        return cls(destination_path=destination, log_file=log_file)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        Returns:
            Config: Loaded configuration object. A default file is written when
            none exists yet.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                instance = cls.from_mapping(config_dict)
                logger.debug("Configuration loaded from %s", config_file)
                cls._instance = instance
                return instance

            config = cls()
            config.save()
            logger.debug("Created default configuration at %s", config_file)
            cls._instance = config
            return config

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` re-reads the file."""

        cls._instance = None


__all__ = ["Config", "SETTINGS_TABLE"]
