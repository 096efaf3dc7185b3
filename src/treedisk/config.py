"""Settings for the disk facade."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

# Default settings location
CONFIG_DIR_NAME = ".treedisk"
CONFIG_FILE_NAME = "config.yaml"


class ConfigError(Exception):
    """Error loading settings."""

    pass


class DiskSettings(BaseModel):
    """Facade settings.

    Attributes:
        encoding: Text encoding for reads and writes. None means the
            platform default.
        sentinel_separator: Separator appended to empty-directory entries.
            None means ``os.sep``.
        sort_entries: Visit directory entries in name order.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    encoding: str | None = None
    sentinel_separator: str | None = Field(default=None, alias="sentinelSeparator")
    sort_entries: bool = Field(default=True, alias="sortEntries")

    @field_validator("sentinel_separator")
    @classmethod
    def _check_separator(cls, value: str | None) -> str | None:
        if value is not None and value not in ("/", "\\"):
            raise ValueError("sentinel separator must be '/' or '\\'")
        return value

    @classmethod
    def from_file(cls, path: Path) -> DiskSettings:
        """Load settings from a YAML file.

        Args:
            path: Path to the settings file.

        Returns:
            Parsed DiskSettings.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ConfigError: If the YAML or any field is invalid.
        """
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")

        try:
            data = yaml.safe_load(path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Settings in {path} must be a mapping")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid settings in {path}: {e}") from e


def default_config_path() -> Path:
    """Get the settings file under the current home directory."""
    return Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def load_settings(path: Path | None = None) -> DiskSettings:
    """Load settings, falling back to defaults when no file exists.

    Args:
        path: Settings file. Defaults to ~/.treedisk/config.yaml.

    Returns:
        Loaded or default settings.
    """
    path = path or default_config_path()
    if not path.exists():
        return DiskSettings()
    return DiskSettings.from_file(path)
