"""Tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from treedisk.config import ConfigError, DiskSettings, default_config_path, load_settings


class TestDiskSettings:
    """Tests for the DiskSettings model."""

    def test_defaults(self) -> None:
        """Test default settings."""
        settings = DiskSettings()

        assert settings.encoding is None
        assert settings.sentinel_separator is None
        assert settings.sort_entries is True

    def test_camel_case_aliases(self) -> None:
        """Test camelCase keys are accepted."""
        settings = DiskSettings.model_validate({"sentinelSeparator": "/", "sortEntries": False})

        assert settings.sentinel_separator == "/"
        assert settings.sort_entries is False

    def test_invalid_separator(self) -> None:
        """Test separators other than slash and backslash are rejected."""
        with pytest.raises(ValueError):
            DiskSettings(sentinel_separator=":")


class TestFromFile:
    """Tests for DiskSettings.from_file."""

    def test_loads_yaml(self, tmp_path: Path) -> None:
        """Test settings are read from YAML."""
        path = tmp_path / "config.yaml"
        path.write_text("encoding: utf-8\nsort_entries: false\n")

        settings = DiskSettings.from_file(path)

        assert settings.encoding == "utf-8"
        assert settings.sort_entries is False

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        """Test an empty file yields default settings."""
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert DiskSettings.from_file(path) == DiskSettings()

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            DiskSettings.from_file(tmp_path / "missing.yaml")

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        """Test malformed YAML raises ConfigError."""
        path = tmp_path / "config.yaml"
        path.write_text("encoding: [unclosed\n")

        with pytest.raises(ConfigError):
            DiskSettings.from_file(path)

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        """Test a YAML list raises ConfigError."""
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError):
            DiskSettings.from_file(path)

    def test_unknown_key_raises(self, tmp_path: Path) -> None:
        """Test unknown keys raise ConfigError."""
        path = tmp_path / "config.yaml"
        path.write_text("colour: blue\n")

        with pytest.raises(ConfigError):
            DiskSettings.from_file(path)


class TestLoadSettings:
    """Tests for load_settings."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """Test defaults are used when no settings file exists."""
        assert load_settings(tmp_path / "missing.yaml") == DiskSettings()

    def test_default_location_under_home(self, temp_home: Path) -> None:
        """Test the default settings file is resolved under the home directory."""
        config = temp_home / ".treedisk" / "config.yaml"
        config.parent.mkdir()
        config.write_text("sortEntries: false\n")

        assert default_config_path() == config
        assert load_settings().sort_entries is False

    def test_default_location_missing(self, temp_home: Path) -> None:
        """Test defaults are used when the home settings file is absent."""
        assert load_settings() == DiskSettings()

    def test_explicit_file(self, tmp_path: Path) -> None:
        """Test an explicit settings file is loaded."""
        path = tmp_path / "config.yaml"
        path.write_text("sentinelSeparator: /\n")

        assert load_settings(path).sentinel_separator == "/"
