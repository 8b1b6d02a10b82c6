"""Tests for ledgerview.config."""

import stat
from pathlib import Path

import pytest

from ledgerview.config import (
    DEFAULT_CONFIG,
    create_default_config,
    get_config_path,
    load_config,
    load_settings,
    save_config,
)


class TestConfigFile:
    """Tests for reading and writing the config file."""

    def test_path_follows_xdg(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should place the config under XDG_CONFIG_HOME."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_path() == tmp_path / "ledgerview" / "config.toml"

    def test_default_config_is_private(self, tmp_path: Path) -> None:
        """Should write the defaults with owner-only permissions."""
        config_path = tmp_path / "ledgerview" / "config.toml"

        create_default_config(config_path)

        assert load_config(config_path) == DEFAULT_CONFIG
        assert stat.S_IMODE(config_path.stat().st_mode) == 0o600

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Should raise FileNotFoundError from load_config."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "absent.toml")


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults_without_file(self, tmp_path: Path) -> None:
        """Should return the defaults when no file exists."""
        assert load_settings(tmp_path / "absent.toml") == DEFAULT_CONFIG

    def test_file_values_override_defaults(self, tmp_path: Path) -> None:
        """Should merge file values over the defaults."""
        config_path = tmp_path / "config.toml"
        save_config({"api_url": "https://budget.example/api", "page_size": 25}, config_path)

        settings = load_settings(config_path)

        assert settings["api_url"] == "https://budget.example/api"
        assert settings["page_size"] == 25
        assert settings["user_id"] == DEFAULT_CONFIG["user_id"]
        assert settings["log_level"] == DEFAULT_CONFIG["log_level"]
