"""Tests for configuration system."""

import pytest

from countdown.core.config import (
    CountdownConfig,
    NotificationSettings,
    find_config_file,
    get_config,
    load_config,
    reload_config,
)
from countdown.core.exceptions import ConfigError, ConfigNotFoundError


class TestCountdownConfig:
    """Tests for CountdownConfig class."""

    def test_empty_config(self):
        """Test empty configuration."""
        config = CountdownConfig()
        assert config.color == "auto"
        assert config.notify is True
        assert config.notification == NotificationSettings()
        assert config.source_path is None

    def test_from_dict(self):
        config = CountdownConfig.from_dict(
            {"color": "ALWAYS", "notify": False, "notification": {"urgency": "low"}}
        )

        assert config.color == "always"
        assert config.notify is False
        assert config.notification.urgency == "low"
        assert config.notification.command == "notify-send"  # From defaults

    def test_invalid_color(self):
        with pytest.raises(ConfigError, match="Invalid color value"):
            CountdownConfig.from_dict({"color": "sometimes"})

    def test_invalid_notify(self):
        with pytest.raises(ConfigError, match="Invalid notify value"):
            CountdownConfig.from_dict({"notify": "yes"})

    def test_unknown_notification_key(self):
        with pytest.raises(ConfigError, match="sound"):
            CountdownConfig.from_dict({"notification": {"sound": "bell"}})


class TestLoadConfig:
    """Tests for config loading."""

    def test_load_config_from_file(self, sample_config):
        """Test loading config from a file."""
        config = load_config(sample_config)

        assert config.color == "never"
        assert config.notify is False
        assert config.notification.command == "my-notify"
        assert config.notification.urgency == "low"
        assert config.source_path == sample_config

    def test_load_config_from_pyproject(self, temp_dir):
        pyproject = temp_dir / "pyproject.toml"
        pyproject.write_text('[tool.countdown]\ncolor = "always"\n')

        config = load_config(pyproject)

        assert config.color == "always"

    def test_missing_explicit_path(self, temp_dir):
        with pytest.raises(ConfigNotFoundError):
            load_config(temp_dir / "nope.toml")

    def test_invalid_toml(self, temp_dir):
        bad = temp_dir / "countdown.toml"
        bad.write_text("color = \n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(bad)

    def test_defaults_without_file(self, temp_dir, in_dir, monkeypatch):
        """Test that loading falls back to defaults when no config is found."""
        monkeypatch.setenv("HOME", str(temp_dir))
        in_dir(temp_dir)

        config = load_config()

        assert config == CountdownConfig()

    def test_reload_config_replaces_cache(self, sample_config):
        reloaded = reload_config(sample_config)

        assert get_config() is reloaded
        assert get_config().color == "never"


class TestFindConfigFile:
    """Tests for config file discovery."""

    @pytest.fixture(autouse=True)
    def empty_home(self, temp_dir, monkeypatch):
        home = temp_dir / "home"
        home.mkdir()
        monkeypatch.setenv("HOME", str(home))
        return home

    def test_find_config_in_current_dir(self, temp_dir, in_dir):
        """Test finding config in current directory."""
        config_file = temp_dir / "countdown.toml"
        config_file.write_text('color = "never"\n')

        in_dir(temp_dir)

        assert find_config_file() == config_file

    def test_find_config_in_pyproject(self, temp_dir, in_dir):
        """Test finding config in pyproject.toml."""
        pyproject = temp_dir / "pyproject.toml"
        pyproject.write_text('[tool.countdown]\nnotify = false\n')

        in_dir(temp_dir)

        assert find_config_file() == pyproject

    def test_pyproject_without_section_is_skipped(self, temp_dir, in_dir):
        (temp_dir / "pyproject.toml").write_text('[project]\nname = "x"\n')

        in_dir(temp_dir)

        assert find_config_file() is None

    def test_find_user_config(self, temp_dir, in_dir, empty_home):
        user_config = empty_home / ".config" / "countdown" / "config.toml"
        user_config.parent.mkdir(parents=True)
        user_config.write_text("notify = false\n")

        in_dir(temp_dir)

        assert find_config_file() == user_config
