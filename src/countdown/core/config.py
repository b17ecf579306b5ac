"""Configuration loading and management."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from countdown.core.exceptions import ConfigError, ConfigNotFoundError

COLOR_MODES = ("always", "never", "auto")


@dataclass(frozen=True)
class NotificationSettings:
    """How the "done" desktop notification is sent."""

    command: str = "notify-send"
    urgency: str = "critical"
    app_name: str = "countdown"
    title: str = "Countdown expired!"


@dataclass
class CountdownConfig:
    """Loaded configuration."""

    color: str = "auto"
    notify: bool = True
    notification: NotificationSettings = field(default_factory=NotificationSettings)

    _source_path: Path | None = field(default=None, repr=False)

    @property
    def source_path(self) -> Path | None:
        return self._source_path

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CountdownConfig:
        """Build a config from a parsed TOML table.

        Raises:
            ConfigError: If a value has the wrong type or is out of range.
        """
        color = str(data.get("color", "auto")).lower()
        if color not in COLOR_MODES:
            raise ConfigError(
                f"Invalid color value: {color!r}. Must be one of {', '.join(COLOR_MODES)}"
            )

        notify = data.get("notify", True)
        if not isinstance(notify, bool):
            raise ConfigError(f"Invalid notify value: {notify!r}. Must be true or false")

        table = data.get("notification", {})
        if not isinstance(table, dict):
            raise ConfigError("[notification] must be a table")
        unknown = set(table) - set(NotificationSettings.__dataclass_fields__)
        if unknown:
            raise ConfigError(f"Unknown [notification] keys: {', '.join(sorted(unknown))}")

        return cls(
            color=color,
            notify=notify,
            notification=NotificationSettings(**{k: str(v) for k, v in table.items()}),
        )


def find_config_file() -> Path | None:
    """Find configuration file in priority order.

    Search order:
    1. ./countdown.toml (current directory)
    2. ./pyproject.toml [tool.countdown] section
    3. ~/.config/countdown/config.toml
    """
    cwd = Path.cwd()
    if (cwd / "countdown.toml").exists():
        return cwd / "countdown.toml"

    if (cwd / "pyproject.toml").exists():
        try:
            with open(cwd / "pyproject.toml", "rb") as f:
                pyproject = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError):
            pyproject = {}
        if "countdown" in pyproject.get("tool", {}):
            return cwd / "pyproject.toml"

    user_config = Path.home() / ".config" / "countdown" / "config.toml"
    if user_config.exists():
        return user_config

    return None


def load_config(path: Path | str | None = None) -> CountdownConfig:
    """Load configuration from file.

    Args:
        path: Explicit config path or None to auto-discover

    Raises:
        ConfigNotFoundError: If an explicit path does not exist.
        ConfigError: If the file cannot be read or parsed.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            return CountdownConfig()  # Empty config, use defaults

    path = Path(path)
    if not path.exists():
        raise ConfigNotFoundError(f"Config file not found: {path}")

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    # Handle pyproject.toml
    if path.name == "pyproject.toml":
        data = data.get("tool", {}).get("countdown", {})

    config = CountdownConfig.from_dict(data)
    config._source_path = path

    return config


# Global config cache
_cached_config: CountdownConfig | None = None


def get_config() -> CountdownConfig:
    """Get the global configuration (cached)."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(path: Path | str | None = None) -> CountdownConfig:
    """Reload configuration (clears cache)."""
    global _cached_config
    _cached_config = load_config(path)
    return _cached_config
