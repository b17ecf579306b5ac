"""Core models and abstractions for countdown."""

from .config import CountdownConfig, NotificationSettings
from .exceptions import (
    ConfigError,
    ConfigNotFoundError,
    CountdownError,
    DurationNegativeError,
    NotifyError,
    ParseError,
    RuleError,
    TimeAlreadyPassedError,
    UnknownFormatError,
)

__all__ = [
    # Exceptions
    "ConfigError",
    "ConfigNotFoundError",
    "CountdownError",
    "DurationNegativeError",
    "NotifyError",
    "ParseError",
    "RuleError",
    "TimeAlreadyPassedError",
    "UnknownFormatError",
    # Config
    "CountdownConfig",
    "NotificationSettings",
]
