"""countdown: count down to a duration, a clock time, or a date."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("countdown")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"

from countdown.core.config import CountdownConfig, get_config, load_config, reload_config
from countdown.core.exceptions import (
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
from countdown.fuzzytime import parse_delta, parse_future, parse_known_layouts, parse_when

__all__ = [
    # Version
    "__version__",
    # Parsing
    "parse_future",
    "parse_known_layouts",
    "parse_delta",
    "parse_when",
    # Config
    "load_config",
    "get_config",
    "reload_config",
    "CountdownConfig",
    # Exceptions
    "CountdownError",
    "ParseError",
    "UnknownFormatError",
    "TimeAlreadyPassedError",
    "DurationNegativeError",
    "RuleError",
    "ConfigError",
    "ConfigNotFoundError",
    "NotifyError",
]
