"""Custom exceptions for countdown."""


class CountdownError(Exception):
    """Base exception for countdown."""


class ParseError(CountdownError):
    """Error turning user input into a target time."""


class UnknownFormatError(ParseError):
    """No parsing strategy recognised the input."""

    def __init__(self, message: str = "unknown time format") -> None:
        super().__init__(message)


class TimeAlreadyPassedError(ParseError):
    """The parsed time is not in the future and cannot be moved there.

    The message carries a rendering of the offending time, either as a
    month-day stamp or, when the input pinned a full date, as the
    year-month-day triple.
    """

    prefix = "time already passed"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        super().__init__(f"{self.prefix}: {detail}" if detail else self.prefix)


class DurationNegativeError(TimeAlreadyPassedError):
    """A relative duration pointed into the past."""

    def __init__(self, detail: str = "duration cannot be negative") -> None:
        super().__init__(detail)


class RuleError(CountdownError):
    """A natural-language rule matched the input but the match is ill-formed."""


class ConfigError(CountdownError):
    """Error in configuration."""


class ConfigNotFoundError(ConfigError):
    """Configuration file not found."""


class NotifyError(CountdownError):
    """Desktop notification could not be sent."""
