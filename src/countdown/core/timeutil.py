"""Time helpers shared by the parser, the timer and the renderer."""

from __future__ import annotations

from datetime import datetime, timedelta, tzinfo

from dateutil import tz
from dateutil.relativedelta import relativedelta

_US_PER_MS = 1_000
_US_PER_SECOND = 1_000_000
_US_PER_MINUTE = 60 * _US_PER_SECOND
_US_PER_HOUR = 60 * _US_PER_MINUTE


def local_zone() -> tzinfo:
    """Return the host's local time zone."""
    return tz.tzlocal()


def now() -> datetime:
    """Return the current local time as an aware :class:`datetime`."""
    return datetime.now(local_zone())


def as_local(value: datetime) -> datetime:
    """Attach the local zone to a naive datetime; aware values pass through."""
    if value.tzinfo is None:
        return value.replace(tzinfo=local_zone())
    return value


def normalized(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
    tzinfo: tzinfo | None = None,
) -> datetime:
    """Build a datetime, carrying out-of-range fields into the next larger unit.

    ``normalized(2022, 13, 1)`` is January 2023 and ``hour=24`` is midnight of
    the following day, so callers may do arithmetic on single fields without
    range checks.
    """
    return datetime(year, 1, 1, tzinfo=tzinfo) + relativedelta(
        months=month - 1,
        days=day - 1,
        hours=hour,
        minutes=minute,
        seconds=second,
        microseconds=microsecond,
    )


def format_stamp(value: datetime) -> str:
    """Format as a month-day stamp, e.g. ``"Jun  5 09:00:00"``."""
    return f"{value:%b} {value.day:2d} {value:%H:%M:%S}"


def total_microseconds(delta: timedelta) -> int:
    return (delta.days * 86_400 + delta.seconds) * _US_PER_SECOND + delta.microseconds


def round_delta(delta: timedelta, unit: timedelta) -> timedelta:
    """Round *delta* to a multiple of *unit*, halfway values away from zero."""
    value = total_microseconds(delta)
    step = total_microseconds(unit)
    if step <= 0:
        return delta
    quotient, remainder = divmod(abs(value), step)
    if remainder * 2 >= step:
        quotient += 1
    rounded = quotient * step
    return timedelta(microseconds=-rounded if value < 0 else rounded)


def _decimal(whole: int, fraction: int, digits: int) -> str:
    if not fraction:
        return str(whole)
    return f"{whole}.{fraction:0{digits}d}".rstrip("0")


def format_duration(delta: timedelta) -> str:
    """Format a duration compactly, e.g. ``1h20m30s``, ``1m0s``, ``250ms``."""
    value = total_microseconds(delta)
    if value == 0:
        return "0s"

    sign = "-" if value < 0 else ""
    value = abs(value)

    if value < _US_PER_MS:
        return f"{sign}{value}µs"
    if value < _US_PER_SECOND:
        whole, fraction = divmod(value, _US_PER_MS)
        return f"{sign}{_decimal(whole, fraction, 3)}ms"

    hours, rest = divmod(value, _US_PER_HOUR)
    minutes, rest = divmod(rest, _US_PER_MINUTE)
    seconds, fraction = divmod(rest, _US_PER_SECOND)

    out = sign
    if hours:
        out += f"{hours}h"
    if hours or minutes:
        out += f"{minutes}m"
    return out + f"{_decimal(seconds, fraction, 6)}s"
