"""Relative duration parsing, e.g. ``10s``, ``1h20m30s``, ``-5m``."""

from __future__ import annotations

import re
from datetime import datetime, timedelta
from decimal import Decimal

# Nanoseconds per unit
_UNITS: dict[str, int] = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # U+00B5 micro sign
    "μs": 1_000,  # U+03BC Greek small letter mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 60 * 60 * 1_000_000_000,
    "d": 24 * 60 * 60 * 1_000_000_000,
}

_UNIT_PATTERN = "|".join(sorted(map(re.escape, _UNITS), key=len, reverse=True))
_COMPONENT_RE = re.compile(rf"(\d+(?:\.\d*)?|\.\d+)({_UNIT_PATTERN})")
_DURATION_RE = re.compile(rf"^([-+]?)((?:(?:\d+(?:\.\d*)?|\.\d+)(?:{_UNIT_PATTERN}))+)$")


def parse_duration(s: str) -> timedelta | None:
    """Parse a signed sequence of ``<number><unit>`` components.

    Returns None when *s* is not a duration. Precision below one microsecond
    is truncated.
    """
    match = _DURATION_RE.match(s)
    if not match:
        return None
    sign, body = match.groups()

    nanoseconds = sum(
        Decimal(number) * _UNITS[unit] for number, unit in _COMPONENT_RE.findall(body)
    )
    microseconds = int(nanoseconds) // 1_000
    if sign == "-":
        microseconds = -microseconds
    try:
        return timedelta(microseconds=microseconds)
    except OverflowError:
        return None


def parse_delta(s: str, base: datetime) -> tuple[datetime | None, bool]:
    """Parse *s* as a duration and add it to *base*.

    Returns ``(base + duration, True)`` on a match and ``(None, False)``
    otherwise. Negative durations are returned as-is.
    """
    if len(s) < 2:
        return None, False
    delta = parse_duration(s)
    if delta is None:
        return None, False
    try:
        return base + delta, True
    except OverflowError:
        return None, False
