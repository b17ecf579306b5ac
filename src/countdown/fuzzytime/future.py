"""Resolve user input to a point in time that lies in the future."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from countdown.core.exceptions import (
    DurationNegativeError,
    TimeAlreadyPassedError,
    UnknownFormatError,
)
from countdown.core.timeutil import as_local, format_stamp, now
from countdown.fuzzytime.duration import parse_delta
from countdown.fuzzytime.layouts import parse_known_layouts
from countdown.fuzzytime.presence import detect_fields

logger = logging.getLogger(__name__)


def parse_future(s: str, base: datetime) -> datetime:
    """Parse *s* into a time no earlier than *base*.

    Strategies are tried in order and the first match wins:

    1. ``now`` (any case): the current time, regardless of *base*.
    2. A duration such as ``1h20m30s``, added to *base*.
    3. A standardized layout such as RFC3339.
    4. Natural language, e.g. ``12:00``, ``3pm`` or ``tomorrow 9am``.
       A result in the past is moved one day ahead when the input only named
       a time of day.

    Raises:
        DurationNegativeError: If the duration is negative.
        TimeAlreadyPassedError: If the time has passed and cannot be moved
            into the future.
        UnknownFormatError: If no strategy recognises *s*.
    """
    if s.casefold() == "now":
        return now()

    base = as_local(base)

    t, ok = parse_delta(s, base)
    if ok:
        logger.debug(f"Parsed {s!r} as a duration")
        if t < base:
            raise DurationNegativeError()
        return t

    try:
        t = parse_known_layouts(s, base)
    except UnknownFormatError:
        pass
    else:
        if t < base:
            raise TimeAlreadyPassedError(format_stamp(t))
        return t

    return _parse_when_future(s, base)


def _parse_when_future(s: str, base: datetime) -> datetime:
    d = detect_fields(s, base)
    if d.t > base:
        return d.t

    # The parsed time is in the past; only a bare time of day can move
    if d.has_date:
        raise TimeAlreadyPassedError(f"must be today or future day: {d.date_str()}")
    if not d.has_month and not d.has_day and d.has_hour:
        logger.debug(f"{s!r} has passed today, using the same time tomorrow")
        return d.t + timedelta(hours=24)
    raise TimeAlreadyPassedError(format_stamp(d.t))
