"""Rule for colon-separated clock times where any part may be left out.

Matches ``10:40:34`` as well as partial forms such as ``10:``, ``:40`` and
``::34``.
"""

from __future__ import annotations

import re
from datetime import datetime

from countdown.fuzzytime.rules import Context, Match, Rule

_OPTIONAL_HOUR_RE = re.compile(r"^(\d*):(\d*):?(\d*)$", re.ASCII)

_MAX_HOUR = 24
_MAX_MINUTE = 60
_MAX_SECOND = 60

_INVALID = object()


def _parse_part(text: str, limit: int) -> int | None | object:
    """Parse one clock part: None if empty, ``_INVALID`` if over *limit*."""
    if not text:
        return None
    value = int(text)
    if value > limit:
        return _INVALID
    return value


def match_optional_times(s: str) -> tuple[int | None, int | None, int | None] | None:
    """Split *s* into ``(hour, minute, second)``; empty parts are None.

    Returns None when *s* is not a colon time, when a part is out of range,
    or when every part is empty.
    """
    match = _OPTIONAL_HOUR_RE.match(s)
    if not match:
        return None

    parts = tuple(
        _parse_part(text, limit)
        for text, limit in zip(match.groups(), (_MAX_HOUR, _MAX_MINUTE, _MAX_SECOND))
    )
    if any(part is _INVALID for part in parts) or all(part is None for part in parts):
        return None
    return parts  # type: ignore[return-value]


def _apply_hour_min_sec(match: Match, ctx: Context, base: datetime) -> bool:
    hour, minute, second = match.captures

    ctx.hour = hour
    ctx.minute = minute if minute is not None else 0
    ctx.second = second if second is not None else 0
    ctx.microsecond = 0

    # Without an hour, a time earlier than the reference means the next hour
    if hour is None and ctx.time(base) < base:
        ctx.hour = base.hour + 1
    return True


class OptionalHourRule(Rule):
    """Colon time ``H:M:S`` with every component optional."""

    name = "optional-hour"

    def find(self, text: str) -> Match | None:
        parts = match_optional_times(text)
        if parts is None:
            return None
        return Match(text=text, captures=parts, applier=_apply_hour_min_sec, rule=self.name)
