"""Rule for a bare hour, on the 24-hour clock (``15``) or with am/pm (``3pm``)."""

from __future__ import annotations

import re
from datetime import datetime

from countdown.core.exceptions import RuleError
from countdown.fuzzytime.rules import Context, Match, Rule

_ONLY_HOUR_RE = re.compile(r"^(\d+)\s*(am|pm)?$", re.ASCII | re.IGNORECASE)


def _pin_hour(ctx: Context, hour: int) -> None:
    ctx.hour = hour
    ctx.minute = 0
    ctx.second = 0
    ctx.microsecond = 0


def _apply_hour(match: Match, ctx: Context, base: datetime) -> bool:
    (hour,) = match.captures
    _pin_hour(ctx, hour)
    return True


def _apply_hour_and_am(match: Match, ctx: Context, base: datetime) -> bool:
    hour, meridiem = match.captures
    if hour > 12:
        raise RuleError(f"an AM/PM time must have hour between 0-12, but got: {hour}")
    if meridiem == "pm":
        if hour < 12:
            hour += 12
    elif hour == 12:
        hour = 0
    _pin_hour(ctx, hour)
    return True


class OnlyHourRule(Rule):
    """Single integer hour, optionally followed by ``am``/``pm``."""

    name = "only-hour"

    def find(self, text: str) -> Match | None:
        match = _ONLY_HOUR_RE.match(text)
        if not match:
            return None

        hour = int(match.group(1))
        meridiem = match.group(2)
        if meridiem is None:
            if hour > 24:
                return None
            return Match(text=text, captures=(hour,), applier=_apply_hour, rule=self.name)

        return Match(
            text=text,
            captures=(hour, meridiem.lower()),
            applier=_apply_hour_and_am,
            rule=self.name,
        )
