"""Rule for a named weekday with ``this`` or ``next`` (``next friday``)."""

from __future__ import annotations

import re
from datetime import datetime, timedelta

from countdown.fuzzytime.rules import Context, Match, Rule

WEEKDAYS = {
    "monday": 0, "mon": 0,
    "tuesday": 1, "tue": 1, "tues": 1,
    "wednesday": 2, "wed": 2,
    "thursday": 3, "thu": 3, "thur": 3, "thurs": 3,
    "friday": 4, "fri": 4,
    "saturday": 5, "sat": 5,
    "sunday": 6, "sun": 6,
}

_WEEKDAY_RE = re.compile(
    r"^(this|next)\s+(" + "|".join(sorted(WEEKDAYS, key=len, reverse=True)) + r")$",
    re.ASCII | re.IGNORECASE,
)


def _apply_weekday(match: Match, ctx: Context, base: datetime) -> bool:
    (weekday,) = match.captures

    # Always the coming occurrence; the same weekday means a week from today
    days = (weekday - base.weekday()) % 7 or 7
    target = base + timedelta(days=days)

    ctx.year = target.year
    ctx.month = target.month
    ctx.day = target.day
    ctx.hour = 0
    ctx.minute = 0
    ctx.second = 0
    ctx.microsecond = 0
    return True


class WeekdayRule(Rule):
    """``this <weekday>`` or ``next <weekday>``, at midnight."""

    name = "weekday"

    def find(self, text: str) -> Match | None:
        match = _WEEKDAY_RE.match(text.strip())
        if not match:
            return None
        weekday = WEEKDAYS[match.group(2).lower()]
        return Match(text=text, captures=(weekday,), applier=_apply_weekday, rule=self.name)
