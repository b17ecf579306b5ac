"""Detect which date and clock fields a natural-language input pinned.

The parser does not report which fields came from the input and which were
filled in from the reference time. :func:`detect_fields` finds out by parsing
twice, against two references that differ in every field: a field the input
pinned comes out the same both times, a field taken from the reference does
not.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from countdown.core.timeutil import as_local, normalized
from countdown.fuzzytime.engine import parse_when

_FIELDS = ("year", "month", "day", "hour", "minute", "second", "microsecond")


@dataclass(frozen=True)
class FieldPresence:
    """A parsed time plus, per field, whether the input specified it."""

    t: datetime
    has_year: bool
    has_month: bool
    has_day: bool
    has_hour: bool
    has_minute: bool
    has_second: bool
    has_microsecond: bool

    @property
    def has_date(self) -> bool:
        """True when year, month and day were all specified."""
        return self.has_year and self.has_month and self.has_day

    def date_str(self) -> str:
        return f"{self.t.year}-{self.t.month}-{self.t.day}"


def perturb(base: datetime) -> datetime:
    """Return a reference that differs from *base* in every field.

    Each field is XOR-ed with 1; values that fall out of range carry over
    into the next larger unit.
    """
    return normalized(
        *(getattr(base, name) ^ 1 for name in _FIELDS),
        tzinfo=base.tzinfo,
    )


def detect_fields(
    s: str,
    base: datetime,
    parse: Callable[[str, datetime], datetime] = parse_when,
) -> FieldPresence:
    """Parse *s* against *base* and against :func:`perturb` of *base*.

    Raises:
        UnknownFormatError: If either parse fails.
    """
    base = as_local(base)
    t1 = parse(s, base)
    t2 = parse(s, perturb(base))
    return FieldPresence(
        t=t1,
        **{f"has_{name}": getattr(t1, name) == getattr(t2, name) for name in _FIELDS},
    )
