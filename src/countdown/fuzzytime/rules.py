"""Building blocks for natural-language parsing rules.

A rule looks at the input with :meth:`Rule.find` and, when it recognises it,
returns a :class:`Match`. Applying the match writes the fields it pins into a
:class:`Context`; fields left unset are filled in from the reference time when
the context is resolved with :meth:`Context.time`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable

from countdown.core.timeutil import normalized

Applier = Callable[["Match", "Context", datetime], bool]


@dataclass(frozen=True)
class Match:
    """A rule's hit on the input text."""

    text: str
    captures: tuple[Any, ...]
    applier: Applier = field(repr=False)
    rule: str = ""

    def apply(self, ctx: Context, base: datetime) -> bool:
        """Write the matched fields into *ctx*.

        Returns:
            True if the context was updated.

        Raises:
            RuleError: If the match is ill-formed, e.g. ``13pm``.
        """
        return self.applier(self, ctx, base)


@dataclass
class Context:
    """Fields pinned by applied matches; None means "take it from the reference"."""

    year: int | None = None
    month: int | None = None
    day: int | None = None
    hour: int | None = None
    minute: int | None = None
    second: int | None = None
    microsecond: int | None = None

    def set_datetime(self, value: datetime) -> None:
        """Pin every field to those of *value*."""
        self.year = value.year
        self.month = value.month
        self.day = value.day
        self.hour = value.hour
        self.minute = value.minute
        self.second = value.second
        self.microsecond = value.microsecond

    def time(self, base: datetime) -> datetime:
        """Resolve the context against *base*.

        Out-of-range values carry over, so ``hour=24`` is midnight of the
        next day.
        """

        def pick(value: int | None, fallback: int) -> int:
            return fallback if value is None else value

        return normalized(
            pick(self.year, base.year),
            pick(self.month, base.month),
            pick(self.day, base.day),
            pick(self.hour, base.hour),
            pick(self.minute, base.minute),
            pick(self.second, base.second),
            pick(self.microsecond, base.microsecond),
            tzinfo=base.tzinfo,
        )


class Rule(ABC):
    """Abstract base class for natural-language parsing rules."""

    name: str  # e.g., "optional-hour", "only-hour"

    @abstractmethod
    def find(self, text: str) -> Match | None:
        """Return a match if the rule recognises *text*, else None."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
