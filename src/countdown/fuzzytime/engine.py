"""Natural-language time parsing.

:class:`WhenParser` runs an ordered list of :class:`~countdown.fuzzytime.rules.Rule`
objects against the input. The default parser registers the colon-time,
bare-hour and weekday ("next friday") rules, followed by the English rule set
from ``dateparser`` ("tomorrow 9am", "in 3 hours", "march 5 at 9pm", ...).
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

import dateparser

from countdown.core.exceptions import RuleError, UnknownFormatError
from countdown.core.timeutil import as_local
from countdown.fuzzytime.only_hour import OnlyHourRule
from countdown.fuzzytime.optional_hour import OptionalHourRule
from countdown.fuzzytime.rules import Context, Match, Rule
from countdown.fuzzytime.weekday import WeekdayRule

logger = logging.getLogger(__name__)


class DateparserRule(Rule):
    """Stock natural-language rules backed by ``dateparser``."""

    name = "dateparser"

    def __init__(self, languages: list[str] | None = None) -> None:
        self.languages = languages or ["en"]

    def find(self, text: str) -> Match | None:
        if not text.strip():
            return None
        return Match(text=text, captures=(text,), applier=self._apply, rule=self.name)

    def settings_for(self, base: datetime) -> dict[str, Any]:
        # dateparser reasons in naive wall-clock time
        return {
            "RELATIVE_BASE": base.replace(tzinfo=None),
            "PREFER_DATES_FROM": "future",
        }

    def _apply(self, match: Match, ctx: Context, base: datetime) -> bool:
        parsed = dateparser.parse(
            match.text,
            languages=self.languages,
            settings=self.settings_for(base),
        )
        if parsed is None:
            return False
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=base.tzinfo)
        else:
            parsed = parsed.astimezone(base.tzinfo)
        ctx.set_datetime(parsed)
        return True


class WhenParser:
    """Ordered registry of natural-language rules.

    The rule set is expected to be built once and then only read, so one
    parser can be shared by all callers.
    """

    def __init__(self, rules: list[Rule] | None = None) -> None:
        self._rules: list[Rule] = list(rules or [])

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    def add(self, *rules: Rule) -> None:
        self._rules.extend(rules)

    def parse(self, text: str, base: datetime) -> datetime | None:
        """Resolve *text* with the first rule that applies.

        Returns:
            The resolved time, or None when no rule recognises *text*.

        Raises:
            UnknownFormatError: If the only rules that matched were ill-formed;
                the last :class:`RuleError` is chained as the cause.
        """
        rule_error: RuleError | None = None
        for rule in self._rules:
            match = rule.find(text)
            if match is None:
                continue

            ctx = Context()
            try:
                applied = match.apply(ctx, base)
            except RuleError as e:
                logger.debug(f"Rule {rule.name} rejected {text!r}: {e}")
                rule_error = e
                continue

            if applied:
                logger.debug(f"Rule {rule.name} matched {text!r}")
                return ctx.time(base)

        if rule_error is not None:
            raise UnknownFormatError(f"unknown time format: {rule_error}") from rule_error
        return None


def new_parser() -> WhenParser:
    """Build a parser with the colon-time, bare-hour, weekday and English rules."""
    parser = WhenParser()
    parser.add(OptionalHourRule(), OnlyHourRule(), WeekdayRule())
    parser.add(DateparserRule(languages=["en"]))
    return parser


_parser = new_parser()


def parse_when(s: str, base: datetime) -> datetime:
    """Parse *s* as natural language relative to *base*.

    *base* is truncated to whole seconds first, so the result never carries
    the reference's sub-second part.

    Raises:
        UnknownFormatError: If the input is not recognised.
    """
    reference = as_local(base).replace(microsecond=0)
    result = _parser.parse(s, reference)
    if result is None:
        raise UnknownFormatError()
    return result
