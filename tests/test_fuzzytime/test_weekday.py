"""Tests for the this/next weekday rule."""

import pytest

from countdown.fuzzytime.rules import Context
from countdown.fuzzytime.weekday import WeekdayRule


def resolve(text, base):
    match = WeekdayRule().find(text)
    assert match is not None, text
    ctx = Context()
    assert match.apply(ctx, base)
    return ctx.time(base)


class TestFind:
    @pytest.mark.parametrize("text", ["next friday", "this friday", "Next Fri", "NEXT   thurs"])
    def test_matches(self, text):
        assert WeekdayRule().find(text) is not None

    @pytest.mark.parametrize("text", ["friday", "next", "next week", "last friday", "next fridays"])
    def test_no_match(self, text):
        assert WeekdayRule().find(text) is None


class TestApply:
    # base is Wednesday 2022-06-15 10:00
    def test_later_this_week(self, base, local):
        assert resolve("next friday", base) == local(2022, 6, 17, 0, 0, 0)
        assert resolve("this friday", base) == local(2022, 6, 17, 0, 0, 0)

    def test_earlier_weekday_is_next_week(self, base, local):
        assert resolve("next monday", base) == local(2022, 6, 20, 0, 0, 0)

    def test_same_weekday_is_a_week_ahead(self, base, local):
        assert resolve("next wednesday", base) == local(2022, 6, 22, 0, 0, 0)
        assert resolve("this wed", base) == local(2022, 6, 22, 0, 0, 0)

    def test_crosses_month(self, local):
        assert resolve("next sunday", local(2022, 6, 30, 12, 0, 0)) == local(2022, 7, 3, 0, 0, 0)
