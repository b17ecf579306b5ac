"""Tests for field-presence detection."""

from datetime import datetime

import pytest

from countdown.core.exceptions import UnknownFormatError
from countdown.fuzzytime.presence import detect_fields, perturb

FIELDS = ("year", "month", "day", "hour", "minute", "second", "microsecond")


class TestPerturb:
    def test_every_field_differs(self, base):
        base = base.replace(minute=30, second=15, microsecond=500)
        other = perturb(base)
        for name in FIELDS:
            assert getattr(other, name) != getattr(base, name), name

    def test_values(self, base, local):
        assert perturb(base) == local(2023, 7, 14, 11, 1, 1, 1)

    def test_out_of_range_carries_over(self, local):
        # December xor 1 is month 13, i.e. January of the next year
        assert perturb(local(2022, 12, 10, 8, 0, 0)) == local(2024, 1, 11, 9, 1, 1, 1)

    def test_keeps_zone(self, base):
        assert perturb(base).tzinfo is base.tzinfo


class TestDetectFields:
    def test_clock_only(self, base, local):
        d = detect_fields("12:00", base)

        assert d.t == local(2022, 6, 15, 12, 0, 0)
        assert d.has_hour and d.has_minute and d.has_second
        assert not (d.has_year or d.has_month or d.has_day)
        assert not d.has_date

    def test_date_only(self, base):
        d = detect_fields("2020-01-01", base)

        assert d.has_year and d.has_month and d.has_day
        assert d.has_date
        assert d.date_str() == "2020-1-1"
        # dateparser pins a bare date to midnight instead of taking the
        # reference's clock, so the clock fields read as specified too
        assert d.t.hour == d.t.minute == d.t.second == 0
        assert d.has_hour and d.has_minute and d.has_second

    def test_relative_pins_nothing(self, base):
        d = detect_fields("in 3 hours", base)

        assert not any(getattr(d, f"has_{name}") for name in ("year", "month", "day", "hour", "minute"))

    def test_custom_parse_function(self, base):
        calls = []

        def parse(s: str, reference: datetime) -> datetime:
            calls.append(reference)
            return reference.replace(hour=7)

        d = detect_fields("x", base, parse=parse)

        assert calls == [base, perturb(base)]
        assert d.has_hour
        assert not d.has_minute

    def test_failure(self, base):
        with pytest.raises(UnknownFormatError):
            detect_fields("foobar", base)
