"""Tests for duration parsing."""

from datetime import timedelta

import pytest

from countdown.fuzzytime.duration import parse_delta, parse_duration


class TestParseDuration:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("10s", timedelta(seconds=10)),
            ("10m", timedelta(minutes=10)),
            ("1m30s", timedelta(minutes=1, seconds=30)),
            ("1h20m30s", timedelta(hours=1, minutes=20, seconds=30)),
            ("2d", timedelta(days=2)),
            ("1.5h", timedelta(hours=1, minutes=30)),
            (".5s", timedelta(milliseconds=500)),
            ("300ms", timedelta(milliseconds=300)),
            ("15us", timedelta(microseconds=15)),
            ("15µs", timedelta(microseconds=15)),
            ("1500ns", timedelta(microseconds=1)),
            ("+5m", timedelta(minutes=5)),
            ("-5m", timedelta(minutes=-5)),
            ("-1h30m", timedelta(hours=-1, minutes=-30)),
        ],
    )
    def test_valid(self, text, expected):
        assert parse_duration(text) == expected

    @pytest.mark.parametrize("text", ["", "10", "s", "10x", "1h 30m", "h1", "10:00", "3pm", "now", "--5m"])
    def test_invalid(self, text):
        assert parse_duration(text) is None


class TestParseDelta:
    def test_adds_to_base(self, base):
        t, ok = parse_delta("1h20m30s", base)
        assert ok
        assert t == base + timedelta(hours=1, minutes=20, seconds=30)

    def test_negative_is_matched(self, base):
        t, ok = parse_delta("-5m", base)
        assert ok
        assert t == base - timedelta(minutes=5)

    @pytest.mark.parametrize("text", ["", "5", "s"])
    def test_too_short(self, base, text):
        assert parse_delta(text, base) == (None, False)

    def test_not_a_duration(self, base):
        assert parse_delta("12:00", base) == (None, False)

    def test_overflow_is_not_a_match(self, base):
        assert parse_delta("99999999999h", base) == (None, False)
