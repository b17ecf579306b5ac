"""Fuzzy parsing of future times.

Accepts durations (``10s``, ``1h20m30s``), standardized timestamps (RFC3339,
RFC822, RFC850, RFC1123), clock times (``12:00``, ``3pm``) and natural
language (``tomorrow 9am``), and resolves them to a time in the future.
"""

from countdown.fuzzytime.duration import parse_delta, parse_duration
from countdown.fuzzytime.engine import WhenParser, new_parser, parse_when
from countdown.fuzzytime.future import parse_future
from countdown.fuzzytime.layouts import parse_known_layouts
from countdown.fuzzytime.presence import FieldPresence, detect_fields

__all__ = [
    "parse_future",
    "parse_known_layouts",
    "parse_delta",
    "parse_duration",
    "parse_when",
    "detect_fields",
    "FieldPresence",
    "WhenParser",
    "new_parser",
]
