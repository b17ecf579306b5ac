"""Parsing of standardized timestamp layouts (RFC3339, RFC822, RFC850, RFC1123)."""

from __future__ import annotations

import logging
import re
import time
from datetime import datetime, timezone, tzinfo
from typing import Callable

from dateutil import tz

from countdown.core.exceptions import UnknownFormatError
from countdown.core.timeutil import as_local, local_zone, now

logger = logging.getLogger(__name__)

_RFC3339_RE = re.compile(
    r"^(\d{4}-\d{2}-\d{2})[Tt](\d{2}:\d{2}:\d{2})(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)
_ZONE_ABBREV_RE = re.compile(r"^[A-Z]{1,5}$")

# Zones that are always UTC regardless of the host database
_UTC_NAMES = {"UTC", "GMT", "Z", "UT"}


def _zone_from_abbrev(abbrev: str) -> tzinfo:
    """Resolve a zone abbreviation.

    Unknown abbreviations are taken as UTC offset zero.
    """
    if abbrev in _UTC_NAMES:
        return timezone.utc
    if abbrev in time.tzname:
        return local_zone()
    return tz.gettz(abbrev) or timezone.utc


def _parse_rfc3339(s: str, fractional: bool) -> datetime | None:
    match = _RFC3339_RE.match(s)
    if not match:
        return None
    date, clock, fraction, zone = match.groups()
    if fractional != bool(fraction):
        return None
    if fraction:
        # datetime keeps microseconds; extra digits are truncated
        fraction = fraction[:7].ljust(7, "0")
    if zone in ("Z", "z"):
        zone = "+00:00"
    try:
        return datetime.fromisoformat(f"{date}T{clock}{fraction or ''}{zone}")
    except ValueError:
        return None


def _strptime(fmt: str) -> Callable[[str], datetime | None]:
    """Build a parser for a layout ending in a numeric ``%z`` offset."""

    def parse(s: str) -> datetime | None:
        try:
            return datetime.strptime(s, fmt)
        except ValueError:
            return None

    return parse


def _strptime_abbrev(fmt: str) -> Callable[[str], datetime | None]:
    """Build a parser for a layout ending in a zone abbreviation like ``MST``."""

    def parse(s: str) -> datetime | None:
        head, _, abbrev = s.rpartition(" ")
        if not head or not _ZONE_ABBREV_RE.match(abbrev):
            return None
        try:
            parsed = datetime.strptime(head, fmt)
        except ValueError:
            return None
        return parsed.replace(tzinfo=_zone_from_abbrev(abbrev))

    return parse


_parse_rfc822 = _strptime_abbrev("%d %b %y %H:%M")
_parse_rfc822z = _strptime("%d %b %y %H:%M %z")
_parse_rfc850 = _strptime_abbrev("%A, %d-%b-%y %H:%M:%S")
_parse_rfc1123 = _strptime_abbrev("%a, %d %b %Y %H:%M:%S")
_parse_rfc1123z = _strptime("%a, %d %b %Y %H:%M:%S %z")


def _parse_stamp(s: str, year: int) -> datetime | None:
    # Prefix the year so strptime never has to guess one
    try:
        return datetime.strptime(f"{year} {s}", "%Y %b %d %H:%M:%S")
    except ValueError:
        return None


KNOWN_LAYOUTS: list[tuple[str, Callable[[str, int], datetime | None]]] = [
    ("RFC3339", lambda s, year: _parse_rfc3339(s, fractional=False)),
    ("RFC3339Nano", lambda s, year: _parse_rfc3339(s, fractional=True)),
    ("RFC822", lambda s, year: _parse_rfc822(s)),
    ("RFC822Z", lambda s, year: _parse_rfc822z(s)),
    ("RFC850", lambda s, year: _parse_rfc850(s)),
    ("RFC1123", lambda s, year: _parse_rfc1123(s)),
    ("RFC1123Z", lambda s, year: _parse_rfc1123z(s)),
    ("Stamp", _parse_stamp),
]


def parse_known_layouts(s: str, base: datetime | None = None) -> datetime:
    """Parse *s* with the first matching standardized layout.

    Layouts without a zone are read as local time. The year-less ``Stamp``
    layout (``Jan _2 15:04:05``) takes its year from *base*, or from the
    current local time when no base is given.

    Raises:
        UnknownFormatError: If no layout matches.
    """
    year = (base or now()).year
    for name, parse in KNOWN_LAYOUTS:
        parsed = parse(s, year)
        if parsed is not None:
            logger.debug(f"Matched {s!r} as {name}")
            return as_local(parsed)
    raise UnknownFormatError()
