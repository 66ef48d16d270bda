"""
Utility functions for the canal configuration package.

Duration values use the notation of the replication client this
configuration is written for ("5s", "200ms", "1h30m"), so parsing and
formatting of that notation lives here together with time zone lookup.
"""

import re
from datetime import timedelta, tzinfo
from decimal import Decimal
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

NANOS_PER_MICROSECOND = 1_000

# longest unit names first so "ms" is not read as "m"
_UNIT_NANOS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # micro sign
    "μs": 1_000,  # greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def duration_from_nanoseconds(nanoseconds: int) -> timedelta:
    """
    Convert an integer nanosecond count to a timedelta.

    Sub-microsecond precision is truncated toward zero.

    Raises:
        ValueError: If the duration does not fit in a timedelta
    """
    micros = abs(nanoseconds) // NANOS_PER_MICROSECOND
    try:
        duration = timedelta(microseconds=micros)
        if nanoseconds < 0:
            duration = -duration
    except OverflowError as e:
        raise ValueError(f"duration of {nanoseconds}ns is out of range") from e
    return duration


def parse_duration(value: str) -> timedelta:
    """
    Parse a duration string such as "300ms", "-1.5h" or "2h45m".

    Args:
        value: Signed sequence of decimal numbers, each with a unit suffix.
            Valid units are "ns", "us" (or "µs"), "ms", "s", "m", "h".
            A bare "0" is accepted as zero.

    Returns:
        The duration as a timedelta

    Raises:
        ValueError: If the string is not a valid duration
    """
    text = value
    negative = False
    if text[:1] in ("-", "+"):
        negative = text[0] == "-"
        text = text[1:]

    if text == "0":
        return timedelta(0)
    if not text:
        raise ValueError(f"invalid duration {value!r}")

    total = Decimal(0)
    pos = 0
    while pos < len(text):
        match = _DURATION_PART.match(text, pos)
        if match is None:
            raise ValueError(f"invalid duration {value!r}")
        number, unit = match.groups()
        total += Decimal(number) * _UNIT_NANOS[unit]
        pos = match.end()

    nanoseconds = int(total)
    try:
        return duration_from_nanoseconds(-nanoseconds if negative else nanoseconds)
    except ValueError as e:
        raise ValueError(f"invalid duration {value!r}: out of range") from e


def format_duration(duration: timedelta) -> str:
    """
    Format a timedelta in the notation accepted by parse_duration.

    Durations of a second or more are written as hours, minutes and
    seconds ("1h30m0s", "1m5.5s"); shorter ones use "ms" or "us".
    """
    micros = duration // timedelta(microseconds=1)
    if micros == 0:
        return "0s"

    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros < 1_000_000:
        if micros % 1_000 == 0:
            return f"{sign}{micros // 1_000}ms"
        return f"{sign}{micros}us"

    seconds, fraction = divmod(micros, 1_000_000)
    hours, remainder = divmod(seconds, 3600)
    minutes, seconds = divmod(remainder, 60)

    seconds_text = str(seconds)
    if fraction:
        seconds_text += "." + f"{fraction:06d}".rstrip("0")

    if hours:
        return f"{sign}{hours}h{minutes}m{seconds_text}s"
    if minutes:
        return f"{sign}{minutes}m{seconds_text}s"
    return f"{sign}{seconds_text}s"


def resolve_location(name: str) -> Optional[tzinfo]:
    """
    Look up an IANA time zone by name.

    Args:
        name: Zone name, e.g. "Asia/Shanghai" or "UTC". An empty string
            means no location.

    Returns:
        The zone, or None for an empty name

    Raises:
        ValueError: If the zone is unknown or the name is malformed
    """
    if not name:
        return None
    # directories in the zone database surface as OSError
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, OSError, ValueError) as e:
        raise ValueError(f"unknown time zone {name!r}") from e


def location_name(location: tzinfo) -> str:
    """
    Return the zone name under which a location can be resolved again.

    Raises:
        ValueError: If the location has no zone name, e.g. a fixed offset
    """
    key = getattr(location, "key", None)
    if not key:
        raise ValueError(f"time zone {location!r} has no IANA name")
    return key
